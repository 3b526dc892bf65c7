"""
GameTicker - drives a GameSession from a background thread.

The wait between ticks is re-read from the latest state every time, so
the game speeds up as the score rises. The ticker stops on its own once
the game is over and must be started again after a reset.
"""

import logging
import threading
from typing import Optional

from services.session import GameSession

logger = logging.getLogger(__name__)


class GameTicker:
    def __init__(self, session: GameSession):
        self.session = session
        self._thread: Optional[threading.Thread] = None
        self._stop_event = threading.Event()
        self._control_lock = threading.Lock()

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """
        Start ticking from the current state. A thread left over from an
        earlier game is cancelled first, so after a reset there is always
        exactly one live timer.
        """
        with self._control_lock:
            previous = self._thread
            self._stop_event.set()
            if previous is not None and previous is not threading.current_thread():
                previous.join()

            self._stop_event = threading.Event()
            self._thread = threading.Thread(
                target=self._run,
                args=(self._stop_event,),
                name="snaky-ticker",
                daemon=True,
            )
            self._thread.start()
            logger.debug("Ticker started")

    def stop(self, timeout: Optional[float] = 1.0) -> None:
        """Cancel the timer and wait for the thread to exit."""
        with self._control_lock:
            thread = self._thread
            self._stop_event.set()
            self._thread = None

        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
            logger.debug("Ticker stopped")

    def _run(self, stop_event: threading.Event) -> None:
        while not stop_event.is_set():
            game_number, state = self.session.current_game()
            if state.is_over:
                break

            # wait() returns True when stop() was called during the delay
            if stop_event.wait(state.tick_interval_ms / 1000):
                break

            # A reset during the wait belongs to the next timer
            if stop_event.is_set():
                break
            state = self.session.tick(game_number)
            if state is None:
                break
            if state.is_over:
                logger.debug("Ticker idle, game over (%s)", state.end_reason)
                break
