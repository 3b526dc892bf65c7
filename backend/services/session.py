"""
GameSession - the single owner of a running game's state.

The HTTP handlers and the background ticker both go through one session,
so every tick, direction change and reset is serialized under a lock and
always reads a consistent snapshot of the previous state.
"""

import logging
import threading
from typing import Callable, List, Optional, Tuple

from domain.controls import direction_for_key, is_restart_key
from domain.engine import GameEngine
from domain.game_state import GameState

logger = logging.getLogger(__name__)


class GameSession:
    """
    Holds the current GameState for one game.

    Attributes:
        engine: GameEngine applying the rules
        games_played: number of games started, including the current one
    """

    def __init__(self, engine: Optional[GameEngine] = None):
        self.engine = engine if engine is not None else GameEngine()
        self._lock = threading.Lock()
        self._state = self.engine.new_game()
        self._reset_listeners: List[Callable[[GameState], None]] = []
        self.games_played = 1

    def snapshot(self) -> GameState:
        """Return the current state. GameState is immutable, so no copy is needed."""
        with self._lock:
            return self._state

    def current_game(self) -> Tuple[int, GameState]:
        """Return (game number, state) read together."""
        with self._lock:
            return self.games_played, self._state

    def add_reset_listener(self, listener: Callable[[GameState], None]) -> None:
        self._reset_listeners.append(listener)

    def steer(self, direction: str) -> GameState:
        with self._lock:
            self._state = self.engine.steer(self._state, direction)
            return self._state

    def tick(self, game_number: Optional[int] = None) -> Optional[GameState]:
        """
        Advance the game one step.

        With game_number set, the tick only applies to that game and None
        is returned if a reset has started a newer one.
        """
        with self._lock:
            if game_number is not None and game_number != self.games_played:
                return None

            previous = self._state
            self._state = self.engine.tick(previous)
            if self._state.is_over and not previous.is_over:
                logger.info(
                    "Game %d finished: %s, final score %d",
                    self.games_played, self._state.end_reason, self._state.score,
                )
            return self._state

    def reset(self) -> GameState:
        with self._lock:
            state = self._reset_locked()
        self._notify_reset(state)
        return state

    def handle_key(self, key: str) -> GameState:
        """
        Route a raw key press: restart keys reset a finished game,
        direction keys steer, anything else is ignored.
        """
        with self._lock:
            if is_restart_key(key, self._state.status):
                state = self._reset_locked()
            else:
                direction = direction_for_key(key)
                if direction is not None:
                    self._state = self.engine.steer(self._state, direction)
                return self._state

        self._notify_reset(state)
        return state

    def _reset_locked(self) -> GameState:
        self._state = self.engine.reset()
        self.games_played += 1
        logger.info("Started game %d", self.games_played)
        return self._state

    def _notify_reset(self, state: GameState) -> None:
        for listener in self._reset_listeners:
            listener(state)
