#!/usr/bin/env python3
"""
Play a headless game of Snaky with the random autopilot.

Usage:
    python cli/simulate.py
    python cli/simulate.py --seed 7 --max-ticks 500 --quiet
    python cli/simulate.py --delay 0.05
"""

import os
import sys
import json
import time
import random
import argparse
import logging
from typing import Any, Dict

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv  # noqa: E402

from domain.engine import GameEngine  # noqa: E402
from players.random_player import RandomPlayer  # noqa: E402
from services.session import GameSession  # noqa: E402

logger = logging.getLogger(__name__)


def run_simulation(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Run a single game until it ends or max_ticks steps have been played.

    Args:
        args: namespace with seed, max_ticks, quiet and delay

    Returns:
        A dictionary summarizing the game (score, ticks, end_reason, ...).
    """
    seed = getattr(args, "seed", None)
    engine_rng = random.Random(seed)
    player_rng = random.Random(None if seed is None else seed + 1)

    session = GameSession(GameEngine(rng=engine_rng))
    player = RandomPlayer(rng=player_rng)

    state = session.snapshot()
    while not state.is_over and state.ticks < args.max_ticks:
        session.steer(player.get_move(state))
        state = session.tick()

        if not args.quiet:
            print(f"\nTick {state.ticks} | score {state.score} | {state.steps_per_second} steps/sec")
            print(state.print_board())
        if args.delay:
            time.sleep(args.delay)

    if not state.is_over:
        logger.info("Stopped after %d ticks without a collision", state.ticks)

    return {
        "score": state.score,
        "ticks": state.ticks,
        "length": len(state.snake),
        "status": state.status,
        "end_reason": state.end_reason,
        "steps_per_second": state.steps_per_second,
    }


def main(argv=None):
    load_dotenv()

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    parser = argparse.ArgumentParser(
        description="Play a game of Snaky headlessly with a random autopilot."
    )
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and autopilot choices")
    parser.add_argument("--max-ticks", type=int, default=1000,
                        help="Stop after this many ticks")
    parser.add_argument("--quiet", action="store_true",
                        help="Do not print the board after each tick")
    parser.add_argument("--delay", type=float, default=0.0,
                        help="Seconds to sleep between ticks")

    args = parser.parse_args(argv)

    result = run_simulation(args)

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))
    return result


if __name__ == "__main__":
    main()
