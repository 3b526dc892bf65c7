"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import VALID_MOVES
from domain.engine import request_direction
from domain.game_state import GameState
from domain.snake import collision_body, is_opposite, is_out_of_bounds, next_head
from .base import Player


class RandomPlayer(Player):
    """
    A random autopilot that picks a direction avoiding walls and self-collisions.

    Only directions the steering rule would accept are considered, plus
    keeping the current direction.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def get_move(self, game_state: GameState) -> str:
        snake = game_state.snake
        current = game_state.direction

        valid_moves: List[str] = []
        for move in sorted(VALID_MOVES):
            # Skip reversals, the engine would ignore them anyway
            if move != current and (
                request_direction(current, move) == current
                or is_opposite(game_state.heading, move)
            ):
                continue

            new_head = next_head(snake[0], move)

            # Check wall collisions
            if is_out_of_bounds(new_head, game_state.board_size):
                continue

            # Check self collisions (tail moves away unless we eat)
            if new_head in collision_body(snake, new_head == game_state.food):
                continue

            valid_moves.append(move)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return current

        return self.rng.choice(valid_moves)
