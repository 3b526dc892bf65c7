"""
Domain entities for the Snaky game engine.

This module contains the core game rules that are independent of
presentation concerns (HTTP, timers, rendering).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITE,
    BOARD_SIZE, INITIAL_SPEED_MS, SPEED_FLOOR_MS, SPEED_STEP_MS,
    RUNNING, OVER, INITIAL_SNAKE, INITIAL_DIRECTION,
)
from .game_state import GameState
from .engine import GameEngine, InvalidDirectionError, request_direction
from .controls import direction_for_key, is_restart_key

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'OPPOSITE',
    'BOARD_SIZE', 'INITIAL_SPEED_MS', 'SPEED_FLOOR_MS', 'SPEED_STEP_MS',
    'RUNNING', 'OVER', 'INITIAL_SNAKE', 'INITIAL_DIRECTION',
    'GameState',
    'GameEngine',
    'InvalidDirectionError',
    'request_direction',
    'direction_for_key',
    'is_restart_key',
]
