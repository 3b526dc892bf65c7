"""
Snake geometry helpers: stepping the head and picking the cells a new
head may not land on.
"""

from typing import Sequence

from .constants import MOVE_DELTAS, OPPOSITE
from .game_state import Position


def next_head(head: Position, direction: str) -> Position:
    """Return the cell one step from head in the given direction."""
    dx, dy = MOVE_DELTAS[direction]
    return (head[0] + dx, head[1] + dy)


def is_opposite(a: str, b: str) -> bool:
    """True if direction a is the exact reverse of direction b."""
    return OPPOSITE.get(a) == b


def is_out_of_bounds(position: Position, size: int) -> bool:
    x, y = position
    return x < 0 or x >= size or y < 0 or y >= size


def collision_body(snake: Sequence[Position], will_grow: bool) -> Sequence[Position]:
    """
    Return the segments a new head must not touch.

    When growing the tail stays put, so the whole snake counts. Otherwise
    the tail cell is vacated this tick and may be entered.
    """
    if will_grow:
        return snake
    return snake[:-1]
