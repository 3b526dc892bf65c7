"""
GameState entity - a snapshot of the game at a point in time.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .constants import BOARD_SIZE, OVER, RUNNING

Position = Tuple[int, int]

EMPTY_CELL = "empty"
SNAKE_CELL = "snake"
HEAD_CELL = "head"
FOOD_CELL = "food"


@dataclass(frozen=True)
class GameState:
    """
    A snapshot of the game at a specific point in time.

    The engine never mutates a GameState; every tick or accepted
    direction change produces a new one.

    Attributes:
        snake: tuple of (x, y) from head at index 0 to tail at the end
        food: (x, y) of the food, or None once the board is full
        direction: committed direction applied on the next tick
        heading: direction applied on the last tick
        score: number of foods eaten
        tick_interval_ms: delay between ticks, shrinks as score rises
        status: 'running' or 'over'
        end_reason: e.g., 'wall', 'self', 'board_full' (None while running)
        ticks: number of steps applied so far
        board_size: width and height of the square board
    """

    snake: Tuple[Position, ...]
    food: Optional[Position]
    direction: str
    heading: str
    score: int
    tick_interval_ms: int
    status: str = RUNNING
    end_reason: Optional[str] = None
    ticks: int = 0
    board_size: int = BOARD_SIZE

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.snake[0]

    @property
    def is_over(self) -> bool:
        return self.status == OVER

    @property
    def steps_per_second(self) -> float:
        """Display speed, rounded to one decimal."""
        return round(1000 / self.tick_interval_ms, 1)

    def cells(self) -> List[str]:
        """
        Classify every board cell in row-major order (index = y * size + x).

        Food is placed last, matching how the board has always been drawn.
        """
        size = self.board_size
        cells = [EMPTY_CELL] * (size * size)

        for idx, (x, y) in enumerate(self.snake):
            cells[y * size + x] = HEAD_CELL if idx == 0 else SNAKE_CELL

        if self.food is not None:
            fx, fy = self.food
            cells[fy * size + fx] = FOOD_CELL

        return cells

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        S = snake body
        H = snake head
        Row y=0 is printed first (top of the screen), x-axis labels at bottom.
        """
        symbols = {EMPTY_CELL: '.', SNAKE_CELL: 'S', HEAD_CELL: 'H', FOOD_CELL: 'F'}
        cells = self.cells()
        size = self.board_size

        result = []
        for y in range(size):
            row = cells[y * size:(y + 1) * size]
            result.append(f"{y:2d} {' '.join(symbols[c] for c in row)}")

        # Only the last digit fits in a single column
        result.append("   " + " ".join(str(i % 10) for i in range(size)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly snapshot for the presentation layer."""
        return {
            "snake": [list(segment) for segment in self.snake],
            "food": list(self.food) if self.food is not None else None,
            "direction": self.direction,
            "score": self.score,
            "tickIntervalMs": self.tick_interval_ms,
            "stepsPerSecond": self.steps_per_second,
            "status": self.status,
            "endReason": self.end_reason,
            "ticks": self.ticks,
            "boardSize": self.board_size,
            "cells": self.cells(),
        }

    def __repr__(self):
        return (
            f"<GameState status={self.status}, score={self.score}, "
            f"head={self.head}, food={self.food}, length={len(self.snake)}>"
        )
