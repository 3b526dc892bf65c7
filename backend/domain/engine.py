"""
GameEngine - advances a GameState one tick at a time.

All transitions are pure: the engine reads a state and returns a new one.
Collisions end the game through the returned state, never by raising.
"""

import logging
import random
from dataclasses import replace
from typing import Optional, Sequence

from .constants import (
    BOARD_SIZE,
    END_BOARD_FULL,
    END_SELF,
    END_WALL,
    INITIAL_DIRECTION,
    INITIAL_SNAKE,
    INITIAL_SPEED_MS,
    OVER,
    RUNNING,
    SPEED_FLOOR_MS,
    SPEED_STEP_MS,
    VALID_MOVES,
)
from .game_state import GameState, Position
from .snake import collision_body, is_opposite, is_out_of_bounds, next_head

logger = logging.getLogger(__name__)

# Random draws tried before falling back to listing the free cells
FOOD_SAMPLE_ATTEMPTS = 64


class InvalidDirectionError(ValueError):
    """Raised when a direction name is not one of UP, DOWN, LEFT, RIGHT."""


def validate_direction(direction: str) -> str:
    if direction not in VALID_MOVES:
        raise InvalidDirectionError(
            f"Unknown direction '{direction}'. Expected one of: {', '.join(sorted(VALID_MOVES))}"
        )
    return direction


def request_direction(current: str, requested: str) -> str:
    """
    Arbitrate a direction change.

    A request equal to the current direction, or its exact reverse, is
    rejected and the current direction stands. Anything else becomes the
    new committed direction.
    """
    validate_direction(requested)
    if requested == current or is_opposite(current, requested):
        return current
    return requested


def next_interval(interval_ms: int) -> int:
    return max(SPEED_FLOOR_MS, interval_ms - SPEED_STEP_MS)


class GameEngine:
    """
    Owns the game rules and the random source used for food placement.

    Args:
        rng: optional random.Random; pass a seeded one for reproducible games
    """

    def __init__(self, rng: Optional[random.Random] = None, board_size: int = BOARD_SIZE):
        self.rng = rng if rng is not None else random.Random()
        self.board_size = board_size

    def new_game(self) -> GameState:
        """Return the canonical starting state with freshly placed food."""
        snake = tuple(INITIAL_SNAKE)
        return GameState(
            snake=snake,
            food=self.random_food(snake),
            direction=INITIAL_DIRECTION,
            heading=INITIAL_DIRECTION,
            score=0,
            tick_interval_ms=INITIAL_SPEED_MS,
            status=RUNNING,
            board_size=self.board_size,
        )

    def reset(self) -> GameState:
        return self.new_game()

    def random_food(self, snake: Sequence[Position]) -> Optional[Position]:
        """
        Return a random cell (x, y) not occupied by the snake.

        Rejection sampling is tried first since the board is mostly empty
        for typical snake sizes. If that keeps missing, pick uniformly from
        the remaining free cells. Returns None when the board is full.
        """
        size = self.board_size
        occupied = set(snake)
        if len(occupied) >= size * size:
            return None

        for _ in range(FOOD_SAMPLE_ATTEMPTS):
            candidate = (self.rng.randrange(size), self.rng.randrange(size))
            if candidate not in occupied:
                return candidate

        free_cells = [
            (x, y)
            for y in range(size)
            for x in range(size)
            if (x, y) not in occupied
        ]
        return self.rng.choice(free_cells)

    def steer(self, state: GameState, requested: str) -> GameState:
        """
        Apply a direction request to the committed direction.

        Requests may arrive several times between two ticks and the latest
        accepted one wins. A request that would reverse the heading the
        snake actually moved on the last tick is also rejected, so two
        quick turns can never fold the head back into the neck.
        """
        validate_direction(requested)
        if state.is_over:
            return state

        accepted = request_direction(state.direction, requested)
        if accepted == state.direction or is_opposite(state.heading, accepted):
            return state

        return replace(state, direction=accepted)

    def tick(self, state: GameState) -> GameState:
        """
        Execute one step:
          1) Move the head one cell in the committed direction
          2) Check wall and self collisions (game over, nothing else changes)
          3) Grow, score and speed up when the head lands on the food
          4) Otherwise translate the snake, dropping its tail
        """
        if state.is_over:
            return state

        snake = state.snake
        new_head = next_head(snake[0], state.direction)

        hits_wall = is_out_of_bounds(new_head, state.board_size)
        will_grow = new_head == state.food
        hits_self = new_head in collision_body(snake, will_grow)

        if hits_wall or hits_self:
            reason = END_WALL if hits_wall else END_SELF
            logger.info(
                "Game over (%s) at %s after %d ticks, score %d",
                reason, new_head, state.ticks, state.score,
            )
            return replace(state, status=OVER, end_reason=reason)

        if will_grow:
            grown = (new_head,) + snake
            food = self.random_food(grown)
            score = state.score + 1
            interval = next_interval(state.tick_interval_ms)
            logger.debug("Ate food at %s, score %d, interval %dms", new_head, score, interval)

            if food is None:
                logger.info("Board full after %d ticks, score %d", state.ticks + 1, score)
                return replace(
                    state,
                    snake=grown,
                    food=None,
                    heading=state.direction,
                    score=score,
                    tick_interval_ms=interval,
                    status=OVER,
                    end_reason=END_BOARD_FULL,
                    ticks=state.ticks + 1,
                )

            return replace(
                state,
                snake=grown,
                food=food,
                heading=state.direction,
                score=score,
                tick_interval_ms=interval,
                ticks=state.ticks + 1,
            )

        return replace(
            state,
            snake=(new_head,) + snake[:-1],
            heading=state.direction,
            ticks=state.ticks + 1,
        )
