"""
Game constants for Snaky.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

OPPOSITE = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Screen coordinates: (0, 0) is the top-left cell, so UP => y - 1
MOVE_DELTAS = {
    UP:    (0, -1),
    DOWN:  (0, 1),
    LEFT:  (-1, 0),
    RIGHT: (1, 0),
}

# Board and speed settings (fixed, not runtime-configurable)
BOARD_SIZE = 20
INITIAL_SPEED_MS = 150
SPEED_FLOOR_MS = 60
SPEED_STEP_MS = 5

# Game status
RUNNING = "running"
OVER = "over"

# Why a game ended
END_WALL = "wall"
END_SELF = "self"
END_BOARD_FULL = "board_full"

INITIAL_SNAKE = (
    (BOARD_SIZE // 2, BOARD_SIZE // 2),
    (BOARD_SIZE // 2 - 1, BOARD_SIZE // 2),
)
INITIAL_DIRECTION = RIGHT
