"""
Keyboard mapping for the presentation layer.

Key names follow browser KeyboardEvent.key values.
"""

from typing import Optional

from .constants import DOWN, LEFT, OVER, RIGHT, UP

KEY_BINDINGS = {
    "arrowup": UP,
    "w": UP,
    "arrowdown": DOWN,
    "s": DOWN,
    "arrowleft": LEFT,
    "a": LEFT,
    "arrowright": RIGHT,
    "d": RIGHT,
}

RESTART_KEYS = {" ", "space", "enter"}


def direction_for_key(key: Optional[str]) -> Optional[str]:
    """Map arrow keys and WASD (any case) to a direction, or None."""
    if not key:
        return None
    return KEY_BINDINGS.get(key.lower())


def is_restart_key(key: Optional[str], status: str) -> bool:
    """Space or Enter restarts, but only once the game is over."""
    if not key or status != OVER:
        return False
    return key.lower() in RESTART_KEYS
