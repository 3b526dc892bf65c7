"""
Player implementations for Snaky.

Players produce direction requests in place of a human at the keyboard.
"""

from .base import Player
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'RandomPlayer',
]
