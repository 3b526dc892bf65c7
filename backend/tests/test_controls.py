"""
Tests for keyboard mapping.
"""

import sys
import os

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import UP, DOWN, LEFT, RIGHT, RUNNING, OVER
from domain.controls import direction_for_key, is_restart_key


@pytest.mark.parametrize("key, expected", [
    ("ArrowUp", UP), ("w", UP), ("W", UP),
    ("ArrowDown", DOWN), ("s", DOWN), ("S", DOWN),
    ("ArrowLeft", LEFT), ("a", LEFT), ("A", LEFT),
    ("ArrowRight", RIGHT), ("d", RIGHT), ("D", RIGHT),
])
def test_arrow_keys_and_wasd_map_to_directions(key, expected):
    assert direction_for_key(key) == expected


@pytest.mark.parametrize("key", ["q", "Escape", "", None, " ", "Enter"])
def test_other_keys_do_not_steer(key):
    assert direction_for_key(key) is None


@pytest.mark.parametrize("key", [" ", "Enter", "enter", "Space"])
def test_restart_keys_only_when_over(key):
    assert is_restart_key(key, OVER) is True
    assert is_restart_key(key, RUNNING) is False


def test_direction_keys_are_not_restart_keys():
    assert is_restart_key("w", OVER) is False
    assert is_restart_key(None, OVER) is False
