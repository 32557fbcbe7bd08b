"""
Domain entities for the snake game engine.

This module contains the core game entities that are independent of
the loop, event plumbing and presentation concerns.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, ALLOWED_TURNS, OFFSETS, SCORE_PER_FOOD,
)
from .snake import Snake
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'ALLOWED_TURNS', 'OFFSETS',
    'SCORE_PER_FOOD',
    'Snake',
    'GameState',
]
