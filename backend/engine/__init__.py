"""
Game loop and state machine for the snake game.
"""

from .core import GameEngine, GameResult, starting_body
from .errors import GridFullError
from .events import EventEmitter

__all__ = [
    'GameEngine',
    'GameResult',
    'starting_body',
    'GridFullError',
    'EventEmitter',
]
