"""
Player implementations for the snake engine.

Players are automated input collaborators: they pick a heading from a
GameState snapshot and feed it to the engine through attach_player.
"""

from .base import Player, attach_player, next_cell, safe_moves
from .random_player import RandomPlayer
from .greedy_player import GreedyPlayer
from .variant_registry import get_player_class, list_variants, AVAILABLE_VARIANTS

__all__ = [
    'Player',
    'attach_player',
    'next_cell',
    'safe_moves',
    'RandomPlayer',
    'GreedyPlayer',
    'get_player_class',
    'list_variants',
    'AVAILABLE_VARIANTS',
]
