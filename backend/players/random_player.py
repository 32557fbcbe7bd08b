"""
Random player implementation - picks random safe moves.
"""

import random
from typing import Optional

from domain.game_state import GameState
from .base import Player, safe_moves


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids walls and self-collisions.
    """

    def __init__(self, name: str = "random", rng: Optional[random.Random] = None):
        super().__init__(name, rng)

    def get_move(self, game_state: GameState) -> str:
        valid_moves = sorted(safe_moves(game_state))

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return game_state.heading

        return self.rng.choice(valid_moves)
