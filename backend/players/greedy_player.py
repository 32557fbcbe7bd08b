"""
Greedy player - heads for the food along the shortest grid distance.
"""

import random
from typing import Optional, Tuple

from domain.game_state import GameState
from .base import Player, safe_moves


def _axis_distance(a: int, b: int, size: int, wraps: bool) -> int:
    d = abs(a - b)
    return min(d, size - d) if wraps else d


class GreedyPlayer(Player):
    """
    Among the safe moves, pick the one whose target cell is closest to the
    food (Manhattan distance, measured around the edges on a borderless
    board). On a tie the current heading wins; otherwise the rng picks.
    """

    def __init__(self, name: str = "greedy", rng: Optional[random.Random] = None):
        super().__init__(name, rng)

    def distance(self, game_state: GameState, cell: Tuple[int, int]) -> int:
        food_row, food_col = game_state.food
        wraps = not game_state.borders
        return (
            _axis_distance(cell[0], food_row, game_state.rows, wraps)
            + _axis_distance(cell[1], food_col, game_state.cols, wraps)
        )

    def get_move(self, game_state: GameState) -> str:
        moves = safe_moves(game_state)
        if not moves:
            return game_state.heading

        if game_state.food is None:
            best = sorted(moves)
        else:
            distances = {move: self.distance(game_state, cell) for move, cell in moves.items()}
            shortest = min(distances.values())
            best = sorted(move for move, d in distances.items() if d == shortest)

        if game_state.heading in best:
            return game_state.heading
        return self.rng.choice(best)
