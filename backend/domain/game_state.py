"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import Any, Dict, List, Tuple, Optional


class GameState:
    """
    A snapshot of the engine at a specific tick.

    Attributes:
        tick: which tick we are in (0-based)
        body: list of (row, col), head first
        heading: current direction of travel
        food: (row, col) of the food, or None when absent
        consumed: how many pieces of food were eaten
        score: consumed * SCORE_PER_FOOD
        rows, cols: board dimensions
        tick_rate: delay between ticks in milliseconds
        borders: True if leaving the board is fatal, False if it wraps
        alive: whether the snake is still alive
    """

    def __init__(
        self,
        tick: int,
        body: List[Tuple[int, int]],
        heading: str,
        food: Optional[Tuple[int, int]],
        consumed: int,
        score: int,
        rows: int,
        cols: int,
        tick_rate: float,
        borders: bool,
        alive: bool = True
    ):
        self.tick = tick
        self.body = body
        self.heading = heading
        self.food = food
        self.consumed = consumed
        self.score = score
        self.rows = rows
        self.cols = cols
        self.tick_rate = tick_rate
        self.borders = borders
        self.alive = alive

    @property
    def head(self) -> Tuple[int, int]:
        return self.body[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        T = snake body
        H = snake head
        Row 0 is printed first (top of the board), column labels underneath.
        """
        board = [['.' for _ in range(self.cols)] for _ in range(self.rows)]

        if self.food is not None:
            fr, fc = self.food
            board[fr][fc] = 'F'

        for pos_idx, (r, c) in enumerate(self.body):
            board[r][c] = 'H' if pos_idx == 0 and self.alive else 'T'

        result = []
        for r in range(self.rows):
            result.append(f"{r:2d} {' '.join(board[r])}")

        # Only the last digit fits in a one-character column
        result.append("   " + " ".join(str(c % 10) for c in range(self.cols)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation (tuples become lists)."""
        return {
            "tick": self.tick,
            "body": [list(cell) for cell in self.body],
            "heading": self.heading,
            "food": list(self.food) if self.food is not None else None,
            "consumed": self.consumed,
            "score": self.score,
            "rows": self.rows,
            "cols": self.cols,
            "tick_rate": self.tick_rate,
            "borders": self.borders,
            "alive": self.alive,
        }

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, food={self.food}, "
            f"length={len(self.body)}, score={self.score}>"
        )
