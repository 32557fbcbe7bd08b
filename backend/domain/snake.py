"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List, Tuple, Optional


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (row, col) from head at index 0 to tail at the end
        alive: whether the snake is still alive
        death_reason: 'wall' or 'self'
        death_round: the tick index when the snake died
    """

    def __init__(self, positions: List[Tuple[int, int]]):
        self.positions = deque(positions)
        self.alive = True
        self.death_reason: Optional[str] = None
        self.death_round: Optional[int] = None

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Tuple[int, int]:
        """Return the tail position (last element)."""
        return self.positions[-1]

    def __len__(self) -> int:
        return len(self.positions)

    def occupies(self, row: int, col: int) -> bool:
        return (row, col) in self.positions

    def advance(self, head: Tuple[int, int], grow: bool = False) -> None:
        """
        Move the snake one cell by pushing a new head.

        The tail is dropped unless the snake is growing this tick.
        """
        self.positions.appendleft(head)
        if not grow:
            self.positions.pop()

    def kill(self, reason: str, round_number: int) -> None:
        self.alive = False
        self.death_reason = reason
        self.death_round = round_number
