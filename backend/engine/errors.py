"""
Exceptions raised by the game engine.
"""


class GridFullError(RuntimeError):
    """Raised when no free cell could be found for the food."""

    def __init__(self, rows: int, cols: int, attempts: int):
        self.rows = rows
        self.cols = cols
        self.attempts = attempts
        super().__init__(
            f"Could not place food on a {rows}x{cols} grid after {attempts} attempts"
        )
