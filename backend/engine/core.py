"""
Single-snake game engine.

Holds the snake, its heading, the food and the timing parameters, advances
the board one cell per tick and reports progress through named events
(see EventEmitter). Rendering and input devices live outside the engine:
they read the board through is_food_at / is_tail_at / get_current_state and
steer through set_direction / queue_direction.
"""

import logging
import queue
import random
import time
from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, List, Optional, Tuple

from domain.constants import (
    UP,
    VALID_MOVES,
    ALLOWED_TURNS,
    OFFSETS,
    DEFAULT_ROWS,
    DEFAULT_COLS,
    DEFAULT_TICK_RATE_MS,
    MIN_TICK_RATE_MS,
    LEVEL_UP_SPEEDUP,
    SCORE_PER_FOOD,
    EVENT_GAME_START,
    EVENT_TICK,
    EVENT_MOVE,
    EVENT_LEVEL_UP,
    EVENT_GAME_OVER,
    EVENT_GAME_END,
)
from domain.game_state import GameState
from domain.snake import Snake
from .errors import GridFullError
from .events import EventEmitter

logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]


def starting_body(rows: int, cols: int) -> List[Coordinate]:
    """
    Vertical three-cell snake with its head in the middle of the board,
    pointing UP. Shorter on boards with fewer than three rows below the middle.
    """
    head_row = rows // 2
    length = min(3, rows - head_row)
    return [(head_row + i, cols // 2) for i in range(length)]


@dataclass
class GameResult:
    score: int
    consumed: int
    ticks: int
    duration_seconds: float
    death_reason: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class GameEngine(EventEmitter):
    """
    Manages:
      - Board (rows, cols), 0-indexed, row 0 at the top
      - The snake and its heading
      - A single piece of food
      - Score and the tick rate (difficulty curve)
      - The run loop and its lifecycle events
    """

    def __init__(
        self,
        rows: int = DEFAULT_ROWS,
        cols: int = DEFAULT_COLS,
        tick_rate: float = DEFAULT_TICK_RATE_MS,
        borders: bool = False,
        body: Optional[Iterable[Coordinate]] = None,
        heading: str = UP,
        rng: Optional[random.Random] = None,
        max_food_attempts: Optional[int] = None
    ):
        super().__init__()
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid must be at least 1x1, got {rows}x{cols}.")
        if tick_rate <= 0:
            raise ValueError(f"Tick rate must be positive, got {tick_rate}.")
        if heading not in VALID_MOVES:
            raise ValueError(f"Unknown heading {heading!r}.")

        self.rows = rows
        self.cols = cols

        positions = [tuple(cell) for cell in body] if body is not None else starting_body(rows, cols)
        if not positions:
            raise ValueError("Snake body needs at least one cell.")
        if len(set(positions)) != len(positions):
            raise ValueError(f"Snake body has duplicate cells: {positions}")
        for (r, c) in positions:
            if not self._in_bounds(r, c):
                raise ValueError(f"Snake cell out of bounds at {(r, c)}.")

        # game controls
        self.start: Optional[float] = None
        self.end: Optional[int] = None
        self.ticks = 0
        self.tick_rate = float(tick_rate)
        self.borders = borders

        # food
        self.consumed = 0
        self.food: Optional[Coordinate] = None
        self.max_food_attempts = max_food_attempts or max(100, rows * cols * 4)

        # snake
        self.snake = Snake(positions)
        self.heading = heading

        self._locked = False
        self._pending_directions: "queue.Queue[str]" = queue.Queue()
        self._rng = rng or random.Random()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def body(self) -> List[Coordinate]:
        """Copy of the snake's cells, head first."""
        return list(self.snake.positions)

    @property
    def locked(self) -> bool:
        return self._locked

    def score(self) -> int:
        return self.consumed * SCORE_PER_FOOD

    def get_direction(self) -> str:
        return self.heading

    def is_food_at(self, row: int, col: int) -> bool:
        return self.food == (row, col)

    def is_tail_at(self, row: int, col: int) -> bool:
        return self.snake.occupies(row, col)

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick=self.ticks,
            body=self.body,
            heading=self.heading,
            food=self.food,
            consumed=self.consumed,
            score=self.score(),
            rows=self.rows,
            cols=self.cols,
            tick_rate=self.tick_rate,
            borders=self.borders,
            alive=self.snake.alive
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def set_direction(self, requested: str) -> None:
        """
        Turn the snake. Ignored while a tick is being processed and for any
        heading that is not perpendicular to the current one.
        """
        if self._locked:
            return
        self._turn(requested)

    def queue_direction(self, requested: str) -> None:
        """
        Ask for a turn from outside the loop (another thread, a tick listener).
        The loop applies at most one queued request per tick, before moving.
        """
        self._pending_directions.put(requested)

    def place_food(self) -> Coordinate:
        """
        Put the food on a random cell the snake does not occupy.

        Raises:
            GridFullError: the snake covers the board or no free cell was hit
                within max_food_attempts samples.
        """
        if len(self.snake) >= self.rows * self.cols:
            raise GridFullError(self.rows, self.cols, 0)

        for _ in range(self.max_food_attempts):
            row = self._rng.randrange(self.rows)
            col = self._rng.randrange(self.cols)
            if not self.snake.occupies(row, col):
                self.food = (row, col)
                logger.debug(f"Placed food at {self.food}")
                return self.food

        raise GridFullError(self.rows, self.cols, self.max_food_attempts)

    def set_food(self, row: int, col: int) -> None:
        """Place the food on a specific cell."""
        if not self._in_bounds(row, col):
            raise ValueError(f"Food out of bounds at {(row, col)}.")
        if self.snake.occupies(row, col):
            raise ValueError(f"Food cannot be placed on the snake at {(row, col)}.")
        self.food = (row, col)

    def clear_food(self) -> None:
        self.food = None

    def stop(self) -> None:
        """Mark the run as finished; the loop exits before its next sleep."""
        if self.end is None:
            self.end = self.ticks if self._locked else max(self.ticks - 1, 0)

    # ------------------------------------------------------------------
    # Movement
    # ------------------------------------------------------------------

    def get_next_coordinate(self) -> Optional[Coordinate]:
        """
        Where the head goes next, or None if the move is blocked (wall or self).
        """
        return self._next_move()[0]

    def _next_move(self) -> Tuple[Optional[Coordinate], Optional[str]]:
        row, col = self.snake.head
        d_row, d_col = OFFSETS[self.heading]
        next_row, next_col = row + d_row, col + d_col

        if not self._in_bounds(next_row, next_col):
            if self.borders:
                return None, "wall"
            next_row %= self.rows
            next_col %= self.cols

        # Compared against the whole body, current tail cell included
        if self.snake.occupies(next_row, next_col):
            return None, "self"

        return (next_row, next_col), None

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _turn(self, requested: str) -> bool:
        if requested in ALLOWED_TURNS[self.heading]:
            self.heading = requested
            return True
        return False

    def _drain_direction(self) -> None:
        try:
            requested = self._pending_directions.get_nowait()
        except queue.Empty:
            return
        self._turn(requested)

    def _on_tick(self, tick: int) -> None:
        self._drain_direction()

        next_cell, reason = self._next_move()
        if next_cell is None:
            logger.debug(f"Tick {tick}: collided with {reason} heading {self.heading}")
            self.snake.kill(reason, tick)
            self.end = tick
            self.emit(EVENT_GAME_OVER)
            return

        if self.is_food_at(*next_cell):
            # grow: keep the tail
            self.snake.advance(next_cell, grow=True)
            self.consumed += 1
            self.clear_food()
            self._level_up()
            self.place_food()
        else:
            self.snake.advance(next_cell)

        self.emit(EVENT_MOVE)

    def _level_up(self) -> None:
        floor = min(MIN_TICK_RATE_MS, self.tick_rate)
        self.tick_rate = max(floor, self.tick_rate - self.tick_rate * LEVEL_UP_SPEEDUP)
        logger.debug(f"Level up: consumed={self.consumed}, tick_rate={self.tick_rate:.1f}ms")
        self.emit(EVENT_LEVEL_UP)

    def _lock(self) -> None:
        self._locked = True

    def _unlock(self) -> None:
        self._locked = False

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    def setup(self) -> None:
        self.place_food()

    def step(self) -> bool:
        """
        Process one tick: emit "tick", then move the snake.

        Returns:
            True if the run continues, False once it has ended.
        """
        tick = self.ticks
        self._lock()
        try:
            self.emit(EVENT_TICK, tick)
            self._on_tick(tick)
        finally:
            self._unlock()
        self.ticks += 1
        return self.end is None

    def run(self) -> GameResult:
        """
        Play until the snake dies or stop() is called.

        Sleeps tick_rate milliseconds between ticks (fixed delay, no drift
        correction).
        """
        if self.start is not None:
            raise RuntimeError("This engine has already been run; create a new GameEngine.")

        self.start = time.time()
        logger.info(f"Game started on a {self.rows}x{self.cols} board (borders={self.borders})")
        self.emit(EVENT_GAME_START)
        self.setup()

        last_tick = 0
        while self.end is None:
            last_tick = self.ticks
            if not self.step():
                break
            time.sleep(self.tick_rate / 1000.0)

        self.emit(EVENT_GAME_END, last_tick)

        result = GameResult(
            score=self.score(),
            consumed=self.consumed,
            ticks=self.ticks,
            duration_seconds=time.time() - self.start,
            death_reason=self.snake.death_reason
        )
        logger.info(f"Game ended after {result.ticks} ticks: score={result.score}")
        return result
