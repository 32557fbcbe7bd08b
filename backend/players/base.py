"""
Base player interface for the game engine.

A player is an automated input collaborator: it looks at a GameState and
names the heading it wants, and the engine decides whether the turn is legal.
"""

import random
from typing import Callable, Dict, Optional, Tuple

from domain.constants import ALLOWED_TURNS, OFFSETS, EVENT_TICK
from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    Each player is responsible for returning a heading given the current
    game state.
    """

    def __init__(self, name: str, rng: Optional[random.Random] = None):
        self.name = name
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> str:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT"
        """
        raise NotImplementedError


def next_cell(game_state: GameState, move: str) -> Optional[Tuple[int, int]]:
    """
    Cell the head would enter when moving in ``move``, wrapping on a
    borderless board. None when the move runs into a wall.
    """
    head_row, head_col = game_state.head
    d_row, d_col = OFFSETS[move]
    row, col = head_row + d_row, head_col + d_col

    if not (0 <= row < game_state.rows and 0 <= col < game_state.cols):
        if game_state.borders:
            return None
        row %= game_state.rows
        col %= game_state.cols
    return (row, col)


def safe_moves(game_state: GameState) -> Dict[str, Tuple[int, int]]:
    """
    Map each reachable heading (straight on or a legal turn) to its target cell,
    leaving out moves into a wall or into any body cell. The tail counts as
    body because the engine treats it as a collision.
    """
    body = set(game_state.body)
    options = (game_state.heading,) + ALLOWED_TURNS[game_state.heading]

    moves: Dict[str, Tuple[int, int]] = {}
    for move in options:
        cell = next_cell(game_state, move)
        if cell is None or cell in body:
            continue
        moves[move] = cell
    return moves


def attach_player(engine, player: Player) -> Callable[[], None]:
    """
    Let ``player`` steer ``engine``: on every tick the player's move is queued
    and applied before the snake moves.

    Returns:
        Disposer that detaches the player.
    """
    def on_tick(tick: int) -> None:
        move = player.get_move(engine.get_current_state())
        if move != engine.get_direction():
            engine.queue_direction(move)

    return engine.on(EVENT_TICK, on_tick)
