#!/usr/bin/env python3
"""
Play a game of snake in the terminal with an automated player.

Usage:
    python main.py
    python main.py --rows 10 --cols 20 --borders --player greedy
    python main.py --max-ticks 200 --tick-rate 50 --seed 7 --quiet

Grid size, tick rate and border mode default to SNAKE_ROWS, SNAKE_COLS,
SNAKE_TICK_RATE_MS and SNAKE_BORDERS (read from the environment or .env).
"""

import argparse
import json
import logging
import random
from typing import Any, Dict, List, Optional

from config import EngineSettings
from domain.constants import EVENT_GAME_OVER, EVENT_LEVEL_UP, EVENT_MOVE, EVENT_TICK
from engine import GameEngine
from players import AVAILABLE_VARIANTS, attach_player, get_player_class

logger = logging.getLogger(__name__)


def run_game(
    settings: EngineSettings,
    player_variant: str = "random",
    max_ticks: Optional[int] = None,
    seed: Optional[int] = None,
    quiet: bool = False
) -> Dict[str, Any]:
    """
    Run one game to completion and return its summary.

    Args:
        settings: grid size, tick rate and border mode
        player_variant: key from the player registry
        max_ticks: stop the game after this many ticks even if the snake lives
        seed: seed for food placement and the player's choices
        quiet: don't print the board after every move
    """
    rng = random.Random(seed)
    engine = GameEngine(
        rows=settings.rows,
        cols=settings.cols,
        tick_rate=settings.tick_rate,
        borders=settings.borders,
        rng=rng
    )

    player = get_player_class(player_variant)(rng=random.Random(seed))

    disposers: List = [attach_player(engine, player)]

    if max_ticks is not None:
        def stop_at_limit(tick: int) -> None:
            if tick + 1 >= max_ticks:
                logger.info(f"Reached max ticks ({max_ticks}), stopping.")
                engine.stop()

        disposers.append(engine.on(EVENT_TICK, stop_at_limit))

    if not quiet:
        def print_board() -> None:
            state = engine.get_current_state()
            print(f"\nTick {state.tick}  Score: {state.score}  Speed: {state.tick_rate:.0f}ms")
            print(state.print_board())

        disposers.append(engine.on(EVENT_MOVE, print_board))

    disposers.append(engine.on(
        EVENT_LEVEL_UP,
        lambda: logger.info(f"Level up! Tick rate is now {engine.tick_rate:.0f}ms")
    ))
    disposers.append(engine.on(
        EVENT_GAME_OVER,
        lambda: logger.info(f"Game over: snake hit {engine.snake.death_reason}")
    ))

    try:
        result = engine.run()
    finally:
        for dispose in disposers:
            dispose()

    summary = result.to_dict()
    summary["player"] = player.name
    summary["final_state"] = engine.get_current_state().to_dict()
    return summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run a snake game driven by an automated player.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument("--rows", type=int, default=None,
                        help="Number of rows on the board (default: SNAKE_ROWS or 16)")
    parser.add_argument("--cols", type=int, default=None,
                        help="Number of columns on the board (default: SNAKE_COLS or 32)")
    parser.add_argument("--tick-rate", type=float, default=None,
                        help="Initial delay between ticks in milliseconds (default: SNAKE_TICK_RATE_MS or 400)")

    border_group = parser.add_mutually_exclusive_group()
    border_group.add_argument("--borders", dest="borders", action="store_true", default=None,
                              help="Leaving the board ends the game")
    border_group.add_argument("--wrap", dest="borders", action="store_false",
                              help="Leaving the board wraps to the opposite edge")

    parser.add_argument("--player", choices=AVAILABLE_VARIANTS, default="random",
                        help="Automated player that steers the snake")
    parser.add_argument("--max-ticks", type=int, default=None,
                        help="Stop after this many ticks")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for reproducible games")
    parser.add_argument("--quiet", action="store_true",
                        help="Only print the final result")
    parser.add_argument("--log-level", default=None,
                        help="Logging level (default: LOG_LEVEL or INFO)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = EngineSettings.from_env()
    if args.rows is not None:
        settings.rows = args.rows
    if args.cols is not None:
        settings.cols = args.cols
    if args.tick_rate is not None:
        settings.tick_rate = args.tick_rate
    if args.borders is not None:
        settings.borders = args.borders
    if args.log_level is not None:
        settings.log_level = args.log_level.upper()

    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    result = run_game(
        settings,
        player_variant=args.player,
        max_ticks=args.max_ticks,
        seed=args.seed,
        quiet=args.quiet
    )

    print("\nGame Result Summary:")
    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
