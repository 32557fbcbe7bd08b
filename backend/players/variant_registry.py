"""
Registry for automated player variants.

Maps variant keys (e.g., 'random', 'greedy') to player classes so the CLI
can pick one by name.
"""

from typing import Dict, List, Type

from .base import Player
from .greedy_player import GreedyPlayer
from .random_player import RandomPlayer


PLAYER_VARIANTS: Dict[str, Type[Player]] = {
    "random": RandomPlayer,
    "greedy": GreedyPlayer,
}

# Canonical list of available variant keys
AVAILABLE_VARIANTS = list(PLAYER_VARIANTS.keys())


def get_player_class(variant: str = "random") -> Type[Player]:
    """
    Look up the player class for ``variant``.

    Raises:
        ValueError: unknown variant key
    """
    try:
        return PLAYER_VARIANTS[variant]
    except KeyError:
        raise ValueError(
            f"Unknown player variant '{variant}'. Available: {AVAILABLE_VARIANTS}"
        ) from None


def list_variants() -> List[str]:
    return list(AVAILABLE_VARIANTS)
