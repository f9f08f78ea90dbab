"""Tie-break strategies for equally scored candidate moves."""

from __future__ import annotations

import random
from typing import Callable, Sequence

from engine.rules import Coordinate

TieBreakStrategy = Callable[[Sequence[Coordinate]], Coordinate]

STRATEGY_NAMES = ("first", "random")


def first_move_strategy() -> TieBreakStrategy:
    """Take the first candidate in line-scan order."""

    def choose(candidates: Sequence[Coordinate]) -> Coordinate:
        return candidates[0]

    return choose


def random_move_strategy(rng: random.Random) -> TieBreakStrategy:
    """Pick a uniform index from the candidates.

    Duplicates are kept, so a coordinate shared by several tied lines is
    proportionally more likely to be picked.
    """

    def choose(candidates: Sequence[Coordinate]) -> Coordinate:
        return candidates[rng.randrange(len(candidates))]

    return choose


def build_strategy(name: str, rng: random.Random) -> TieBreakStrategy:
    """Resolve a strategy by config name."""
    if name == "first":
        return first_move_strategy()
    if name == "random":
        return random_move_strategy(rng)
    raise ValueError(f"Unsupported tie-break strategy: {name}")
