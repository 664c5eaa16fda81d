# -*- coding: utf-8 -*-
"""
Game specific configuration.
"""
from dataclasses import dataclass

from numpy.random import PCG64DXSM, Generator, default_rng

from board2048.core.board import FOUR_PROBABILITY
from board2048.core.scoring import ScoringPolicy


@dataclass(frozen=True)
class GameConfig:
    """Settings of a game session."""

    seed: int | None = None  # None draws fresh entropy
    four_probability: float = FOUR_PROBABILITY
    scoring: ScoringPolicy = ScoringPolicy.REFERENCE
    title: str = "2048"

    def __post_init__(self):
        if not 0.0 <= self.four_probability <= 1.0:
            raise ValueError(f"four_probability must be within [0, 1], got {self.four_probability}")
        object.__setattr__(self, "scoring", ScoringPolicy(self.scoring))

    def make_generator(self) -> Generator:
        """Build the random number generator used by a session."""
        return default_rng(PCG64DXSM(self.seed))
