from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_DIMENSION = 4
DEFAULT_WINNING_THRESHOLD = 2048
DEFAULT_FOUR_PROBABILITY = 0.1
MAX_DIMENSION = 16


@dataclass(frozen=True)
class GameConfig:
    """Settings fixed for the lifetime of a game."""
    dimension: int = DEFAULT_DIMENSION
    winning_threshold: int = DEFAULT_WINNING_THRESHOLD
    four_probability: float = DEFAULT_FOUR_PROBABILITY

    def __post_init__(self) -> None:
        if not 1 <= self.dimension <= MAX_DIMENSION:
            raise ValueError(f"dimension must be within [1, {MAX_DIMENSION}], got {self.dimension}")
        if self.winning_threshold < 1:
            raise ValueError(f"winning threshold must be positive, got {self.winning_threshold}")
        if not 0.0 <= self.four_probability <= 1.0:
            raise ValueError(f"four probability must be within [0, 1], got {self.four_probability}")

    @classmethod
    def from_env(cls, dimension: Optional[int] = None, winning_threshold: Optional[int] = None,
                 four_probability: Optional[float] = None) -> 'GameConfig':
        """
        Builds a config, with explicit arguments taking precedence over
        SLIDE2048_DIMENSION, SLIDE2048_TARGET and SLIDE2048_FOUR_PROB.
        """
        if dimension is None:
            dimension = int(os.getenv('SLIDE2048_DIMENSION', str(DEFAULT_DIMENSION)))
        if winning_threshold is None:
            winning_threshold = int(os.getenv('SLIDE2048_TARGET', str(DEFAULT_WINNING_THRESHOLD)))
        if four_probability is None:
            four_probability = float(os.getenv('SLIDE2048_FOUR_PROB', str(DEFAULT_FOUR_PROBABILITY)))
        return cls(dimension=dimension, winning_threshold=winning_threshold, four_probability=four_probability)


def debug_enabled() -> bool:
    """Set SLIDE2048_DEBUG=1 to print move and spawn traces."""
    return os.getenv('SLIDE2048_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')
