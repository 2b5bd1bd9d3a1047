"""
Random Source

Injected randomness so sampling can be replaced in tests.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np


class RandomSource(ABC):
    """Integer sampling capability."""

    @abstractmethod
    def uniform(self, low: int, high: int) -> int:
        """Uniform integer in [low, high)."""
        ...


class NumpyRandomSource(RandomSource):
    """RandomSource backed by a numpy Generator. Same seed, same stream."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def uniform(self, low: int, high: int) -> int:
        if high <= low:
            raise ValueError(f"Empty sampling range [{low}, {high})")
        return int(self._rng.integers(low, high))
