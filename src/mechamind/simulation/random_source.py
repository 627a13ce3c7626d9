"""Injectable uniform random sources for the motor simulator."""

from __future__ import annotations

from typing import Protocol

import numpy as np


class RandomSource(Protocol):
    """Anything that can draw a uniform float from [low, high)."""

    def uniform(self, low: float, high: float) -> float: ...


class NumpyRandomSource:
    """Uniform draws backed by a numpy ``Generator``."""

    def __init__(self, generator: np.random.Generator | None = None) -> None:
        self._generator = generator if generator is not None else np.random.default_rng()

    @classmethod
    def seeded(cls, seed: int | None) -> NumpyRandomSource:
        return cls(np.random.default_rng(seed))

    def uniform(self, low: float, high: float) -> float:
        return float(self._generator.uniform(low, high))
