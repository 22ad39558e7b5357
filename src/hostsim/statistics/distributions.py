"""
Statistical distributions for host telemetry generation.

Each distribution draws from an explicitly passed random.Random instance rather
than the module-level generator, so callers control seeding.
"""

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass


class Distribution(ABC):
    """Base class for statistical distributions."""

    @abstractmethod
    def sample(self, rng: random.Random) -> float:
        """Draw a single sample from the distribution."""
        pass

    def sample_bounded(
        self,
        rng: random.Random,
        min_val: float | None = None,
        max_val: float | None = None,
    ) -> float:
        """Draw a sample with optional bounds."""
        value = self.sample(rng)
        if min_val is not None:
            value = max(min_val, value)
        if max_val is not None:
            value = min(max_val, value)
        return value


@dataclass(frozen=True)
class NormalDistribution(Distribution):
    """
    Normal (Gaussian) distribution.

    Unbounded: draws can land below zero or far above the mean.
    """

    mean: float = 0.0
    stddev: float = 1.0

    def __post_init__(self):
        if self.stddev < 0:
            raise ValueError("stddev must be >= 0")

    def sample(self, rng: random.Random) -> float:
        return rng.gauss(self.mean, self.stddev)


@dataclass(frozen=True)
class UniformDistribution(Distribution):
    """Uniform distribution over [low, high]."""

    low: float = 0.0
    high: float = 1.0

    def __post_init__(self):
        if self.low > self.high:
            raise ValueError("low must be <= high")

    def sample(self, rng: random.Random) -> float:
        return rng.uniform(self.low, self.high)
