"""Statistical distributions used to draw synthetic host metrics."""

from .distributions import Distribution, NormalDistribution, UniformDistribution

__all__ = [
    "Distribution",
    "NormalDistribution",
    "UniformDistribution",
]
