"""
Generate synthetic host metric samples.

Field distributions:
- cpu: Normal(70, 20), percent
- memory: Uniform[70, 90], percent
- disk: Uniform[50, 70], percent
- network: Normal(1000, 50), throughput

Draws are not validated. Enable clamping to bound percentage fields to
[0, 100] and network to non-negative values.
"""

import random
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from ..statistics.distributions import Distribution, NormalDistribution, UniformDistribution

CPU_DISTRIBUTION = NormalDistribution(mean=70.0, stddev=20.0)
MEMORY_DISTRIBUTION = UniformDistribution(low=70.0, high=90.0)
DISK_DISTRIBUTION = UniformDistribution(low=50.0, high=70.0)
NETWORK_DISTRIBUTION = NormalDistribution(mean=1000.0, stddev=50.0)

PERCENT_MIN = 0.0
PERCENT_MAX = 100.0


@dataclass(frozen=True)
class MetricSample:
    """One synthetic reading of host resource utilization."""

    cpu: float
    memory: float
    disk: float
    network: float
    time: datetime


def local_now() -> datetime:
    """Current wall-clock time, timezone-aware in the local zone."""
    return datetime.now().astimezone()


class SampleGenerator:
    """Draw MetricSample records from fixed distributions."""

    def __init__(
        self,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] | None = None,
        clamp: bool = False,
    ):
        """Initialize generator; the default random source is seeded from wall-clock time."""
        self.rng = rng if rng is not None else random.Random(time.time_ns())
        self.clock = clock or local_now
        self.clamp = clamp

    @classmethod
    def seeded(cls, seed: int, **kwargs) -> "SampleGenerator":
        """Create a generator whose draws are reproducible for the given seed."""
        return cls(rng=random.Random(seed), **kwargs)

    def _draw(self, dist: Distribution, max_val: float | None) -> float:
        if not self.clamp:
            return dist.sample(self.rng)
        return dist.sample_bounded(self.rng, PERCENT_MIN, max_val)

    def generate(self) -> MetricSample:
        """Produce one sample. Draw order is cpu, memory, disk, network."""
        cpu = self._draw(CPU_DISTRIBUTION, PERCENT_MAX)
        memory = self._draw(MEMORY_DISTRIBUTION, PERCENT_MAX)
        disk = self._draw(DISK_DISTRIBUTION, PERCENT_MAX)
        network = self._draw(NETWORK_DISTRIBUTION, None)

        return MetricSample(
            cpu=cpu,
            memory=memory,
            disk=disk,
            network=network,
            time=self.clock(),
        )
