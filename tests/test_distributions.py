"""Tests for statistical distributions."""

import random

import pytest

from hostsim.statistics import NormalDistribution, UniformDistribution


def test_uniform_samples_stay_within_bounds() -> None:
    """Uniform draws never leave [low, high]."""
    rng = random.Random(1)
    dist = UniformDistribution(low=70.0, high=90.0)
    values = [dist.sample(rng) for _ in range(1000)]
    assert all(70.0 <= v <= 90.0 for v in values)


def test_normal_sample_uses_given_random_source() -> None:
    """Two sources with the same seed give the same draws."""
    dist = NormalDistribution(mean=70.0, stddev=20.0)
    a = [dist.sample(random.Random(7)) for _ in range(3)]
    b = [dist.sample(random.Random(7)) for _ in range(3)]
    assert a == b


def test_normal_mean_is_close_to_configured_mean() -> None:
    """Sample mean of many draws lands near the distribution mean."""
    rng = random.Random(3)
    dist = NormalDistribution(mean=1000.0, stddev=50.0)
    values = [dist.sample(rng) for _ in range(5000)]
    assert sum(values) / len(values) == pytest.approx(1000.0, abs=5.0)


def test_sample_bounded_clamps_both_ends() -> None:
    """sample_bounded clips draws to the given interval."""
    rng = random.Random(0)
    low = NormalDistribution(mean=-500.0, stddev=1.0)
    high = NormalDistribution(mean=500.0, stddev=1.0)
    assert low.sample_bounded(rng, 0.0, 100.0) == 0.0
    assert high.sample_bounded(rng, 0.0, 100.0) == 100.0


def test_sample_bounded_without_bounds_returns_raw_draw() -> None:
    """No bounds means the plain sample."""
    dist = NormalDistribution(mean=-500.0, stddev=0.0)
    assert dist.sample_bounded(random.Random(0)) == -500.0


def test_invalid_parameters_are_rejected() -> None:
    """Negative stddev and inverted uniform ranges raise ValueError."""
    with pytest.raises(ValueError):
        NormalDistribution(mean=0.0, stddev=-1.0)
    with pytest.raises(ValueError):
        UniformDistribution(low=10.0, high=1.0)
