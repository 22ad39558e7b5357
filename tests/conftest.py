"""Shared fixtures for simulator tests."""

from datetime import datetime, timedelta, timezone

import pytest

from hostsim import runner
from hostsim.generators.sample_generator import MetricSample

FIXED_TIME = datetime(2024, 5, 1, 12, 0, 0, 123456, tzinfo=timezone(timedelta(hours=2)))


@pytest.fixture
def no_wait(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove the one-second pause between loop iterations."""
    monkeypatch.setattr(runner, "INTERVAL_SECONDS", 0)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_TIME


@pytest.fixture
def sample() -> MetricSample:
    return MetricSample(cpu=72.5, memory=80.25, disk=55.0, network=1010.125, time=FIXED_TIME)
