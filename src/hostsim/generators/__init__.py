"""Synthetic sample generators."""

from .sample_generator import MetricSample, SampleGenerator

__all__ = [
    "MetricSample",
    "SampleGenerator",
]
