"""
hostsim - Synthetic host resource telemetry.

This package emits JSON Lines samples describing CPU, memory, disk and network
utilization of a simulated host, for exercising dashboards, log shippers and
alerting pipelines without a real instrumented machine.
"""

__version__ = "1.0.0"
