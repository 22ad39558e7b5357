"""Output sinks and exporters."""

from .file_exporter import FileMetricExporter
from .sink import JsonLinesSink

__all__ = [
    "JsonLinesSink",
    "FileMetricExporter",
]
