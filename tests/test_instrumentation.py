"""Tests for simulator self-metrics."""

import json

from opentelemetry.sdk.metrics.export import InMemoryMetricReader

from hostsim.exporters import FileMetricExporter
from hostsim.instrumentation import BYTES_WRITTEN, SAMPLES_EMITTED, SimulatorMetrics


def _values(reader: InMemoryMetricReader) -> dict[str, float]:
    data = reader.get_metrics_data()
    values = {}
    for resource_metrics in data.resource_metrics:
        for scope_metrics in resource_metrics.scope_metrics:
            for metric in scope_metrics.metrics:
                values[metric.name] = sum(dp.value for dp in metric.data.data_points)
    return values


def test_record_emit_counts_samples_and_bytes() -> None:
    """Each emit adds one sample and its byte size."""
    reader = InMemoryMetricReader()
    metrics = SimulatorMetrics(readers=[reader])

    metrics.record_emit(100, "data.json")
    metrics.record_emit(120, "data.json")

    values = _values(reader)
    assert values[SAMPLES_EMITTED] == 2
    assert values[BYTES_WRITTEN] == 220
    metrics.shutdown()


def test_resource_carries_service_name() -> None:
    """Exported metrics identify the simulator."""
    reader = InMemoryMetricReader()
    metrics = SimulatorMetrics(readers=[reader], service_name="hostsim-test")
    metrics.record_emit(1, "data.json")

    data = reader.get_metrics_data()
    attrs = dict(data.resource_metrics[0].resource.attributes)
    assert attrs["service.name"] == "hostsim-test"
    metrics.shutdown()


def test_file_exporter_creates_file_and_keeps_existing_records(tmp_path) -> None:
    """The metrics file is created up front and earlier exports are never discarded."""
    path = tmp_path / "metrics" / "self.jsonl"
    FileMetricExporter(path)
    assert path.read_text(encoding="utf-8") == ""

    path.write_text('{"name": "earlier"}\n', encoding="utf-8")
    metrics = SimulatorMetrics(exporter=FileMetricExporter(path))
    metrics.record_emit(5, "data.json")
    metrics.shutdown()

    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == '{"name": "earlier"}'
    assert any(json.loads(line)["name"] == SAMPLES_EMITTED for line in lines[1:])
