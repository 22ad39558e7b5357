"""
Self-metrics for the simulation loop.

Counts emitted samples and bytes written through an OpenTelemetry MeterProvider.
The provider is private to the simulator (not installed globally) and only
exports when a reader is attached, e.g. the file exporter or an in-memory
reader in tests.
"""

from collections.abc import Sequence

from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import (
    MetricExporter,
    MetricReader,
    PeriodicExportingMetricReader,
)
from opentelemetry.sdk.resources import Resource

from . import __version__

SAMPLES_EMITTED = "hostsim.samples.emitted"
BYTES_WRITTEN = "hostsim.bytes.written"


class SimulatorMetrics:
    """Counters describing simulator throughput."""

    def __init__(
        self,
        exporter: MetricExporter | None = None,
        readers: Sequence[MetricReader] = (),
        service_name: str = "hostsim",
        export_interval_ms: int = 5000,
    ):
        """Initialize meter provider; with no exporter and no readers nothing is exported."""
        metric_readers = list(readers)
        if exporter is not None:
            metric_readers.append(
                PeriodicExportingMetricReader(exporter, export_interval_millis=export_interval_ms)
            )

        resource = Resource.create(
            {"service.name": service_name, "service.version": __version__}
        )
        self.provider = MeterProvider(resource=resource, metric_readers=metric_readers)
        self.meter = self.provider.get_meter(__name__)
        self._setup_instruments()

    def _setup_instruments(self):
        self.samples_emitted = self.meter.create_counter(
            SAMPLES_EMITTED,
            description="Count of samples written to the sink",
            unit="1",
        )
        self.bytes_written = self.meter.create_counter(
            BYTES_WRITTEN,
            description="Bytes of JSON Lines output written to the file",
            unit="By",
        )

    def record_emit(self, size: int, output: str) -> None:
        """Record one persisted sample of the given encoded size."""
        attrs = {"hostsim.output": output}
        self.samples_emitted.add(1, attrs)
        self.bytes_written.add(size, attrs)

    def shutdown(self):
        """Flush pending exports and shut the meter provider down."""
        self.provider.shutdown()
