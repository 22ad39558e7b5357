"""
Drive the generate -> encode -> persist loop.

The simulator runs one iteration per INTERVAL_SECONDS on the calling thread
until the stop event is set, an iteration limit is reached, or an error
propagates out of the generator, serializer or sink. The wait between
iterations does not compensate for time spent in the iteration itself.
"""

import logging
import threading

from .config import SimulatorConfig
from .errors import FileAcquisitionError
from .exporters.file_exporter import FileMetricExporter
from .exporters.sink import JsonLinesSink
from .generators.sample_generator import SampleGenerator
from .instrumentation import SimulatorMetrics
from .serializers import encode_sample

INTERVAL_SECONDS = 1.0

logger = logging.getLogger(__name__)


class Simulator:
    """Run the sample pipeline at a fixed cadence."""

    def __init__(
        self,
        generator: SampleGenerator,
        sink: JsonLinesSink,
        metrics: SimulatorMetrics | None = None,
    ):
        self.generator = generator
        self.sink = sink
        self.metrics = metrics

    def step(self) -> str:
        """Run a single iteration and return the encoded line."""
        sample = self.generator.generate()
        line = encode_sample(sample)
        size = self.sink.emit(line)
        if self.metrics is not None:
            self.metrics.record_emit(size, str(self.sink.output_path))
        return line

    def run(
        self,
        stop_event: threading.Event | None = None,
        max_iterations: int | None = None,
    ) -> int:
        """
        Emit samples until cancelled.

        Args:
            stop_event: Cancellation token; checked before each iteration and
                used for the inter-iteration wait so a set() ends the wait early.
            max_iterations: Stop after this many samples (None = unbounded).

        Returns:
            Number of samples emitted.
        """
        stop = stop_event or threading.Event()
        emitted = 0

        while not stop.is_set():
            self.step()
            emitted += 1
            logger.debug("Emitted sample %d", emitted)

            if max_iterations is not None and emitted >= max_iterations:
                break
            stop.wait(INTERVAL_SECONDS)

        logger.info("Simulation stopped after %d samples", emitted)
        return emitted


def build_metrics(config: SimulatorConfig) -> SimulatorMetrics | None:
    """Self-metrics are only collected when a metrics file is configured."""
    if config.metrics_path is None:
        return None
    try:
        exporter = FileMetricExporter(config.metrics_path)
    except OSError as exc:
        raise FileAcquisitionError(
            f"Cannot open metrics file {config.metrics_path}: {exc}"
        ) from exc
    return SimulatorMetrics(exporter=exporter)


def run_simulation(
    config: SimulatorConfig,
    stop_event: threading.Event | None = None,
    max_iterations: int | None = None,
    generator: SampleGenerator | None = None,
) -> int:
    """Wire generator, sink and metrics from config and run until stopped."""
    generator = generator or SampleGenerator(clamp=config.clamp)
    metrics = build_metrics(config)

    try:
        with JsonLinesSink(config.output_path, append=config.append) as sink:
            simulator = Simulator(generator, sink, metrics=metrics)
            return simulator.run(stop_event=stop_event, max_iterations=max_iterations)
    finally:
        if metrics is not None:
            metrics.shutdown()
