"""
File-based OpenTelemetry metric exporter for the simulator's own counters.

Writes one JSON object per metric per export to a local JSON Lines file, so
loop throughput can be inspected without a collector.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from opentelemetry.sdk.metrics.export import MetricExporter, MetricExportResult, MetricsData

logger = logging.getLogger(__name__)


class FileMetricExporter(MetricExporter):
    """Export metrics to a JSON Lines file."""

    def __init__(self, output_path: str | Path):
        """Initialize file exporter; the file is created (or kept) so bad paths fail early."""
        super().__init__()
        self.output_path = Path(output_path)
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.output_path, "a", encoding="utf-8"):
            pass

    def export(
        self,
        metrics_data: MetricsData,
        timeout_millis: float = 10000,
        **kwargs,
    ) -> MetricExportResult:
        """Export metrics to file."""
        metric_dicts = []
        for resource_metrics in metrics_data.resource_metrics:
            resource_attrs = (
                dict(resource_metrics.resource.attributes) if resource_metrics.resource else {}
            )
            for scope_metrics in resource_metrics.scope_metrics:
                for metric in scope_metrics.metrics:
                    metric_dict: dict[str, Any] = {
                        "name": metric.name,
                        "description": metric.description,
                        "unit": metric.unit,
                        "resource": resource_attrs,
                        "timestamp": datetime.now().astimezone().isoformat(),
                        "data_points": [
                            {
                                "attributes": dict(dp.attributes or {}),
                                "start_time": dp.start_time_unix_nano,
                                "time": dp.time_unix_nano,
                                "value": dp.value,
                            }
                            for dp in metric.data.data_points
                        ],
                    }
                    metric_dicts.append(metric_dict)

        try:
            with open(self.output_path, "a", encoding="utf-8") as f:
                for metric_dict in metric_dicts:
                    f.write(json.dumps(metric_dict, default=str) + "\n")
        except OSError:
            logger.exception("Failed to export metrics to %s", self.output_path)
            return MetricExportResult.FAILURE

        return MetricExportResult.SUCCESS

    def shutdown(self, timeout_millis: float = 30000, **kwargs) -> None:
        """Shutdown exporter."""
        pass

    def force_flush(self, timeout_millis: float = 10000) -> bool:
        """Force flush."""
        return True
