"""
JSON Lines encoding of metric samples.

A sample becomes one JSON object on a single line with keys in the order
cpu, memory, disk, network, time. The timestamp is ISO 8601 with microseconds
and a numeric UTC offset.
"""

import json
import math
from datetime import datetime
from typing import Any

from .errors import SerializationError
from .generators.sample_generator import MetricSample

FIELD_ORDER = ("cpu", "memory", "disk", "network", "time")
_NUMERIC_FIELDS = FIELD_ORDER[:-1]


def _format_time(value: Any) -> str:
    if not isinstance(value, datetime):
        raise SerializationError(f"time must be a datetime, got {type(value).__name__}")
    if value.tzinfo is None or value.utcoffset() is None:
        raise SerializationError("time must be timezone-aware")
    return value.isoformat(timespec="microseconds")


def _check_number(name: str, value: Any) -> float:
    # bool is an int subclass but is not a metric value
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise SerializationError(f"{name} must be a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise SerializationError(f"{name} is not finite: {value!r}")
    return float(value)


def sample_to_dict(sample: MetricSample) -> dict[str, Any]:
    """Build the ordered, JSON-ready mapping for a sample."""
    record: dict[str, Any] = {
        name: _check_number(name, getattr(sample, name)) for name in _NUMERIC_FIELDS
    }
    record["time"] = _format_time(sample.time)
    return record


def encode_sample(sample: MetricSample) -> str:
    """Encode a sample as a single JSON line (without the trailing newline)."""
    record = sample_to_dict(sample)
    try:
        return json.dumps(record, allow_nan=False, separators=(",", ":"))
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Cannot encode sample: {exc}") from exc


def decode_line(line: str) -> dict[str, Any]:
    """
    Parse one JSON line back into a dict with an aware datetime under 'time'.

    The object must hold exactly cpu, memory, disk, network and time; metric
    values must be finite numbers and time an ISO 8601 string with an offset.
    """
    try:
        record = json.loads(line)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid JSON line: {exc}") from exc
    if not isinstance(record, dict):
        raise SerializationError("JSON line is not an object")
    missing = [name for name in FIELD_ORDER if name not in record]
    if missing:
        raise SerializationError(f"Missing fields: {', '.join(missing)}")
    unknown = sorted(set(record) - set(FIELD_ORDER))
    if unknown:
        raise SerializationError(f"Unknown fields: {', '.join(unknown)}")

    decoded: dict[str, Any] = {
        name: _check_number(name, record[name]) for name in _NUMERIC_FIELDS
    }
    raw_time = record["time"]
    if not isinstance(raw_time, str):
        raise SerializationError(f"Invalid time value: {raw_time!r}")
    try:
        stamp = datetime.fromisoformat(raw_time)
    except ValueError as exc:
        raise SerializationError(f"Invalid time value: {raw_time!r}") from exc
    if stamp.tzinfo is None or stamp.utcoffset() is None:
        raise SerializationError(f"time has no UTC offset: {raw_time!r}")
    decoded["time"] = stamp
    return decoded
