"""
Configuration for the host telemetry simulator.

Values are layered: built-in defaults, then an optional YAML file, then CLI
flags. The YAML file is given with --config or the HOSTSIM_CONFIG environment
variable. Sampling cadence and distribution parameters are fixed and are not
part of the configuration.

Example config.yaml:

    output_path: data.json
    append: false
    clamp: false
    metrics_path: hostsim_metrics.jsonl
    log_level: INFO
"""

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError

CONFIG_ENV_VAR = "HOSTSIM_CONFIG"
DEFAULT_OUTPUT_PATH = "data.json"

_BOOL_KEYS = frozenset({"append", "clamp"})
_PATH_KEYS = frozenset({"output_path", "metrics_path"})


@dataclass(frozen=True)
class SimulatorConfig:
    """Immutable simulator settings."""

    output_path: Path = Path(DEFAULT_OUTPUT_PATH)
    append: bool = False
    clamp: bool = False
    metrics_path: Path | None = None
    log_level: str = "INFO"

    def with_overrides(self, **overrides: Any) -> "SimulatorConfig":
        """Return a copy with every non-None override applied."""
        values = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **_coerce(values))


def load_yaml(path: Path) -> Any:
    """Load a YAML file; missing or unparsable files raise ConfigError."""
    try:
        with path.open(encoding="utf-8") as f:
            return yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc


def _coerce(raw: dict[str, Any]) -> dict[str, Any]:
    known = {f.name for f in fields(SimulatorConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

    result: dict[str, Any] = {}
    for key, value in raw.items():
        if key in _BOOL_KEYS:
            if not isinstance(value, bool):
                raise ConfigError(f"{key} must be true or false, got {value!r}")
            result[key] = value
        elif key in _PATH_KEYS:
            if value is None and key == "metrics_path":
                result[key] = None
                continue
            if not isinstance(value, str | Path) or not str(value).strip():
                raise ConfigError(f"{key} must be a non-empty path, got {value!r}")
            result[key] = Path(value)
        elif key == "log_level":
            level = str(value).strip().upper()
            if not isinstance(logging.getLevelName(level), int):
                raise ConfigError(f"Unknown log level: {value!r}")
            result[key] = level
    return result


def resolve_config_path(path: str | Path | None = None) -> Path | None:
    """Explicit path wins over HOSTSIM_CONFIG; None when neither is set."""
    if path:
        return Path(path)
    env_path = os.environ.get(CONFIG_ENV_VAR, "").strip()
    return Path(env_path) if env_path else None


def load_config(path: str | Path | None = None) -> SimulatorConfig:
    """Build a SimulatorConfig from defaults and the (optional) YAML file."""
    config_path = resolve_config_path(path)
    if config_path is None:
        return SimulatorConfig()

    data = load_yaml(config_path)
    if data is None:
        return SimulatorConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")
    return SimulatorConfig(**_coerce(data))
