from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

"""Settings loader.

Responsibilities:
- Load a YAML settings file (``config/gatkreport.yml`` by default)
- Validate it against the packaged JSON schema
- Apply defaults for everything left out

A missing default file is not an error; the built-in defaults apply.
"""

__all__ = [
    "ConfigError",
    "ReportConfig",
    "DEFAULT_CONFIG_PATH",
    "load_config",
]

SCHEMA_PATH = Path(__file__).parent / "config_schema.json"
DEFAULT_CONFIG_PATH = Path("config/gatkreport.yml")


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class ReportConfig:
    strict_parsing: bool = False  # raise on unparseable typed cells instead of keeping text
    show_progress: bool = True  # tqdm bar when stdout is a TTY
    log_level: str = "INFO"
    error_log_dir: str = "logs"


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate settings against the JSON schema.

    Raises:
        ConfigError: the schema file is missing or broken, or the data violates it
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path | None = None) -> ReportConfig:
    """Load settings from ``path``.

    With no path the default location is tried and silently skipped when absent;
    an explicit path that does not exist is a ConfigError.
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return ReportConfig()
        path = DEFAULT_CONFIG_PATH
    elif not path.exists():
        raise ConfigError(f"config file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping: {path}")

    _validate_config_schema(data)

    defaults = ReportConfig()
    codec = data.get("codec", {})
    output = data.get("output", {})
    return ReportConfig(
        strict_parsing=codec.get("strict_parsing", defaults.strict_parsing),
        show_progress=output.get("show_progress", defaults.show_progress),
        log_level=output.get("log_level", defaults.log_level),
        error_log_dir=output.get("error_log_dir", defaults.error_log_dir),
    )
