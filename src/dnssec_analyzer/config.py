"""Configuration loading."""

import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Optional

import yaml

from dnssec_analyzer.models.records import RecordType

CONFIG_ENV = "DNSSEC_ANALYZER_CONFIG"
DEFAULT_CONFIG_PATH = Path("config.yaml")


def _all_record_types() -> list[str]:
    return [t.value for t in RecordType]


def _number(name: str, value: Any, kind: type) -> Any:
    # YAML gives None for an empty value and True/False for yes/no
    if value is None or isinstance(value, bool):
        raise ValueError(f"{name} must be a number, got {value!r}")
    try:
        return kind(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{name} must be a number, got {value!r}") from e


@dataclass
class Settings:
    """Runtime settings for scans."""
    dns_server: str = "1.1.1.1"     # Nameserver handed to delv
    delv_path: str = "delv"
    timeout: float = 20.0           # Seconds per delv invocation
    record_types: list[str] = field(default_factory=_all_record_types)
    workers: int = 1                # Parallel queries per scan
    log_level: str = "INFO"
    origin: str = "dnssec-analyzer"  # Identifies this service in failure events

    def __post_init__(self):
        for name in ("dns_server", "delv_path", "log_level", "origin"):
            if not isinstance(getattr(self, name), str):
                raise ValueError(f"{name} must be a string")
        if not isinstance(self.record_types, (list, tuple)) or not all(
            isinstance(t, str) for t in self.record_types
        ):
            raise ValueError("record_types must be a list of record type names")
        self.record_types = [RecordType.from_label(t).value for t in self.record_types]
        if not self.record_types:
            raise ValueError("record_types must not be empty")
        self.timeout = _number("timeout", self.timeout, float)
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        self.workers = _number("workers", self.workers, int)
        if self.workers < 1:
            raise ValueError("workers must be at least 1")
        self.log_level = self.log_level.upper()

    def override(self, **changes: Any) -> "Settings":
        """Return a copy with the non-None values in ``changes`` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def load_settings(path: Optional[Path | str] = None) -> Settings:
    """Load settings from a YAML file.

    The file is looked up from ``path``, then the DNSSEC_ANALYZER_CONFIG
    environment variable, then ``config.yaml`` in the working directory.
    Defaults are used when no file exists.

    Raises:
        ValueError: If the file has unknown keys or invalid values
    """
    explicit = path is not None or CONFIG_ENV in os.environ
    config_path = Path(path or os.environ.get(CONFIG_ENV) or DEFAULT_CONFIG_PATH)

    if not config_path.exists():
        if explicit:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return Settings()

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"{config_path}: expected a mapping at top level")

    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"{config_path}: unknown settings {', '.join(unknown)}")

    return Settings(**data)
