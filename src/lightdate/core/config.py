"""YAML configuration loader with dot-notation access."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from lightdate.core.date import set_ordering_mode
from lightdate.core.logger import set_level

_SENTINEL = object()


def load_config(path: str) -> dict:
    """Load YAML config file. Raises FileNotFoundError if missing."""
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(file_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_setting(config: dict, key: str, default: Any = _SENTINEL) -> Any:
    """Access nested config with dot notation: 'date.ordering'.

    Args:
        config: Loaded config dict.
        key: Dot-separated key path.
        default: Default value if key missing. Raises KeyError if not provided.
    """
    current = config
    for part in key.split("."):
        if isinstance(current, dict) and part in current:
            current = current[part]
        elif default is not _SENTINEL:
            return default
        else:
            raise KeyError(f"Config key not found: {key}")
    return current


@dataclass
class DateSettings:
    ordering: str = "lexicographic"
    log_level: str = "INFO"

    @classmethod
    def from_config(cls, config: dict) -> "DateSettings":
        return cls(
            ordering=get_setting(config, "date.ordering", cls.ordering),
            log_level=get_setting(config, "logging.level", cls.log_level),
        )


def load_settings(path: str) -> DateSettings:
    return DateSettings.from_config(load_config(path))


def apply_settings(settings: DateSettings) -> None:
    set_ordering_mode(settings.ordering)
    set_level(settings.log_level)
