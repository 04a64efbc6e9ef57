"""YAML config loader with runtime dotted-key get/set."""

import json
from pathlib import Path
from typing import Any

import yaml

from marinewatch.config.schema import MarineConfig


def load_config(path: str | Path | None) -> MarineConfig:
    """Load and validate config from a YAML file.

    A missing path or empty file yields the defaults.
    """
    if path is None:
        return MarineConfig()
    path = Path(path)
    if not path.exists():
        return MarineConfig()
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return MarineConfig(**raw)


def get_config_value(config: MarineConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'cache.forecast_ttl_minutes'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(config: MarineConfig, dotted_key: str, value: Any) -> MarineConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new MarineConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        target = target[part]
    if parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    old_value = target[parts[-1]]
    if isinstance(old_value, bool) and isinstance(value, str):
        value = value.lower() in ("1", "true", "yes", "on")
    elif isinstance(old_value, int) and isinstance(value, str):
        value = int(value)
    elif isinstance(old_value, float) and isinstance(value, str):
        value = float(value)
    target[parts[-1]] = value
    return MarineConfig(**data)


def save_config(config: MarineConfig, path: str | Path) -> None:
    with open(path, "w") as f:
        yaml.dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)
