"""Load StaticQueueConfig from staticqueue.yaml if present.

Merges file config with keyword overrides. Overrides take precedence.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

import yaml

from staticqueue._errors import ConfigError
from staticqueue.config import StaticQueueConfig

_CONFIG_KEYS = frozenset({
    "max_urls_per_job",
    "raise_resource_limits",
    "memory_limit_bytes",
    "time_limit_seconds",
    "event_log_size",
    "verbose",
})


def load_config(root: Path, **overrides: object) -> StaticQueueConfig:
    """Load StaticQueueConfig from root, optionally merging staticqueue.yaml.

    Looks for staticqueue.yaml, staticqueue.yml, or staticqueue.toml in root.
    If found, loads and merges with overrides. Overrides take precedence.

    Raises:
        ConfigError: If a config file exists but cannot be parsed, or holds
            unknown keys.

    """
    file_config = _read_config_file(root)
    merged = {**file_config, **overrides}
    unknown = sorted(set(merged) - _CONFIG_KEYS)
    if unknown:
        msg = f"Unknown staticqueue config keys: {', '.join(unknown)}"
        raise ConfigError(msg)
    return StaticQueueConfig(**merged)  # type: ignore[arg-type]


def _read_config_file(root: Path) -> dict[str, object]:
    """Read config from yaml/toml if present. Returns empty dict otherwise."""
    for name in ("staticqueue.yaml", "staticqueue.yml"):
        path = root / name
        if path.is_file():
            return _parse_yaml(path)
    toml_path = root / "staticqueue.toml"
    if toml_path.is_file():
        return _parse_toml(toml_path)
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        msg = f"Invalid YAML in {path.name}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(data, dict):
        msg = f"{path.name} must contain a mapping at the top level"
        raise ConfigError(msg)
    return _flatten_section(data)


def _parse_toml(path: Path) -> dict[str, object]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path.name}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_section(data)


def _flatten_section(data: dict[str, object]) -> dict[str, object]:
    """Extract staticqueue.* keys into top-level config."""
    result: dict[str, object] = {}
    section = data.get("staticqueue")
    if isinstance(section, dict):
        result.update(section)
    for k, v in data.items():
        if k != "staticqueue" and k in _CONFIG_KEYS:
            result[k] = v
    return result
