"""Configuration loading for reactrefactor (.reactrefactor.yml)."""

from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict

import yaml

from .models import RefactorConfig

CONFIG_FILENAME = ".reactrefactor.yml"

_INT_FIELDS = {
    "maxLines": "max_lines",
    "maxHooks": "max_hooks",
    "maxProps": "max_props",
}

_BOOL_FIELDS = {
    "useMemo": "use_memo",
    "useArrowFuncs": "use_arrow_funcs",
    "sortImports": "sort_imports",
}


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be read or parsed."""


def default_config() -> RefactorConfig:
    """Return the built-in thresholds (300 lines, 5 hooks, 10 props, all rewrites on)."""
    return RefactorConfig()


def load_config(config_path: Path) -> RefactorConfig:
    """Load configuration from disk, falling back to defaults when absent.

    Keys missing from the document keep their default values and unknown keys
    are ignored. Values of the wrong type raise :class:`ConfigError`.
    """
    config_file = resolve_config_path(config_path)
    if not config_file.exists():
        return default_config()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    overrides: Dict[str, Any] = {}
    for key, attr in _INT_FIELDS.items():
        if key in data:
            overrides[attr] = _as_threshold(key, data[key])
    for key, attr in _BOOL_FIELDS.items():
        if key in data:
            overrides[attr] = _as_bool(key, data[key])

    return replace(default_config(), **overrides)


def save_config(config: RefactorConfig, path: Path) -> Path:
    """Write ``config`` to ``path``; JSON for ``.json`` files, YAML otherwise."""
    target = resolve_config_path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    payload = config.to_dict()
    if target.suffix.lower() == ".json":
        text = json.dumps(payload, indent=2) + "\n"
    else:
        text = yaml.safe_dump(payload, sort_keys=False)
    target.write_text(text, encoding="utf-8")
    return target


def resolve_config_path(config_path: Path) -> Path:
    config_path = Path(config_path).expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}

    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_threshold(key: str, value: Any) -> int:
    # bool is a subclass of int; `maxLines: true` is a mistake, not 1.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"'{key}' must be an integer, got {value!r}")
    if value < 0:
        raise ConfigError(f"'{key}' must not be negative, got {value}")
    return value


def _as_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    raise ConfigError(f"'{key}' must be a boolean, got {value!r}")


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "default_config",
    "load_config",
    "resolve_config_path",
    "save_config",
]
