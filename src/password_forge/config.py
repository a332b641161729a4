from __future__ import annotations

import json
import logging
import os
from dataclasses import fields
from pathlib import Path
from typing import Any

from .errors import ConfigError
from .models import GenerationOptions


LOGGER = logging.getLogger(__name__)

WORKSPACE_ROOT = Path(__file__).resolve().parents[2]
CONFIG_DIR = WORKSPACE_ROOT / "config"
SETTINGS_PATH = CONFIG_DIR / "password_forge.json"
SETTINGS_PATH_ENV = "PASSWORD_FORGE_CONFIG"


def settings_path() -> Path:
    override = os.environ.get(SETTINGS_PATH_ENV)
    if override:
        return Path(override).expanduser()
    return SETTINGS_PATH


def default_settings() -> dict[str, Any]:
    return {
        "generation": GenerationOptions().to_dict(),
        "length_limits": {
            "min": 4,
            "max": 50,
        },
        "breach": {
            "enabled": False,
            "timeout_seconds": 15,
        },
    }


def ensure_config_file(force: bool = False) -> Path:
    path = settings_path()
    if force or not path.exists():
        save_json(path, default_settings())
        LOGGER.info("Wrote default settings to %s", path)
    return path


def load_json(path: Path, fallback: Any) -> Any:
    if not path.exists():
        return fallback
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError:
        LOGGER.warning("Ignoring malformed settings file %s", path)
        return fallback


def save_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def load_settings() -> dict[str, Any]:
    defaults = default_settings()
    path = settings_path()
    loaded = load_json(path, defaults)
    if not isinstance(loaded, dict):
        raise ConfigError(f"Settings file must hold a JSON object: {path}")
    merged = dict(defaults)
    for key, value in loaded.items():
        if isinstance(defaults.get(key), dict):
            if not isinstance(value, dict):
                raise ConfigError(f"'{key}' settings must be a JSON object: {path}")
            merged[key] = {**defaults[key], **value}
        else:
            merged[key] = value
    return merged


def _section(settings: dict[str, Any], name: str) -> dict[str, Any]:
    payload = settings.get(name, {})
    if not isinstance(payload, dict):
        raise ConfigError(f"'{name}' settings must be a JSON object.")
    return payload


def _require_int(section: str, key: str, value: Any) -> int:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"'{section}.{key}' must be an integer, got {value!r}.")
    return value


def _require_bool(section: str, key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"'{section}.{key}' must be true or false, got {value!r}.")
    return value


def generation_options_from_settings(settings: dict[str, Any]) -> GenerationOptions:
    payload = _section(settings, "generation")
    options = GenerationOptions.from_dict(payload)
    for item in fields(GenerationOptions):
        value = getattr(options, item.name)
        if item.name == "length":
            _require_int("generation", item.name, value)
        else:
            _require_bool("generation", item.name, value)
    return options


def length_limits_from_settings(settings: dict[str, Any]) -> tuple[int, int]:
    payload = _section(settings, "length_limits")
    minimum = _require_int("length_limits", "min", payload.get("min", 4))
    maximum = _require_int("length_limits", "max", payload.get("max", 50))
    if minimum < 1 or minimum > maximum:
        raise ConfigError(f"Invalid length limits: min={minimum} max={maximum}.")
    return minimum, maximum


def breach_settings(settings: dict[str, Any]) -> tuple[bool, int]:
    """Return ``(enabled, timeout_seconds)`` for the Pwned Passwords lookup."""
    payload = _section(settings, "breach")
    enabled = _require_bool("breach", "enabled", payload.get("enabled", False))
    timeout = _require_int("breach", "timeout_seconds", payload.get("timeout_seconds", 15))
    if timeout < 1:
        raise ConfigError(f"'breach.timeout_seconds' must be positive, got {timeout}.")
    return enabled, timeout
