"""Persistent application settings helpers.

Known keys:
    preset           name of the preset selected at startup
    last_theme_path  last file a theme was saved to or loaded from
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


SETTINGS_DIR = Path.home() / ".config" / "qthematic"
SETTINGS_PATH = SETTINGS_DIR / "settings.json"


def load_settings() -> dict:
    """Load settings from disk.

    Returns an empty dict if settings file does not exist or contains invalid JSON.
    """
    if not SETTINGS_PATH.exists():
        return {}

    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return {}

    return data if isinstance(data, dict) else {}


def save_settings(data: dict) -> None:
    """Persist settings to disk atomically."""
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = SETTINGS_PATH.with_suffix(".tmp")
    tmp_path.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
    tmp_path.replace(SETTINGS_PATH)


def get_setting(key: str, default: Any = None) -> Any:
    """Read a setting value with a fallback default."""
    return load_settings().get(key, default)


def set_setting(key: str, value: Any) -> None:
    """Set and persist a single setting key."""
    settings = load_settings()
    settings[key] = value
    save_settings(settings)
