"""Settings storage for icon library configuration.

Only keys listed in ``DEFAULT_SETTINGS`` are kept. Values with a validator
are checked when loaded from disk (invalid ones fall back to the default)
and when set (invalid ones raise).
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable

from mdi_icons.geometry import Brush, resolve_brush
from mdi_icons.logging import get_logger


SETTINGS_PATH = Path(
    os.environ.get(
        "MDI_ICONS_SETTINGS_PATH",
        Path.home() / ".config" / "mdi-icons" / "settings.json",
    )
)

# Default values - use these constants instead of hardcoding values elsewhere
DEFAULT_BRUSH = "black"

DEFAULT_SETTINGS: dict[str, Any] = {
    "default_brush": DEFAULT_BRUSH,
}

SETTING_VALIDATORS: dict[str, Callable[[Any], Any]] = {
    "default_brush": resolve_brush,
}

log = get_logger(source="settings", tags=["config"])


@dataclass
class SettingsStore:
    values: dict[str, Any] = field(default_factory=dict)


settings_store = SettingsStore()


def validate_setting(key: str, value: Any) -> None:
    """Check a setting before it is stored.

    Raises:
        KeyError: If the key is not a known setting.
        ValueError: If the value is rejected by the key's validator.
    """
    if key not in DEFAULT_SETTINGS:
        raise KeyError(f"Unknown setting: {key}")
    validator = SETTING_VALIDATORS.get(key)
    if validator is not None:
        validator(value)


def load_settings() -> None:
    settings_store.values = dict(DEFAULT_SETTINGS)
    if not SETTINGS_PATH.exists():
        return
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return
    if not isinstance(data, dict):
        return
    for key, value in data.items():
        try:
            validate_setting(key, value)
        except (KeyError, ValueError) as error:
            log.warning(f"Ignoring setting {key!r} from {SETTINGS_PATH}: {error}")
            continue
        settings_store.values[key] = value


def save_settings() -> None:
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(settings_store.values, indent=2, sort_keys=True),
        encoding="utf-8",
    )


def get_setting(key: str, default: Any | None = None) -> Any:
    return settings_store.values.get(key, default)


def set_setting(key: str, value: Any) -> None:
    validate_setting(key, value)
    settings_store.values[key] = value
    save_settings()


def get_default_brush() -> Brush:
    """Fill used when a drawing image is requested without a brush."""
    return resolve_brush(get_setting("default_brush", DEFAULT_BRUSH))


load_settings()
