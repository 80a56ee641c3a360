"""Persistent JSON config helpers.

Stores the preferred palette, cursor glyph, fixed height and key overrides.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_config_dir

from .keymap import keymap_with_overrides
from .styles import normalize_style_name, resolve_styles
from .widget import DEFAULT_CURSOR, OptionPicker

APP_NAME = "optionpicker"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
KEY_ACTIONS = ("down", "up", "select")

_LOG = logging.getLogger("optionpicker.config")


@dataclass(frozen=True)
class PickerSettings:
    """Validated user preferences applied to new pickers."""

    theme: str = "default"
    cursor: str = DEFAULT_CURSOR
    height: int | None = None
    keys: dict[str, tuple[str, ...]] = field(default_factory=dict)


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        _LOG.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are logged and otherwise ignored so a read-only config
    directory never breaks the picker.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        _LOG.warning("could not write config %s: %s", CONFIG_PATH, exc)


def _coerce_height(value: object) -> int | None:
    """Accept only positive integers; booleans are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None


def _coerce_keys(value: object) -> dict[str, tuple[str, ...]]:
    """Keep known actions mapped to non-empty lists of key-name strings."""
    if not isinstance(value, dict):
        return {}
    keys: dict[str, tuple[str, ...]] = {}
    for action in KEY_ACTIONS:
        raw = value.get(action)
        if not isinstance(raw, list):
            continue
        names = tuple(item for item in raw if isinstance(item, str) and item)
        if names:
            keys[action] = names
    return keys


def load_picker_settings() -> PickerSettings:
    """Read and validate picker preferences from the config file."""
    data = load_config()
    cursor = data.get("cursor")
    return PickerSettings(
        theme=normalize_style_name(data.get("theme") if isinstance(data.get("theme"), str) else None),
        cursor=cursor if isinstance(cursor, str) and cursor else DEFAULT_CURSOR,
        height=_coerce_height(data.get("height")),
        keys=_coerce_keys(data.get("keys")),
    )


def save_theme(name: str) -> None:
    """Persist the preferred palette name."""
    config = load_config()
    config["theme"] = normalize_style_name(name)
    save_config(config)


def apply_settings(picker: OptionPicker, settings: PickerSettings, *, no_color: bool = False) -> OptionPicker:
    """Configure ``picker`` from ``settings`` and return it.

    A configured height switches the picker to a fixed-height window.
    """
    picker.styles = resolve_styles(settings.theme, no_color=no_color)
    picker.cursor = settings.cursor
    if settings.keys:
        picker.keymap = keymap_with_overrides(picker.keymap, settings.keys)
    if settings.height is not None:
        picker.auto_height = False
        picker.resize(settings.height)
    return picker
