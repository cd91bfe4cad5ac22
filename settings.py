"""JSON-based settings persistence for the month pager."""

import json
import logging
import os

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".month-pager-settings.json")

_DEFAULTS = {
    "dark_mode": False,
    "cache_size": 24,
    "total_pages": 100_000,
    "show_weekday_labels": True,
    "show_week_numbers": False,
    "window_width": None,
    "window_height": None,
}

_BOOL_KEYS = ("dark_mode", "show_weekday_labels", "show_week_numbers")
_SIZE_KEYS = ("window_width", "window_height")


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    path = path or _SETTINGS_PATH
    settings = dict(_DEFAULTS)
    try:
        with open(path, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return settings
    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file %s: expected a JSON object", path)
        return settings

    for key in _BOOL_KEYS:
        if key in stored and isinstance(stored[key], bool):
            settings[key] = stored[key]
    for key in _SIZE_KEYS:
        if key in stored and (stored[key] is None or _is_int(stored[key])):
            settings[key] = stored[key]
    if "cache_size" in stored:
        value = stored["cache_size"]
        if value is None or (_is_int(value) and value >= 1):
            settings["cache_size"] = value
    if "total_pages" in stored and _is_int(stored["total_pages"]) and stored["total_pages"] >= 1:
        settings["total_pages"] = stored["total_pages"]
    return settings


def save_settings(settings: dict, path: str | None = None) -> None:
    """Persist settings to disk."""
    with open(path or _SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)
