import json
import logging

import pytest

from settings import _DEFAULTS, load_settings, save_settings


@pytest.fixture
def settings_path(tmp_path):
    return str(tmp_path / "settings.json")


def _write(path, data):
    with open(path, "w", encoding="utf-8") as f:
        f.write(data if isinstance(data, str) else json.dumps(data))


def test_missing_file_gives_defaults(settings_path):
    assert load_settings(settings_path) == _DEFAULTS


def test_stored_values_override_defaults(settings_path):
    _write(settings_path, {"dark_mode": True, "cache_size": 6, "total_pages": 500,
                           "show_week_numbers": True, "window_width": 320})
    settings = load_settings(settings_path)
    assert settings["dark_mode"] is True
    assert settings["cache_size"] == 6
    assert settings["total_pages"] == 500
    assert settings["show_week_numbers"] is True
    assert settings["window_width"] == 320
    assert settings["window_height"] is None


def test_unbounded_cache_setting(settings_path):
    _write(settings_path, {"cache_size": None})
    assert load_settings(settings_path)["cache_size"] is None


def test_invalid_values_are_ignored(settings_path):
    _write(settings_path, {"dark_mode": "yes", "cache_size": 0, "total_pages": True,
                           "window_width": "wide", "show_weekday_labels": 1})
    assert load_settings(settings_path) == _DEFAULTS


def test_malformed_file_logs_and_falls_back(settings_path, caplog):
    _write(settings_path, "{not json")
    with caplog.at_level(logging.WARNING, logger="settings"):
        assert load_settings(settings_path) == _DEFAULTS
    assert "Ignoring unreadable settings file" in caplog.text


def test_non_object_file_falls_back(settings_path):
    _write(settings_path, [1, 2, 3])
    assert load_settings(settings_path) == _DEFAULTS


def test_window_size_survives_restart(settings_path):
    settings = load_settings(settings_path)
    settings["window_width"] = 410
    settings["window_height"] = 300
    save_settings(settings, settings_path)

    restored = load_settings(settings_path)
    assert (restored["window_width"], restored["window_height"]) == (410, 300)
