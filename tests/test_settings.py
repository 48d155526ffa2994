"""
Tests for persistent settings

Usage:
    pytest tests/test_settings.py
"""

import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from hanoi_sim.settings import DEFAULT_SETTINGS, load_settings, save_settings, move_delay_ms


def test_missing_file_gives_defaults(tmp_path):
    settings = load_settings(tmp_path / "config.json")

    assert settings == DEFAULT_SETTINGS
    assert settings is not DEFAULT_SETTINGS


def test_round_trip_merges_defaults(tmp_path):
    path = tmp_path / "config.json"
    save_settings({"disc_count": 5}, path)

    settings = load_settings(path)

    assert settings["disc_count"] == 5
    assert settings["move_delay_ms"] == DEFAULT_SETTINGS["move_delay_ms"]
    assert settings["debug_enabled"] is False


def test_invalid_json_gives_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")

    assert load_settings(path) == DEFAULT_SETTINGS


def test_non_object_json_gives_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")

    assert load_settings(path) == DEFAULT_SETTINGS


def test_save_failure_is_logged(tmp_path, caplog):
    # A directory cannot be opened for writing
    save_settings({"disc_count": 4}, tmp_path)

    assert "Failed to save settings" in caplog.text


def test_unknown_keys_are_dropped(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"disc_count": 6, "strategy_name": "greedy"}), encoding="utf-8")

    settings = load_settings(path)

    assert settings["disc_count"] == 6
    assert "strategy_name" not in settings


@pytest.mark.parametrize("value, expected", [
    (250, 250),
    ("250", 250),
    (0, 0),
    (-40, 0),
    (100.0, 100),
])
def test_move_delay_accepts_whole_numbers(value, expected):
    assert move_delay_ms({"move_delay_ms": value}) == expected


@pytest.mark.parametrize("value", ["fast", None, [500], 12.5, True])
def test_move_delay_rejects_other_values(value):
    with pytest.raises(ValueError, match="move_delay_ms"):
        move_delay_ms({"move_delay_ms": value})


def test_move_delay_defaults_when_missing():
    assert move_delay_ms({}) == DEFAULT_SETTINGS["move_delay_ms"]
