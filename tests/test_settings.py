"""
Settings tests.
"""

import logging

from pour_sort.settings import DEFAULT_SETTINGS, load_settings, remember_level, save_settings


def test_missing_file_gives_defaults(tmp_path):
    assert load_settings(tmp_path / "config.json") == DEFAULT_SETTINGS


def test_invalid_file_gives_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS


def test_saved_values_merge_with_defaults(tmp_path):
    path = tmp_path / "config.json"
    save_settings({"glass_height": 3}, path)
    settings = load_settings(path)
    assert settings["glass_height"] == 3
    assert settings["strategy_name"] == DEFAULT_SETTINGS["strategy_name"]


def test_invalid_values_fall_back_to_defaults(tmp_path, caplog):
    caplog.set_level(logging.WARNING)
    path = tmp_path / "config.json"
    save_settings({
        "glass_height": 1,
        "strategy_name": "greedy",
        "level_number": -3,
        "levels_dir": "packs",
        "theme": "dark",
    }, path)
    settings = load_settings(path)
    assert settings == {**DEFAULT_SETTINGS, "levels_dir": "packs"}
    assert "Invalid glass_height" in caplog.text
    assert "Invalid strategy_name" in caplog.text
    assert "unknown setting 'theme'" in caplog.text


def test_non_object_file_gives_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS


def test_remember_level_round_trips(tmp_path):
    path = tmp_path / "config.json"
    settings = load_settings(path)
    remember_level(settings, 7, 5)
    save_settings(settings, path)
    loaded = load_settings(path)
    assert loaded["level_number"] == 7
    assert loaded["glass_height"] == 5
    assert loaded["strategy_name"] == DEFAULT_SETTINGS["strategy_name"]
