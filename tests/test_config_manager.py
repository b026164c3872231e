import json

import pytest

from Modules import config_manager


@pytest.fixture
def config_files(tmp_path, monkeypatch):
    config_json = tmp_path / "config.json"
    ui_strings = tmp_path / "ui_strings.json"
    monkeypatch.setattr(config_manager, "config_json", config_json)
    monkeypatch.setattr(config_manager, "ui_strings", ui_strings)
    return config_json, ui_strings


def test_missing_file_returns_empty(config_files):
    assert config_manager.load_setting_value("all") == {}
    assert config_manager.load_setting_description("darkmode") == {}


def test_corrupt_file_returns_empty(config_files):
    config_json, _ = config_files
    config_json.write_text("{not json", encoding="utf-8")
    assert config_manager.load_setting_value("all") == {}


def test_load_single_value(config_files):
    config_json, _ = config_files
    config_json.write_text(json.dumps({"darkmode": True}), encoding="utf-8")
    assert config_manager.load_setting_value("darkmode") is True
    assert config_manager.load_setting_value("unknown") == 0


def test_save_setting_writes_indented_json(config_files):
    config_json, _ = config_files
    saved = config_manager.save_setting({"darkmode": True, "debug": False})
    assert saved == {"darkmode": True, "debug": False}
    assert json.loads(config_json.read_text(encoding="utf-8")) == saved
    assert "\n    " in config_json.read_text(encoding="utf-8")


def test_defaults_fill_missing_keys(config_files):
    config_json, _ = config_files
    config_json.write_text(json.dumps({"darkmode": True}), encoding="utf-8")
    settings = config_manager.load_settings_with_defaults()
    assert settings["darkmode"] is True
    assert settings["show_trail"] is True
    assert settings["debug"] is False


def test_shipped_files_are_in_sync():
    values = json.loads((config_manager.PROJECT_ROOT / "config.json").read_text(encoding="utf-8"))
    descriptions = json.loads((config_manager.PROJECT_ROOT / "ui_strings.json").read_text(encoding="utf-8"))
    assert values.keys() == descriptions.keys() == config_manager.DEFAULT_SETTINGS.keys()
