# config_manager.py
import sys
import json
from pathlib import Path

# Resolve project root depending on run mode (Script or .exe)
if getattr(sys, 'frozen', False):
    PROJECT_ROOT = Path(sys._MEIPASS)
else:
    PROJECT_ROOT = Path(__file__).resolve().parent.parent

config_json = PROJECT_ROOT / "config.json"
ui_strings = PROJECT_ROOT / "ui_strings.json"


DEFAULT_SETTINGS = {
    "darkmode": False,
    "shift_to_copy": True,
    "show_trail": True,
    "debug": False
}


def _load(path, key_value):
    try:
        with open(path, 'r', encoding='utf-8') as f:
            settings_dict = json.load(f)

    except (FileNotFoundError, json.JSONDecodeError):
        return {}

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, 0)


def load_setting_value(key_value):
    return _load(config_json, key_value)


def load_setting_description(key_value):
    return _load(ui_strings, key_value)


def load_settings_with_defaults():
    """All settings, with DEFAULT_SETTINGS filling in missing keys."""
    settings_dict = dict(DEFAULT_SETTINGS)
    settings_dict.update(load_setting_value("all"))
    return settings_dict


def save_setting(settings_dict):
    try:
        with open(config_json, 'w', encoding='utf-8') as f:
            json.dump(settings_dict, f, indent=4)
            return settings_dict

    except (OSError, TypeError):
        return {}
