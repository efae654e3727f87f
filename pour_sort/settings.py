"""
Settings Module for Pour Sort

Remembers the glass height, solver strategy, level pack folder and the
last level shown between runs. Stored as JSON in config.json in the
working directory; values that do not describe a playable setup are
replaced by their defaults when loading.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional

from .engine import get_strategy_names

logger = logging.getLogger(__name__)

# Settings file location (working directory)
SETTINGS_FILE = Path("config.json")

# Default settings
DEFAULT_SETTINGS: Dict[str, Any] = {
    "glass_height": 4,
    "strategy_name": "depth_first",
    "levels_dir": ".",
    "level_number": 0
}

# Smallest glass that can hold two colors
MIN_GLASS_HEIGHT = 2


def _is_valid(key: str, value: Any) -> bool:
    if key in ("glass_height", "level_number"):
        minimum = MIN_GLASS_HEIGHT if key == "glass_height" else 0
        return isinstance(value, int) and not isinstance(value, bool) and value >= minimum
    if key == "strategy_name":
        return value in get_strategy_names()
    if key == "levels_dir":
        return isinstance(value, str) and bool(value)
    return False


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings from config.json.

    Unknown keys are dropped and invalid values fall back to their
    defaults, each with a warning.

    Args:
        path: Settings file to read (SETTINGS_FILE if None)

    Returns:
        Settings dictionary. Returns defaults if file missing or invalid.
    """
    path = path or SETTINGS_FILE
    if not path.exists():
        logger.debug("Settings file not found, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            stored = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()

    if not isinstance(stored, dict):
        logger.warning(f"Settings file {path} does not hold an object, using defaults")
        return DEFAULT_SETTINGS.copy()

    result = DEFAULT_SETTINGS.copy()
    for key, value in stored.items():
        if key not in DEFAULT_SETTINGS:
            logger.warning(f"Ignoring unknown setting {key!r}")
        elif _is_valid(key, value):
            result[key] = value
        else:
            logger.warning(f"Invalid {key} {value!r}, using {DEFAULT_SETTINGS[key]!r}")
    logger.debug(f"Settings loaded: {result}")
    return result


def remember_level(settings: Dict[str, Any], number: int, glass_height: int) -> None:
    """Record the level last shown so the next run can resume from it."""
    settings["level_number"] = number
    settings["glass_height"] = glass_height


def save_settings(settings: Dict[str, Any], path: Optional[Path] = None) -> None:
    """
    Save settings to config.json.

    Args:
        settings: Settings dictionary to save
        path: Settings file to write (SETTINGS_FILE if None)
    """
    path = path or SETTINGS_FILE
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved: {settings}")
    except IOError as e:
        logger.error(f"Failed to save settings: {e}")
