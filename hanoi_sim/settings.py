"""
Settings Module for the Towers of Hanoi Simulator

Stores the disc count, move pacing and debug flag in config.json in
the working directory. Command-line flags in main.py override them.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, Union

logger = logging.getLogger(__name__)

SETTINGS_FILE = Path("config.json")

DEFAULT_SETTINGS: Dict[str, Any] = {
    "disc_count": 3,
    "move_delay_ms": 500,
    "debug_enabled": False,
}


def load_settings(path: Union[str, Path] = SETTINGS_FILE) -> Dict[str, Any]:
    """
    Read stored settings layered over the defaults.

    Unknown keys are dropped. Values are not validated here: the
    engine checks disc_count and move_delay_ms() checks the pacing.

    Args:
        path: Settings file (default: config.json)

    Returns:
        Settings dictionary. Defaults if the file is missing, unreadable
        or does not hold a JSON object.
    """
    settings = DEFAULT_SETTINGS.copy()
    path = Path(path)
    if not path.exists():
        logger.debug(f"No settings at {path}, using defaults")
        return settings

    try:
        stored = json.loads(path.read_text(encoding='utf-8'))
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Failed to load settings from {path}: {e}, using defaults")
        return settings

    if not isinstance(stored, dict):
        logger.warning(f"Settings in {path} are not a JSON object, using defaults")
        return settings

    ignored = sorted(set(stored) - set(DEFAULT_SETTINGS))
    if ignored:
        logger.warning(f"Ignoring unknown settings: {', '.join(ignored)}")

    settings.update((key, stored[key]) for key in DEFAULT_SETTINGS if key in stored)
    logger.debug(f"Settings loaded: {settings}")
    return settings


def save_settings(settings: Dict[str, Any], path: Union[str, Path] = SETTINGS_FILE) -> None:
    """
    Write settings as indented JSON. Failures are logged, not raised.

    Args:
        settings: Settings dictionary to save
        path: Settings file (default: config.json)
    """
    try:
        Path(path).write_text(json.dumps(settings, indent=2), encoding='utf-8')
        logger.debug(f"Settings saved to {path}: {settings}")
    except OSError as e:
        logger.error(f"Failed to save settings: {e}")


def move_delay_ms(settings: Dict[str, Any]) -> int:
    """
    Pause between auto-solution moves.

    Negative values mean no pause.

    Args:
        settings: Settings dictionary

    Returns:
        Delay in whole milliseconds, at least 0

    Raises:
        ValueError: If the stored value is not a whole number
    """
    value = settings.get("move_delay_ms", DEFAULT_SETTINGS["move_delay_ms"])
    if isinstance(value, bool):
        raise ValueError(f"move_delay_ms must be a whole number of milliseconds, got {value!r}")
    try:
        delay = int(value)
    except (TypeError, ValueError):
        raise ValueError(
            f"move_delay_ms must be a whole number of milliseconds, got {value!r}"
        ) from None
    if isinstance(value, float) and value != delay:
        raise ValueError(f"move_delay_ms must be a whole number of milliseconds, got {value!r}")
    return max(0, delay)
