"""
Settings Module for Breadth Solver

Solver preferences persisted as JSON. By default they live in config.json
in the current working directory; every function accepts an explicit path
so callers (and tests) can point elsewhere.

Recognised keys:
    visited_backend: Name of the visited-set backend ("hash" or "tree")
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Union

logger = logging.getLogger(__name__)

# Default settings file location (working directory)
SETTINGS_FILE = Path("config.json")

DEFAULT_SETTINGS: Dict[str, Any] = {
    "visited_backend": "hash",
}

PathLike = Union[str, Path]


def _resolve(path: Optional[PathLike]) -> Path:
    return Path(path) if path is not None else SETTINGS_FILE


def load_settings(path: Optional[PathLike] = None) -> Dict[str, Any]:
    """
    Load solver settings from a JSON file.

    Keys missing from the file are filled in from DEFAULT_SETTINGS,
    unknown keys are kept as-is.

    Args:
        path: Settings file to read (defaults to SETTINGS_FILE)

    Returns:
        Settings dictionary. Returns defaults if file missing or invalid.
    """
    settings_file = _resolve(path)
    if not settings_file.exists():
        logger.debug(f"Settings file {settings_file} not found, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(settings_file, 'r', encoding='utf-8') as f:
            loaded = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Failed to load settings from {settings_file}: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()

    if not isinstance(loaded, dict):
        logger.warning(f"Settings in {settings_file} are not a JSON object, using defaults")
        return DEFAULT_SETTINGS.copy()

    result = DEFAULT_SETTINGS.copy()
    result.update(loaded)
    logger.debug(f"Settings loaded: {result}")
    return result


def save_settings(settings: Dict[str, Any], path: Optional[PathLike] = None) -> None:
    """
    Write solver settings as indented JSON.

    Failures are logged, not raised.

    Args:
        settings: Settings dictionary to save
        path: Settings file to write (defaults to SETTINGS_FILE)
    """
    settings_file = _resolve(path)
    try:
        with open(settings_file, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved to {settings_file}: {settings}")
    except IOError as e:
        logger.error(f"Failed to save settings to {settings_file}: {e}")


def get_visited_backend(settings: Dict[str, Any]) -> str:
    """Visited-set backend name from a settings dict, falling back to the default."""
    name = settings.get("visited_backend")
    if not isinstance(name, str) or not name:
        default = DEFAULT_SETTINGS["visited_backend"]
        logger.warning(f"Invalid visited_backend {name!r} in settings, using '{default}'")
        return default
    return name
