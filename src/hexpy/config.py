"""
Configuration loading for the editor.

Settings come from a TOML file merged over built-in defaults. A missing or
broken file is never fatal; the defaults are used instead.
"""

import copy
import logging
import os
from typing import Any, Dict, Final, List, Optional

import toml

logger = logging.getLogger(__name__)

CONFIG_FILENAME: Final[str] = "config.toml"

DEFAULT_CONFIG: Final[Dict[str, Any]] = {
    "editor": {
        "page_rows": 20,
    },
    "keybindings": {
        "quit": ["q"],
        "save": ["w"],
        "undo": ["u"],
        "delete": ["x", "del"],
        "replace": ["r"],
        "insert": ["i"],
        "toggle_endianness": ["e"],
        "left": ["h", "left"],
        "down": ["j", "down"],
        "up": ["k", "up"],
        "right": ["l", "right"],
        "page_up": ["pgup"],
        "page_down": ["pgdown"],
        "home": ["home"],
        "end": ["end"],
    },
    "logging": {
        "file": "",
        "level": "INFO",
    },
}


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge ``override`` into a copy of ``base``.

    Nested dictionaries are merged key by key; any other value in
    ``override`` replaces the one in ``base``.
    """

    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = deep_merge(result[key], value)
            continue

        result[key] = copy.deepcopy(value)

    return result


def _normalize_keybindings(bindings: Dict[str, Any]) -> Dict[str, List[str]]:
    """Accept a single key name or a list of key names per action."""

    normalized: Dict[str, List[str]] = {}
    for action, keys in bindings.items():
        if isinstance(keys, str):
            keys = [keys]

        if not isinstance(keys, list):
            logger.warning("Ignoring keybinding for %s: expected string or list, got %r", action, keys)
            normalized[action] = list(DEFAULT_CONFIG["keybindings"].get(action, []))
            continue

        normalized[action] = [str(key) for key in keys]

    return normalized


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the configuration, falling back to defaults on any problem.

    Args:
        path: Explicit config file. If None, ``config.toml`` in the working
            directory is used when present.

    Returns:
        dict: The merged configuration
    """

    config_path = path or CONFIG_FILENAME
    user_config: Dict[str, Any] = {}

    if os.path.exists(config_path):
        try:
            with open(config_path, "r", encoding="utf-8") as fh:
                user_config = toml.loads(fh.read())
            logger.debug("Loaded user config from %s", config_path)
        except toml.TomlDecodeError as exc:
            logger.error("TOML parse error in %s: %s - using defaults.", config_path, exc)
        except OSError as exc:
            logger.error("Could not read %s: %s - using defaults.", config_path, exc)
    elif path:
        logger.warning("Config file %s not found - using defaults.", config_path)

    config = deep_merge(DEFAULT_CONFIG, user_config)

    for section, default_val in DEFAULT_CONFIG.items():
        if not isinstance(config.get(section), dict):
            logger.warning("Config section [%s] is not a table - using defaults.", section)
            config[section] = copy.deepcopy(default_val)

    config["keybindings"] = _normalize_keybindings(config.get("keybindings", {}))

    page_rows = config["editor"].get("page_rows")
    if not isinstance(page_rows, int) or page_rows < 1:
        logger.warning("Invalid editor.page_rows %r - using %d", page_rows, DEFAULT_CONFIG["editor"]["page_rows"])
        config["editor"]["page_rows"] = DEFAULT_CONFIG["editor"]["page_rows"]

    return config
