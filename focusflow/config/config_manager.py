# focusflow/config/config_manager.py
'''
config_manager.py - Configuration management for focusflow
'''
from dataclasses import dataclass
from importlib.resources import files
import logging
import os
from pathlib import Path
from typing import Any, Optional
import toml

logger = logging.getLogger(__name__)

if "BASE_DIR" not in globals():
    _xdg = os.getenv("XDG_CONFIG_HOME")
    BASE_DIR = Path(_xdg) / "focusflow" if _xdg else Path.home() / ".focusflow"

if "USER_CONFIG" not in globals():
    USER_CONFIG = BASE_DIR / "config.toml"

if "DEFAULT_CONFIG" not in globals():
    # the shipped defaults, read from package resources
    DEFAULT_CONFIG = files("focusflow.config") \
        .joinpath("config.toml") \
        .read_text(encoding="utf-8")


def _merge(base: dict, override: dict) -> dict:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config() -> dict:
    """
    Load the shipped defaults and overlay USER_CONFIG when it exists.
    - The user file is never created or rewritten.
    - On read/parse errors of the user file, logs and falls back to defaults.
    """
    try:
        defaults = toml.loads(DEFAULT_CONFIG)
    except Exception as e:
        logger.error(f"Failed to parse shipped defaults: {e}", exc_info=True)
        defaults = {}

    if not USER_CONFIG.exists():
        return defaults

    try:
        text = USER_CONFIG.read_text(encoding="utf-8")
    except Exception as e:
        logger.error(
            f"Failed to read config file {USER_CONFIG}: {e}", exc_info=True)
        return defaults
    try:
        user = toml.loads(text)
    except Exception as e:
        logger.error(
            f"Failed to parse TOML from {USER_CONFIG}: {e}", exc_info=True)
        return defaults
    return _merge(defaults, user)


def get_config_value(section: str, key: str, default: Any = None,
                     config: Optional[dict] = None) -> Any:
    """
    Return config[section][key], or `default` if either level is missing.
    """
    cfg = config if config is not None else load_config()
    value = cfg.get(section, {})
    if not isinstance(value, dict):
        return default
    return value.get(key, default)


@dataclass
class FocusConfig:
    """Runtime settings handed to the timer and history views."""
    log_file: Path = Path("focus-log.txt")
    history_limit: int = 10
    notifications: bool = True
    sound: bool = True
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, cfg: dict) -> "FocusConfig":
        defaults = cls()
        limit = get_config_value(
            "history", "limit", defaults.history_limit, config=cfg)
        try:
            limit = int(limit)
        except (TypeError, ValueError):
            logger.warning(
                f"Invalid history.limit '{limit}', using {defaults.history_limit}")
            limit = defaults.history_limit
        return cls(
            log_file=Path(get_config_value(
                "log", "file", str(defaults.log_file), config=cfg)).expanduser(),
            history_limit=limit,
            notifications=bool(get_config_value(
                "notifications", "enabled", defaults.notifications, config=cfg)),
            sound=bool(get_config_value(
                "notifications", "sound", defaults.sound, config=cfg)),
            log_level=str(get_config_value(
                "logging", "level", defaults.log_level, config=cfg)),
        )

    @classmethod
    def load(cls) -> "FocusConfig":
        return cls.from_dict(load_config())
