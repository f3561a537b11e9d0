# focusflow/utils/log_utils.py

import logging
from logging.handlers import RotatingFileHandler
import os
from typing import Union

import focusflow.config.config_manager as cf


def _to_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def setup_logging(level: Union[int, str] = logging.INFO):
    """
    Configure root logger with:
     - RotatingFileHandler writing to BASE_DIR/logs/focusflow.log
     - StreamHandler to console (warnings and above only, so the
       countdown line is not interrupted by chatter)
    Idempotent: calling multiple times won't add duplicate handlers.
    `level` can be numeric or a name such as "DEBUG".
    """
    log_dir = cf.BASE_DIR / "logs"
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        # If directory creation fails, log to console only
        print(f"WARNING: Could not create log directory {log_dir}: {e}")
        _configure_console_logging(level)
        return

    level = _to_level(level)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    existing_handlers = list(root_logger.handlers)

    # 1) RotatingFileHandler: only add if not already present for our log file
    file_log_path = log_dir / "focusflow.log"
    add_file = True
    for h in existing_handlers:
        if isinstance(h, RotatingFileHandler):
            base = getattr(h, 'baseFilename', None)
            if base and os.path.abspath(base) == os.path.abspath(file_log_path):
                add_file = False
                break
    if add_file:
        try:
            file_handler = RotatingFileHandler(
                file_log_path,
                maxBytes=5 * 1024 * 1024,
                backupCount=3,
                encoding="utf-8",
            )
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ))
            file_handler.setLevel(level)
            root_logger.addHandler(file_handler)
        except OSError as e:
            print(f"WARNING: Could not set up file logging: {e}")

    _configure_console_logging(level)


def _configure_console_logging(level: Union[int, str] = logging.WARNING):
    """
    Add a console handler unless one is already attached.
    """
    level = _to_level(level)
    root_logger = logging.getLogger()
    if root_logger.level == logging.NOTSET or root_logger.level > level:
        root_logger.setLevel(level)

    for h in root_logger.handlers:
        if type(h) is logging.StreamHandler:
            return

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter('%(levelname)s - %(message)s'))
    console_handler.setLevel(max(level, logging.WARNING))
    root_logger.addHandler(console_handler)
