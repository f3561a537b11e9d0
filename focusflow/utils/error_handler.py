# focusflow/utils/error_handler.py
"""
Centralized error handling and validation for focusflow.
"""
import logging
from functools import wraps
from typing import Any

logger = logging.getLogger(__name__)


class FocusFlowError(Exception):
    """Base class for errors raised by focusflow."""
    pass


class ValidationError(FocusFlowError, ValueError):
    """Raised when user input fails validation."""
    pass


class LogFileError(FocusFlowError):
    """Raised when the session log cannot be read or written."""
    pass


def handle_file_errors(operation_name: str):
    """Decorator for consistent log-file error handling."""
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except OSError as e:
                logger.error(f"{operation_name} - file error: {e}", exc_info=True)
                raise LogFileError(f"{operation_name} failed: {e}") from e
        return wrapper
    return decorator


def validate_task_name(value: Any) -> str:
    """Strip the task name; empty names are rejected."""
    task = str(value or "").strip()
    if not task:
        raise ValidationError("Task name required")
    return task


def validate_duration(value: Any) -> float:
    """Durations are positive minutes."""
    try:
        minutes = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid duration '{value}'")
    if minutes <= 0:
        raise ValidationError("Duration must be greater than zero")
    return minutes
