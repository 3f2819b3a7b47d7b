"""Log levels and the error type shared by the logging library and its drivers."""

from enum import IntEnum

__all__ = ["LogLevel", "MySyslogError", "get_level_name", "validate_level"]


class LogLevel(IntEnum):
    """Severity of a log message."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    CRITICAL = 4


class MySyslogError(Exception):
    """Raised when a message cannot be logged."""


def get_level_name(level):
    """Return the name of a log level, or ``"UNKNOWN"`` for an unknown level."""
    try:
        return LogLevel(level).name
    except ValueError:
        return "UNKNOWN"


def validate_level(level):
    """Return ``level`` as a :class:`LogLevel`, raising MySyslogError if invalid."""
    try:
        return LogLevel(level)
    except ValueError:
        raise MySyslogError(f"Invalid log level: {level}") from None