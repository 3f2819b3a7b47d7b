"""Front end that dispatches log messages to a chosen output driver."""

from enum import IntEnum

from . import json_driver, text_driver
from .levels import MySyslogError, validate_level

__all__ = ["Driver", "Format", "load_driver", "mysyslog"]


class Driver(IntEnum):
    """Output driver."""

    TEXT = 0
    JSON = 1


class Format(IntEnum):
    """Output format."""

    TEXT = 0
    JSON = 1


_DRIVERS = {
    Driver.TEXT: text_driver.driver_write,
    Driver.JSON: json_driver.driver_write,
}


def load_driver(driver):
    """Return the write function of ``driver``; raise MySyslogError if unknown."""
    try:
        kind = Driver(driver)
    except ValueError:
        raise MySyslogError(f"Unknown driver type: {driver}") from None
    return _DRIVERS[kind]


def mysyslog(msg, level, driver, format, path):
    """Log ``msg`` at ``level`` to ``path`` through ``driver``; return the entry.

    The output layout is decided by the driver; ``format`` is accepted for
    interface compatibility and does not change the output.
    """
    if msg is None or path is None:
        raise MySyslogError("msg and path cannot be None")
    level = validate_level(level)
    write = load_driver(driver)
    return write(msg, level, path)