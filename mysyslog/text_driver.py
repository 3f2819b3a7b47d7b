"""Driver writing log entries as plain text: ``timestamp level process message``."""

import time

from .levels import MySyslogError, get_level_name, validate_level
from .procinfo import get_process_name

__all__ = ["format_entry", "driver_write"]


def format_entry(timestamp, level, process, msg):
    """Return one text log line, newline included."""
    message = msg.partition("\0")[0]
    return f"{int(timestamp)} {get_level_name(level)} {process} {message}\n"


def driver_write(msg, level, path):
    """Append ``msg`` at ``level`` to the file ``path``; return the written line."""
    if msg is None or path is None:
        raise MySyslogError("Text driver: msg and path cannot be None")
    level = validate_level(level)
    entry = format_entry(int(time.time()), level, get_process_name(), msg)
    try:
        with open(path, "a", encoding="utf-8") as log_file:
            log_file.write(entry)
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise MySyslogError(f"Text driver: cannot open log file {path}: {reason}") from exc
    return entry