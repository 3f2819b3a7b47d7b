"""Driver writing log entries as one JSON object per line."""

import time

from .levels import MySyslogError, get_level_name, validate_level
from .procinfo import get_process_name

__all__ = ["MESSAGE_BUFFER_SIZE", "escape_json_string", "format_entry", "driver_write"]

MESSAGE_BUFFER_SIZE = 2048

_ESCAPES = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\r": "\\r", "\t": "\\t"}


def escape_json_string(text, output_size=MESSAGE_BUFFER_SIZE):
    """Escape quotes, backslashes, newlines, carriage returns and tabs.

    The result holds at most ``output_size - 2`` characters; an escape pair
    that does not fit is dropped, and input stops at the first NUL.
    """
    if output_size < 2:
        raise ValueError("output_size must be at least 2")
    limit = output_size - 2
    parts = []
    length = 0
    for char in text.partition("\0")[0]:
        if length >= limit:
            break
        escaped = _ESCAPES.get(char)
        if escaped is None:
            parts.append(char)
            length += 1
        elif length < limit - 1:
            parts.append(escaped)
            length += 2
    return "".join(parts)


def format_entry(timestamp, level, process, msg):
    """Return one JSON log line, newline included."""
    return (
        f'{{"timestamp":{int(timestamp)},"log_level":"{get_level_name(level)}",'
        f'"process":"{process}","message":"{escape_json_string(msg)}"}}\n'
    )


def driver_write(msg, level, path):
    """Append ``msg`` at ``level`` to the file ``path``; return the written line."""
    if msg is None or path is None:
        raise MySyslogError("JSON driver: msg and path cannot be None")
    level = validate_level(level)
    entry = format_entry(int(time.time()), level, get_process_name(), msg)
    try:
        with open(path, "a", encoding="utf-8") as log_file:
            log_file.write(entry)
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise MySyslogError(f"JSON driver: cannot open log file {path}: {reason}") from exc
    return entry