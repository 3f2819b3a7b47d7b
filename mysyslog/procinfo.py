"""Lookup of the current process name."""

__all__ = ["PROC_COMM_PATH", "UNKNOWN_PROCESS", "get_process_name"]

PROC_COMM_PATH = "/proc/self/comm"
UNKNOWN_PROCESS = "unknown"
_MAX_NAME_LENGTH = 255


def get_process_name(comm_path=PROC_COMM_PATH):
    """Return the first line of ``comm_path`` without its newline.

    Returns ``"unknown"`` if the file cannot be read or is empty.
    """
    try:
        with open(comm_path, encoding="utf-8", errors="replace", newline="") as fh:
            line = fh.readline(_MAX_NAME_LENGTH)
    except OSError:
        return UNKNOWN_PROCESS
    if not line:
        return UNKNOWN_PROCESS
    return line[:-1] if line.endswith("\n") else line