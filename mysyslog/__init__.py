"""File logging with built-in plain-text and JSON line drivers."""

__version__ = "1.0.0"
__all__ = ["core", "levels", "procinfo", "text_driver", "json_driver"]