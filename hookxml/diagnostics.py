"""Process-global "last error" slot for fail-soft decode() callers."""

import threading

_lock = threading.Lock()
_last_error: str | None = None


def record_last_error(message: str) -> None:
    global _last_error
    with _lock:
        _last_error = message


def get_last_error() -> str | None:
    """Return the diagnostic recorded by the most recent failed decode()."""
    with _lock:
        return _last_error


def clear_last_error() -> None:
    global _last_error
    with _lock:
        _last_error = None
