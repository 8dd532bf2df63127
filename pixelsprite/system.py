"""Time, path and process helpers."""

from __future__ import annotations

import time
from typing import NoReturn

_SEPARATORS = "/\\"


def now_microseconds() -> int:
    """Monotonic clock reading in microseconds."""
    return time.monotonic_ns() // 1_000


def now_milliseconds() -> int:
    """Monotonic clock reading in milliseconds."""
    return time.monotonic_ns() // 1_000_000


def sleep_milliseconds(msec: int) -> None:
    if msec < 0:
        raise ValueError("msec must not be negative")
    time.sleep(msec / 1000)


def path_basename(path: str) -> str:
    """Last component of ``path``, ignoring trailing separators."""
    trimmed = path.rstrip(_SEPARATORS)
    start = max(trimmed.rfind("/"), trimmed.rfind("\\")) + 1
    return trimmed[start:]


def path_extension(path: str) -> str:
    """Extension of the last component, starting at its first dot; empty if none."""
    last = path[max(path.rfind("/"), path.rfind("\\")) + 1:]
    dot = last.find(".")
    return "" if dot < 0 else last[dot:]


def abort(exit_code: int) -> NoReturn:
    """Terminate with the given exit code."""
    raise SystemExit(exit_code)