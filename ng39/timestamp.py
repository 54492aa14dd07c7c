"""Monotonic clock readings."""

import time

__all__ = ["ts_now", "ts_mono"]

_NSEC_PER_SEC = 1_000_000_000


def ts_now():
    """Return the monotonic clock in nanoseconds."""
    return time.monotonic_ns()


def ts_mono():
    """Return the monotonic clock as a ``(seconds, nanoseconds)`` pair."""
    return divmod(ts_now(), _NSEC_PER_SEC)