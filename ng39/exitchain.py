"""A chain of callbacks run in reverse order of registration at exit."""

import atexit

__all__ = ["atexit_push", "atexit_pop", "atexit_apply"]

_chain = []


def atexit_push(func):
    """Add ``func`` to the front of the chain."""
    _chain.append(func)


def atexit_pop():
    """Remove and return the most recently pushed callback.

    Raises IndexError when the chain is empty.
    """
    if not _chain:
        raise IndexError("exit chain is empty")
    return _chain.pop()


def atexit_apply():
    """Pop and call every callback, newest first, until the chain is empty."""
    while _chain:
        atexit_pop()()


atexit.register(atexit_apply)