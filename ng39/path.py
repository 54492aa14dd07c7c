"""Path separators, well-known directories and symbolic-link resolution.

Directory lookups are computed on the first call and cached afterwards.
"""

import os
import sys
from functools import lru_cache

from .termas import BugError

__all__ = [
    "PTH_SEP_UNI",
    "PTH_SEP_WIN",
    "PTH_SEP",
    "is_sep",
    "is_abs",
    "next_sep",
    "last_sep",
    "is_dot",
    "delink",
    "home",
    "executable",
    "prefix",
    "locale_dir",
    "cwd",
]

PTH_SEP_UNI = "/"
PTH_SEP_WIN = "\\"

_WINDOWS = os.name == "nt"

PTH_SEP = PTH_SEP_WIN if _WINDOWS else PTH_SEP_UNI
_SEPS = (PTH_SEP_WIN, PTH_SEP_UNI) if _WINDOWS else (PTH_SEP_UNI,)


def is_sep(c):
    """Tell whether ``c`` is a path separator on this platform."""
    return c in _SEPS


def is_abs(name):
    """Tell whether ``name`` is an absolute path."""
    if not name:
        return False
    if _WINDOWS:
        return is_sep(name[0]) or (len(name) >= 2 and name[1] == ":")
    return name[0] == PTH_SEP_UNI


def next_sep(s):
    """Return ``s`` from its first separator onwards, or None."""
    found = [pos for pos in (s.find(sep) for sep in _SEPS) if pos >= 0]
    return s[min(found):] if found else None


def last_sep(s):
    """Return ``s`` from its last separator onwards, or None."""
    pos = max(s.rfind(sep) for sep in _SEPS)
    return s[pos:] if pos >= 0 else None


def is_dot(name):
    """Tell whether ``name`` is ``.`` or ``..``."""
    return name in (".", "..")


def delink(name):
    """Return the target of the symbolic link ``name``, or None."""
    try:
        return os.readlink(name)
    except (OSError, ValueError):
        return None


@lru_cache(maxsize=None)
def home():
    """Return the home directory of the current user."""
    if _WINDOWS:
        name = os.environ.get("USERPROFILE") or os.path.expanduser("~")
        if not name or name == "~":
            raise BugError("cannot determine the home directory")
        return name

    import pwd

    try:
        return pwd.getpwuid(os.getuid()).pw_dir
    except KeyError as exc:
        raise BugError("current user has no password entry") from exc


@lru_cache(maxsize=None)
def executable():
    """Return the path of the running executable."""
    name = None
    if sys.platform.startswith("linux"):
        name = delink("/proc/self/exe")
    if not name:
        name = sys.executable
    if not name:
        raise BugError("cannot determine the executable path")
    return name


@lru_cache(maxsize=None)
def prefix():
    """Return the directory that holds the executable."""
    child = executable()
    tail = last_sep(child)
    if tail is None:
        raise BugError(f"executable path '{child}' has no separator")
    return child[:len(child) - len(tail)]


@lru_cache(maxsize=None)
def locale_dir():
    """Return the directory holding message catalogues."""
    return prefix() + PTH_SEP + "locale"


@lru_cache(maxsize=None)
def cwd():
    """Return the working directory as it was on the first call."""
    return os.getcwd()