"""Terminal messages: tagged, optionally coloured lines on stdout or stderr.

Fatal messages raise SystemExit(128); bug reports raise BugError.
"""

import os
import sys
from dataclasses import dataclass
from enum import IntEnum, IntFlag

from .ctype import iscntrl
from .intl import gettext as _
from .tercol import Color, fmtcol, highlight
from .timestamp import ts_mono

__all__ = [
    "Level",
    "MasFlag",
    "Settings",
    "BugError",
    "replace_bad_cntrl",
    "format_message",
    "termas",
    "mas",
    "hint",
    "warn",
    "error",
    "die",
    "bug",
]

MAS_BUF_CAP = 4096
ALT_CNTRL = "?"


class Level(IntEnum):
    LOG = 0
    HINT = 1
    WARN = 2
    ERROR = 3
    FATAL = 4
    BUG = 5


class MasFlag(IntFlag):
    SHOW_FILE = 1 << 0
    SHOW_FUNC = 1 << 1
    TO_STDOUT = 1 << 2
    NO_EXIT = 1 << 3


@dataclass
class Settings:
    """User preferences for message output."""

    use_tercol: bool = True
    timestamp: bool = False
    pid: bool = False


default_settings = Settings()


class BugError(RuntimeError):
    """An internal invariant was broken."""


_TAGS = {
    Level.HINT: ("hint:", (Color.BOLD, Color.YELLOW)),
    Level.WARN: ("warn:", (Color.BOLD, Color.MAGENTA)),
    Level.ERROR: ("error:", (Color.BOLD, Color.RED)),
    Level.FATAL: ("fatal:", (Color.BOLD, Color.RED)),
    Level.BUG: ("BUG:", (Color.BOLD, Color.RED, Color.BG_BLACK)),
}


def _is_bad_cntrl(ch):
    return ch.isascii() and iscntrl(ch) and ch not in "\t\n\033"


def replace_bad_cntrl(buf, cap=MAS_BUF_CAP - 1, alt=ALT_CNTRL):
    """Replace control characters other than tab, newline and escape.

    Each one becomes ``alt``; if the longer result would exceed ``cap``
    characters, a single ``?`` is used instead.
    """
    if not alt:
        raise ValueError("replacement must not be empty")
    count = sum(1 for ch in buf if _is_bad_cntrl(ch))
    if not count:
        return buf
    if (len(alt) - 1) * count > cap - len(buf):
        alt = "?"
    return "".join(alt if _is_bad_cntrl(ch) else ch for ch in buf)


class _Buffer:
    def __init__(self, cap):
        self.parts = []
        self.avail = cap

    def put(self, text):
        """Append ``text``; return False once the buffer is full."""
        if len(text) < self.avail:
            self.parts.append(text)
            self.avail -= len(text)
            return True
        self.parts.append(text[:self.avail])
        self.avail = 0
        return False

    def strip_tail(self, colored):
        text = "".join(self.parts)
        reset = fmtcol(Color.RESET)
        tail = ""
        if colored and text.endswith(reset):
            text, tail = text[:-len(reset)], reset
        self.parts = [text.rstrip(" \t\n\v\f\r:") + tail]

    def text(self):
        return "".join(self.parts)


def _caller():
    frame = sys._getframe(1)
    while frame is not None and frame.f_code.co_filename == __file__:
        frame = frame.f_back
    if frame is None:
        return "?", 0, "?"
    code = frame.f_code
    return os.path.basename(code.co_filename), frame.f_lineno, code.co_name


def _compose(buf, level, message, hint, flags, file, line, func, settings):
    colored = settings.use_tercol
    tag = _TAGS.get(level)

    if settings.timestamp or tag is None:
        sec, nsec = ts_mono()
        stamp = f"[{sec}.{nsec // 1000}] "
        if not buf.put(highlight(stamp, Color.GREEN) if colored else stamp):
            return

    if settings.pid:
        mark = highlight(">", Color.BOLD) if colored else ">"
        if not buf.put(f"{mark}{os.getpid()} "):
            return

    show_pos = bool(flags & (MasFlag.SHOW_FILE | MasFlag.SHOW_FUNC))
    if tag is not None:
        name, attrs = tag
        name = _(highlight(name, *attrs) if colored else name)
        if not show_pos:
            name += " "
        if not buf.put(name):
            return

    if flags & MasFlag.SHOW_FILE:
        sep = "" if flags & MasFlag.SHOW_FUNC else " "
        pos = f"{file}:{line}:{sep}"
        if not buf.put(highlight(pos, Color.BOLD) if colored else pos):
            return

    if flags & MasFlag.SHOW_FUNC:
        where = f"{func}: "
        if not buf.put(highlight(where, Color.BOLD) if colored else where):
            return

    if not message:
        buf.strip_tail(colored)
        return

    if not buf.put(message):
        return

    if hint:
        if buf.avail <= 2:
            return
        buf.put("; ")
        buf.put(hint)


def format_message(level, message, *, hint=None, flags=0, file=None,
                   line=None, func=None, settings=None):
    """Build a message line, without the trailing newline."""
    level = Level(level)
    flags = MasFlag(flags)
    if settings is None:
        settings = default_settings
    if (flags & (MasFlag.SHOW_FILE | MasFlag.SHOW_FUNC)
            and None in (file, line, func)):
        c_file, c_line, c_func = _caller()
        file = c_file if file is None else file
        line = c_line if line is None else line
        func = c_func if func is None else func

    buf = _Buffer(MAS_BUF_CAP - 1)
    _compose(buf, level, message, hint, flags, file, line, func, settings)
    return replace_bad_cntrl(buf.text(), MAS_BUF_CAP - 1)


def termas(level, message, *, hint=None, flags=0, file=None, line=None,
           func=None, settings=None, stream=None):
    """Write a message line and act on its level.

    Returns 0 for messages sent to stdout and -1 otherwise, so that callers
    can pass the result on as a failure value.
    """
    level = Level(level)
    flags = MasFlag(flags)
    text = format_message(level, message, hint=hint, flags=flags, file=file,
                          line=line, func=func, settings=settings)
    to_stdout = bool(flags & MasFlag.TO_STDOUT)
    if stream is None:
        stream = sys.stdout if to_stdout else sys.stderr

    stream.write(text + "\n")
    stream.flush()

    if level is Level.BUG:
        raise BugError(text)
    if level is Level.FATAL and not flags & MasFlag.NO_EXIT:
        raise SystemExit(128)
    return 0 if to_stdout else -1


def mas(message):
    """Print a timestamped log line on stdout."""
    return termas(Level.LOG, message, flags=MasFlag.TO_STDOUT)


def hint(message):
    return termas(Level.HINT, message)


def warn(message, hint=None):
    return termas(Level.WARN, message, hint=hint)


def error(message, hint=None):
    return termas(Level.ERROR, message, hint=hint)


def die(message, hint=None):
    """Report a fatal error and exit with status 128."""
    termas(Level.FATAL, message, hint=hint)


def bug(message):
    """Report a broken invariant by raising BugError."""
    termas(Level.BUG, message)