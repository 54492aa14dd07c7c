"""ANSI terminal colour escapes."""

from enum import IntEnum

__all__ = ["Color", "fmtcol", "highlight"]


class Color(IntEnum):
    """SGR attribute, foreground and background codes."""

    RESET = 0
    BOLD = 1

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37

    BRIGHT_BLACK = 90
    BRIGHT_RED = 91
    BRIGHT_GREEN = 92
    BRIGHT_YELLOW = 93
    BRIGHT_BLUE = 94
    BRIGHT_MAGENTA = 95
    BRIGHT_CYAN = 96
    BRIGHT_WHITE = 97

    BG_BLACK = 40
    BG_RED = 41
    BG_GREEN = 42
    BG_YELLOW = 43
    BG_BLUE = 44
    BG_MAGENTA = 45
    BG_CYAN = 46
    BG_WHITE = 47


def fmtcol(*args):
    """Build an escape sequence from one to three SGR codes."""
    if not 1 <= len(args) <= 3:
        raise TypeError(
            f"fmtcol() takes from 1 to 3 codes, {len(args)} given"
        )
    return "\033[" + ";".join(str(int(a)) for a in args) + "m"


def highlight(text, *args):
    """Wrap ``text`` in the given SGR codes followed by a reset."""
    return fmtcol(*args) + text + fmtcol(Color.RESET)