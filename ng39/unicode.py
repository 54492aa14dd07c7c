"""Unicode lookups: end-of-clause punctuation and East Asian wide characters."""

from bisect import bisect_left, bisect_right

__all__ = ["is_eoc", "is_wide"]

_CLAUSE = (
    0x0021,  # EXCLAMATION MARK
    0x002C,  # COMMA
    0x002E,  # FULL STOP
    0x003F,  # QUESTION MARK
    0x2025,  # TWO DOT LEADER
    0x2026,  # HORIZONTAL ELLIPSIS
    0x3001,  # IDEOGRAPHIC COMMA
    0x3002,  # IDEOGRAPHIC FULL STOP
    0xFF01,  # FULLWIDTH EXCLAMATION MARK
    0xFF0C,  # FULLWIDTH COMMA
    0xFF0E,  # FULLWIDTH FULL STOP
    0xFF1F,  # FULLWIDTH QUESTION MARK
)

_WIDE = (
    (0x1100, 0x115F),
    (0x231A, 0x231B),
    (0x2329, 0x232A),
    (0x23E9, 0x23EC),
    (0x23F0, 0x23F0),
    (0x23F3, 0x23F3),
    (0x25FD, 0x25FE),
    (0x2614, 0x2615),
    (0x2630, 0x2637),
    (0x2648, 0x2653),
    (0x267F, 0x267F),
    (0x268A, 0x268F),
    (0x2693, 0x2693),
    (0x26A1, 0x26A1),
    (0x26AA, 0x26AB),
    (0x26BD, 0x26BE),
    (0x26C4, 0x26C5),
    (0x26CE, 0x26CE),
    (0x26D4, 0x26D4),
    (0x26EA, 0x26EA),
    (0x26F2, 0x26F3),
    (0x26F5, 0x26F5),
    (0x26FA, 0x26FA),
    (0x26FD, 0x26FD),
    (0x2705, 0x2705),
    (0x270A, 0x270B),
    (0x2728, 0x2728),
    (0x274C, 0x274C),
    (0x274E, 0x274E),
    (0x2753, 0x2755),
    (0x2757, 0x2757),
    (0x2795, 0x2797),
    (0x27B0, 0x27B0),
    (0x27BF, 0x27BF),
    (0x2B1B, 0x2B1C),
    (0x2B50, 0x2B50),
    (0x2B55, 0x2B55),
    (0x2E80, 0x2E99),
    (0x2E9B, 0x2EF3),
    (0x2F00, 0x2FD5),
    (0x2FF0, 0x303E),
    (0x3041, 0x3096),
    (0x3099, 0x30FF),
    (0x3105, 0x312F),
    (0x3131, 0x318E),
    (0x3190, 0x31E5),
    (0x31EF, 0x321E),
    (0x3220, 0x3247),
    (0x3250, 0xA48C),
    (0xA490, 0xA4C6),
    (0xA960, 0xA97C),
    (0xAC00, 0xD7A3),
    (0xF900, 0xFAFF),
    (0xFE10, 0xFE19),
    (0xFE30, 0xFE52),
    (0xFE54, 0xFE66),
    (0xFE68, 0xFE6B),
    (0xFF01, 0xFF60),
    (0xFFE0, 0xFFE6),
)

_WIDE_STARTS = tuple(lo for lo, _ in _WIDE)


def _ord(c):
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def is_eoc(c):
    """Tell whether ``c`` ends a clause (comma, full stop, question mark...)."""
    code = _ord(c)
    i = bisect_left(_CLAUSE, code)
    return i < len(_CLAUSE) and _CLAUSE[i] == code


def is_wide(c):
    """Tell whether ``c`` takes two columns on a terminal."""
    code = _ord(c)
    i = bisect_right(_WIDE_STARTS, code) - 1
    return i >= 0 and code <= _WIDE[i][1]