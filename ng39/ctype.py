"""Locale-independent character classification for single bytes and UTF-8."""

from enum import IntEnum, IntFlag

__all__ = [
    "CType",
    "MbType",
    "isalpha",
    "isdigit",
    "iscntrl",
    "isgraph",
    "islower",
    "isprint",
    "ispunct",
    "isspace",
    "isupper",
    "isxdigit",
    "tolower",
    "toupper",
    "mb_seq_len",
    "is_surrogate",
    "is_high_surrogate",
    "is_low_surrogate",
]


class CType(IntFlag):
    """Classes a single byte can belong to."""

    CNTRL = 0x01
    SPACE = 0x02
    PUNCT = 0x04
    DIGIT = 0x08
    UPPER = 0x10
    LOWER = 0x20
    XDIGIT = 0x40
    SP = 0x80


class MbType(IntEnum):
    """Role of a byte in a UTF-8 sequence; the value is the sequence length."""

    CB = 0
    A = 1
    B = 2
    C = 3
    D = 4
    INVALID = 0xFF


_NONE = CType(0)

_CTYPE_RANGES = (
    (0, 8, CType.CNTRL),
    (9, 13, CType.CNTRL | CType.SPACE),
    (14, 31, CType.CNTRL),
    (32, 32, CType.SPACE | CType.SP),
    (33, 47, CType.PUNCT),
    (48, 57, CType.DIGIT),
    (58, 64, CType.PUNCT),
    (65, 70, CType.UPPER | CType.XDIGIT),
    (71, 90, CType.UPPER),
    (91, 96, CType.PUNCT),
    (97, 102, CType.LOWER | CType.XDIGIT),
    (103, 122, CType.LOWER),
    (123, 126, CType.PUNCT),
    (127, 127, CType.CNTRL),
    (128, 159, _NONE),
    (160, 160, CType.SPACE | CType.SP),
    (161, 191, CType.PUNCT),
    (192, 214, CType.UPPER),
    (215, 215, CType.PUNCT),
    (216, 222, CType.UPPER),
    (223, 246, CType.LOWER),
    (247, 247, CType.PUNCT),
    (248, 255, CType.LOWER),
)

_MBTYPE_RANGES = (
    (0x00, 0x7F, MbType.A),
    (0x80, 0xBF, MbType.CB),
    (0xC0, 0xDF, MbType.B),
    (0xE0, 0xEF, MbType.C),
    (0xF0, 0xF7, MbType.D),
    (0xF8, 0xFF, MbType.INVALID),
)


def _expand(ranges):
    table = []
    for lo, hi, kind in ranges:
        table.extend([kind] * (hi - lo + 1))
    assert len(table) == 256
    return tuple(table)


_CTYPE = _expand(_CTYPE_RANGES)
_MBTYPE = _expand(_MBTYPE_RANGES)


def _ord(c):
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _byte(c):
    code = _ord(c)
    return code if 0 <= code <= 0xFF else None


def _is(c, mask):
    code = _byte(c)
    return code is not None and bool(_CTYPE[code] & mask)


def isalpha(c):
    return _is(c, CType.UPPER | CType.LOWER)


def isdigit(c):
    return _is(c, CType.DIGIT)


def iscntrl(c):
    return _is(c, CType.CNTRL)


def isgraph(c):
    return _is(c, CType.PUNCT | CType.UPPER | CType.LOWER | CType.DIGIT)


def islower(c):
    return _is(c, CType.LOWER)


def isprint(c):
    return _is(
        c, CType.PUNCT | CType.UPPER | CType.LOWER | CType.DIGIT | CType.SP
    )


def ispunct(c):
    return _is(c, CType.PUNCT)


def isspace(c):
    return _is(c, CType.SPACE)


def isupper(c):
    return _is(c, CType.UPPER)


def isxdigit(c):
    return _is(c, CType.DIGIT | CType.XDIGIT)


def _shift_case(c, kind, delta):
    code = _byte(c)
    if code is None or not _CTYPE[code] & kind:
        return c
    code += delta
    return chr(code) if isinstance(c, str) else code


def tolower(c):
    """Lower-case a byte or character; others are returned unchanged."""
    return _shift_case(c, CType.UPPER, ord("a") - ord("A"))


def toupper(c):
    """Upper-case a byte or character; others are returned unchanged."""
    return _shift_case(c, CType.LOWER, ord("A") - ord("a"))


def mb_seq_len(b):
    """Classify a byte as a UTF-8 lead or continuation byte."""
    if not 0 <= b <= 0xFF:
        raise ValueError(f"not a byte value: {b}")
    return _MBTYPE[b]


def is_surrogate(c):
    return (_ord(c) & 0xF800) == 0xD800


def is_high_surrogate(c):
    return (_ord(c) & 0xFC00) == 0xD800


def is_low_surrogate(c):
    return (_ord(c) & 0xFC00) == 0xDC00