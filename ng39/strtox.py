"""Strict string-to-integer conversion with range checking.

Malformed input raises ValueError; out-of-range values raise OverflowError.
``long`` is taken to be 64 bits wide.
"""

import string

from .calc import maxof

__all__ = [
    "strtoull",
    "strtoll",
    "strtoul",
    "strtol",
    "strtouint",
    "strtoint",
    "strtou64",
    "strtou32",
    "strtou16",
    "strtou8",
    "strtos64",
    "strtos32",
    "strtos16",
    "strtos8",
]

_ULLONG_MAX = maxof(64)
_LLONG_MAX = maxof(64, True)


def _fixup_radix(s, base):
    if base == 0:
        base = 10
        if s.startswith("0"):
            base = 8
            if (s[1:2] in ("x", "X") and len(s) > 2
                    and s[2] in string.hexdigits):
                base = 16
    if base == 16 and s[:2] in ("0x", "0X"):
        s = s[2:]
    return s, base


def _parse_integer(s, base):
    """Return the value of the leading digits, how many there were, and
    whether the value overflowed."""
    res = 0
    consumed = 0
    overflow = False
    for ch in s:
        if "0" <= ch <= "9":
            val = ord(ch) - ord("0")
        elif ch.isascii() and ch.isalpha():
            val = ord(ch.lower()) - ord("a") + 10
        else:
            break
        if val >= base:
            break
        if res > (_ULLONG_MAX - val) // base:
            overflow = True
        res = (res * base + val) & _ULLONG_MAX
        consumed += 1
    return res, consumed, overflow


def _strtoull(s, base):
    digits, base = _fixup_radix(s, base)
    value, consumed, overflow = _parse_integer(digits, base)
    if overflow:
        raise OverflowError(f"{s!r} is out of range")
    if consumed == 0 or consumed != len(digits):
        raise ValueError(f"invalid integer {s!r} in base {base}")
    return value


def strtoull(s, base=0):
    """Parse an unsigned 64-bit integer; base 0 detects 0x and 0 prefixes."""
    if s.startswith("+"):
        s = s[1:]
    return _strtoull(s, base)


def strtoll(s, base=0):
    """Parse a signed 64-bit integer."""
    if s.startswith("-"):
        value = _strtoull(s[1:], base)
        if value > _LLONG_MAX + 1:
            raise OverflowError(f"{s!r} is out of range")
        return -value
    value = strtoull(s, base)
    if value > _LLONG_MAX:
        raise OverflowError(f"{s!r} is out of range")
    return value


def _unsigned(s, base, bits):
    value = strtoull(s, base)
    if value > maxof(bits):
        raise OverflowError(f"{s!r} does not fit in {bits} bits")
    return value


def _signed(s, base, bits):
    value = strtoll(s, base)
    if not -(maxof(bits, True) + 1) <= value <= maxof(bits, True):
        raise OverflowError(f"{s!r} does not fit in {bits} bits")
    return value


def strtoul(s, base=0):
    return _unsigned(s, base, 64)


def strtol(s, base=0):
    return _signed(s, base, 64)


def strtouint(s, base=0):
    return _unsigned(s, base, 32)


def strtoint(s, base=0):
    return _signed(s, base, 32)


def strtou64(s, base=0):
    return _unsigned(s, base, 64)


def strtou32(s, base=0):
    return _unsigned(s, base, 32)


def strtou16(s, base=0):
    return _unsigned(s, base, 16)


def strtou8(s, base=0):
    return _unsigned(s, base, 8)


def strtos64(s, base=0):
    return _signed(s, base, 64)


def strtos32(s, base=0):
    return _signed(s, base, 32)


def strtos16(s, base=0):
    return _signed(s, base, 16)


def strtos8(s, base=0):
    return _signed(s, base, 8)