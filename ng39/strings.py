"""String helpers: prefix skipping, UTF-8 scanning and text conversion."""

from .ctype import MbType, is_surrogate, isspace, mb_seq_len

__all__ = [
    "strskip",
    "strchrnul",
    "mbslen",
    "mbtowc",
    "mbsws",
    "wcsws",
    "wcs_to_mbs",
    "mbs_to_wcs",
]

# Characters of the "space" class in a C.UTF-8 locale.
_WSPACE = frozenset(
    {0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x20, 0x1680, 0x2028, 0x2029, 0x205F,
     0x3000}
    | set(range(0x2000, 0x2007))
    | set(range(0x2008, 0x200B))
)


def _iswspace(code):
    return code in _WSPACE


def strskip(s1, s2):
    """Return ``s1`` with the prefix ``s2`` removed, or None if absent."""
    return s1[len(s2):] if s1.startswith(s2) else None


def strchrnul(s, c):
    """Return the index of the first ``c`` in ``s``, or ``len(s)``."""
    idx = s.find(c)
    return len(s) if idx < 0 else idx


def _sequences(data):
    """Yield the offset and length of each UTF-8 sequence in ``data``."""
    pos = 0
    while pos < len(data):
        kind = mb_seq_len(data[pos])
        if kind in (MbType.CB, MbType.INVALID):
            raise ValueError(
                f"invalid UTF-8 lead byte 0x{data[pos]:02x} at offset {pos}"
            )
        yield pos, int(kind)
        pos += kind


def mbslen(data):
    """Count the characters in UTF-8 ``data``, independent of the locale."""
    return sum(1 for _ in _sequences(bytes(data)))


def mbtowc(seq):
    """Decode the UTF-8 sequence that starts ``seq`` into a code point.

    A byte that does not start a multibyte sequence is returned as a
    signed char value.
    """
    seq = bytes(seq)
    if not seq:
        return 0
    kind = mb_seq_len(seq[0])
    if kind not in (MbType.B, MbType.C, MbType.D):
        return seq[0] - 0x100 if seq[0] & 0x80 else seq[0]
    if len(seq) < kind:
        raise ValueError(f"truncated UTF-8 sequence {seq!r}")

    res = 0
    shift = 6
    mask = 0x1F
    if kind == MbType.D:
        res |= seq[3] & 0x3F
        shift += 6
        mask >>= 1
    if kind in (MbType.C, MbType.D):
        res |= (seq[2] & 0x3F) << (shift - 6)
        shift += 6
        mask >>= 1
    return res | ((seq[0] & mask) << shift) | ((seq[1] & 0x3F) << (shift - 6))


def mbsws(data):
    """Return ``data`` from its first whitespace character, or None."""
    data = bytes(data)
    for pos, length in _sequences(data):
        if length == 1:
            found = isspace(data[pos])
        else:
            found = _iswspace(mbtowc(data[pos:pos + length]))
        if found:
            return data[pos:]
    return None


def wcsws(s):
    """Return ``s`` from its first whitespace character, or None."""
    pos = 0
    while pos < len(s):
        ch = s[pos]
        if is_surrogate(ch):
            pos += 2
        elif _iswspace(ord(ch)):
            return s[pos:]
        else:
            pos += 1
    return None


def wcs_to_mbs(s, fallback=None):
    """Encode text as UTF-8, returning ``fallback`` if that is impossible."""
    try:
        return s.encode("utf-8")
    except UnicodeEncodeError:
        if fallback is None:
            raise
        return fallback


def mbs_to_wcs(data, fallback=None):
    """Decode UTF-8 bytes, returning ``fallback`` if they are invalid."""
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError:
        if fallback is None:
            raise
        return fallback