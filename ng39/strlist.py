"""A double-ended list of strings with line-wrapping support."""

from collections import deque
from enum import IntFlag

from .ctype import isspace
from .strings import wcsws
from .unicode import is_eoc, is_wide

__all__ = ["SlFlag", "StrList", "LINE_WRAP", "WORD_AVG_LEN"]

LINE_WRAP = 80
WORD_AVG_LEN = 8


class SlFlag(IntFlag):
    """General-purpose flags and storage modes of a StrList.

    STORE_COPY, STORE_SBUF and STORE_REF keep text; STORE_CHR keeps UTF-8
    bytes. At most one storage mode may be given; STORE_COPY is the default.
    """

    CALC_SRLEN = 1 << 0
    DUP_ON_POP = 1 << 1

    STORE_CHR = 1 << 28
    STORE_REF = 1 << 29
    STORE_SBUF = 1 << 30
    STORE_COPY = 1 << 31


_MODE_MASK = (
    SlFlag.STORE_CHR | SlFlag.STORE_REF | SlFlag.STORE_SBUF | SlFlag.STORE_COPY
)


def _is_space(ch):
    if ch.isascii():
        return isspace(ch)
    return wcsws(ch) is not None


def _needs_rewind(ch):
    return _is_space(ch) or is_eoc(ch)


def _advance(text, pos, limit):
    """Move forward until ``limit`` columns have been consumed."""
    cnt = 0
    end = len(text)
    while pos < end and cnt < limit:
        cnt += 1 + is_wide(text[pos])
        pos += 1
    return pos


def _rewind(text, pos, head, limit):
    """Look back for a break point within ``limit`` columns of ``pos``.

    Returns the position of a space or clause-ending character, or ``pos``
    itself if none was found.
    """
    cnt = 0
    start = pos
    while pos > head and cnt < limit:
        ch = text[pos]
        if _needs_rewind(ch):
            return pos
        cnt += 1 + is_wide(ch)
        pos -= 1
    return start


def _wrap_lines(text, wrap):
    """Yield the lines of ``text`` broken at about ``wrap`` columns."""
    tail = len(text)
    start = 0
    nxt = 0
    while nxt < tail:
        nxt = _advance(text, nxt, wrap + 1)
        prev = nxt
        if prev < tail:
            prev = _rewind(text, prev, start, WORD_AVG_LEN)
            nxt = prev + 1

        end = nxt
        if prev < tail and _is_space(text[prev]):
            end = prev
        yield text[start:end]
        start = nxt


class StrList:
    """Strings pushed at the front or the back and popped from the front."""

    def __init__(self, flags=0):
        flags = SlFlag(flags)
        mode = flags & _MODE_MASK
        if not mode:
            flags |= SlFlag.STORE_COPY
            mode = SlFlag.STORE_COPY
        if bin(int(mode)).count("1") > 1:
            raise ValueError(f"more than one storage mode given: {mode!r}")
        if mode & (SlFlag.STORE_COPY | SlFlag.STORE_CHR):
            flags |= SlFlag.DUP_ON_POP
        if flags & SlFlag.CALC_SRLEN and mode != SlFlag.STORE_REF:
            raise ValueError("CALC_SRLEN works only with STORE_REF")

        self.flags = flags
        self._mode = mode
        self._items = deque()

    def __len__(self):
        return len(self._items)

    def _prepare(self, s):
        if self._mode == SlFlag.STORE_CHR:
            data = s.encode("utf-8") if isinstance(s, str) else bytes(s)
            return data, len(data)
        if not isinstance(s, str):
            raise TypeError(f"expected a string, got {type(s).__name__}")
        if self._mode == SlFlag.STORE_REF:
            return s, len(s) if self.flags & SlFlag.CALC_SRLEN else 0
        return s, len(s)

    def push(self, s):
        """Put ``s`` at the front; return its length where the mode gives
        one, else 0."""
        item, length = self._prepare(s)
        self._items.appendleft(item)
        return length

    def push_back(self, s):
        """Put ``s`` at the back; return its length where the mode gives
        one, else 0."""
        item, length = self._prepare(s)
        self._items.append(item)
        return length

    def pop(self):
        """Remove and return the front item, or None when empty."""
        if not self._items:
            return None
        return self._items.popleft()

    def read_line(self, text, wrap=-1):
        """Break ``text`` into lines of about ``wrap`` columns and append
        them; -1 or None selects the default width."""
        if wrap is None or wrap == -1:
            wrap = LINE_WRAP
        if wrap < 0:
            raise ValueError(f"invalid wrap width {wrap}")
        if isinstance(text, (bytes, bytearray)):
            text = bytes(text).decode("utf-8")
        for line in _wrap_lines(text, wrap):
            self.push_back(line)

    def to_argv(self):
        """Pop every item into a list, front first."""
        argv = []
        while (item := self.pop()) is not None:
            argv.append(item)
        return argv