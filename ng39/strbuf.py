"""A growable string with a working-space mark for path manipulation."""

from .ctype import isspace
from .path import PTH_SEP, PTH_SEP_UNI, PTH_SEP_WIN, last_sep
from .strings import wcs_to_mbs
from .termas import warn

__all__ = ["StrBuf"]

_SPACES = "".join(chr(c) for c in range(256) if isspace(c))


class StrBuf:
    """A mutable string with a working-space offset ``ws``.

    Writes "at" an offset replace everything from that offset to the end.
    """

    sanitize_paths = True

    def __init__(self, text=""):
        self.text = str(text)
        self.ws = 0

    def __str__(self):
        return self.text

    def __len__(self):
        return len(self.text)

    def _check_off(self, off):
        if not 0 <= off <= len(self.text):
            raise IndexError(
                f"offset {off} outside buffer of length {len(self.text)}"
            )

    def trunc(self, n):
        """Drop ``n`` characters from the end."""
        if not 0 <= n <= len(self.text):
            raise ValueError(
                f"cannot truncate {n} characters from {len(self.text)}"
            )
        self.text = self.text[:len(self.text) - n]

    def trunc_to_ws(self):
        """Cut the buffer back to the working-space mark."""
        self.text = self.text[:self.ws]

    def puts_at(self, off, s):
        """Replace everything from ``off`` with ``s``; return ``len(s)``."""
        self._check_off(off)
        self.text = self.text[:off] + s
        return len(s)

    def puts(self, s):
        return self.puts_at(len(self.text), s)

    def puts_at_ws(self, s):
        return self.puts_at(self.ws, s)

    def putc_at(self, off, c):
        """Replace everything from ``off`` with the character ``c``."""
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return self.puts_at(off, c)

    def putc(self, c):
        return self.putc_at(len(self.text), c)

    def putc_at_ws(self, c):
        return self.putc_at(self.ws, c)

    def printf_at(self, off, fmt, *args):
        """Replace everything from ``off`` with ``fmt % args``."""
        return self.puts_at(off, fmt % args)

    def printf(self, fmt, *args):
        return self.printf_at(len(self.text), fmt, *args)

    def printf_at_ws(self, fmt, *args):
        return self.printf_at(self.ws, fmt, *args)

    def trim(self):
        """Remove leading and trailing whitespace."""
        self.text = self.text.strip(_SPACES)

    def _sanitize_pth_sep(self):
        if not self.sanitize_paths:
            return
        text = self.text
        mixed = PTH_SEP_UNI in text and PTH_SEP_WIN in text
        suffixed = text.endswith((PTH_SEP_UNI, PTH_SEP_WIN))
        if mixed:
            warn(f"path '{text}' is mixing separators")
        if suffixed:
            warn(f"path '{text}' has trailing separator")

    def init_ws(self, name):
        """Start over with ``name`` as content and working space."""
        self.text = name
        self.ws = len(name)
        self._sanitize_pth_sep()

    def reinit_ws(self, name):
        """Replace the content and working space with ``name``."""
        self.init_ws(name)

    def pth_append(self, name):
        """Append a separator and ``name``; return the characters added."""
        self.text += PTH_SEP + name
        self._sanitize_pth_sep()
        return len(name) + 1

    def pth_append_at_ws(self, name):
        """Replace what follows the working space with a separator and
        ``name``."""
        return self.puts_at(self.ws, PTH_SEP + name)

    def pth_to_dirname(self):
        """Cut the buffer at its last separator."""
        tail = last_sep(self.text)
        if tail is None:
            raise ValueError(f"path '{self.text}' has no separator")
        self.text = self.text[:len(self.text) - len(tail)]

    def detach(self):
        """Return the content and leave the buffer empty."""
        text = self.text
        self.text = ""
        self.ws = 0
        return text

    def to_bytes(self, fallback=None):
        """Encode the content as UTF-8, or return ``fallback`` on failure."""
        return wcs_to_mbs(self.text, fallback)