"""Building blocks for command-line tools: strings, integer parsing, paths, buffers, string lists, processes and messages."""

__version__ = "0.1.0"

__all__ = [
    "calc",
    "ctype",
    "unicode",
    "strings",
    "strtox",
    "tercol",
    "timestamp",
    "intl",
    "termas",
    "path",
    "strbuf",
    "strlist",
    "proc",
    "exitchain",
]