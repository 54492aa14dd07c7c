# ng39

`ng39` is a collection of small building blocks for command-line tools. It
needs nothing beyond the standard library.

## What is inside

| Module            | Purpose                                                                    |
|-------------------|----------------------------------------------------------------------------|
| `ng39.calc`       | Fixed-width integer limits, overflow checks, alignment and growth steps    |
| `ng39.ctype`      | Locale-independent character classes, UTF-8 lead bytes, UTF-16 surrogates  |
| `ng39.unicode`    | End-of-clause punctuation and East Asian wide characters                   |
| `ng39.strings`    | Prefix skipping, UTF-8 length and decoding, whitespace search, conversion  |
| `ng39.strtox`     | Strict string-to-integer parsing for the common C integer widths           |
| `ng39.tercol`     | ANSI colour codes and highlighted text                                     |
| `ng39.timestamp`  | Monotonic timestamps                                                       |
| `ng39.intl`       | Message translation set-up through `gettext`                               |
| `ng39.termas`     | Tagged terminal messages: hint, warn, error, fatal, BUG                    |
| `ng39.path`       | Path separators, home, executable, prefix, locale and working directory    |
| `ng39.strbuf`     | A string buffer with a "working space" offset for building paths           |
| `ng39.strlist`    | A stack/queue of strings and a width-aware line wrapper                    |
| `ng39.proc`       | Starting a program, silencing its output and waiting for it                |
| `ng39.exitchain`  | A last-in, first-out chain of functions run at interpreter exit            |

## Examples

Parsing integers. The base may be given, or left as `0` to detect a `0x`
or leading-`0` prefix. Malformed input raises `ValueError`; a value that
does not fit the chosen width raises `OverflowError`.

```python
from ng39 import strtox

strtox.strtoull("0x3939", 0)   # 14649
strtox.strtoull("0101", 0)     # 65
strtox.strtos8("-128", 10)     # -128
strtox.strtou8("256", 10)      # OverflowError
```

Character widths and UTF-8:

```python
from ng39 import strings, unicode

strings.mbslen("ミクミク".encode())   # 4
unicode.is_wide("ミ")                 # True
unicode.is_eoc("、")                  # True
```

Building a path in a string buffer:

```python
from ng39.strbuf import StrBuf

sb = StrBuf()
sb.init_ws("path/to/root/dir")
sb.pth_append("executable")   # path/to/root/dir/executable
sb.pth_append_at_ws("file")   # path/to/root/dir/file
str(sb)
```

Wrapping text to a terminal width, counting wide characters as two columns
and breaking at spaces or clause punctuation where it can:

```python
from ng39.strlist import StrList

sl = StrList()
sl.read_line("Hatsune Miku, sometimes called Miku Hatsune, ...", 80)
lines = sl.to_argv()
```

Terminal messages go to standard error with a coloured tag, unless
`ng39.termas.default_settings.use_tercol` is turned off. `die()` exits with
status 128 and `bug()` raises `BugError`:

```python
from ng39 import termas

termas.warn("disk almost full")                # warn: disk almost full
termas.error("cannot open file", "not found")  # error: cannot open file; not found
```

Running a program with its output sent to the null device:

```python
from ng39.proc import ProcFlag, proc_exec, proc_wait

child = proc_exec("echo", "echo", "hello", flags=ProcFlag.RD_STDOUT)
proc_wait(child)   # 0
```

## What it does not do

The package has no helpers for walking a directory tree or for creating a
directory together with its missing parents; use `os.walk` and
`os.makedirs` for those. It provides no command-line program of its own.

## Tests

The test suite uses pytest; the `test` extra lists what it needs.