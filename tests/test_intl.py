import gettext as stdlib_gettext
import locale
import os
import struct

import pytest

from ng39 import intl

_CATEGORIES = [
    c
    for c in (
        locale.LC_CTYPE,
        locale.LC_TIME,
        locale.LC_MONETARY,
        getattr(locale, "LC_MESSAGES", None),
    )
    if c is not None
]


@pytest.fixture
def clean_state(monkeypatch):
    saved = {c: locale.setlocale(c) for c in _CATEGORIES}
    old_domain = stdlib_gettext.textdomain()
    monkeypatch.setattr(intl, "_domain", None)
    yield
    stdlib_gettext.textdomain(old_domain)
    for category, value in saved.items():
        locale.setlocale(category, value)


def _write_mo(path, catalog):
    keys = sorted(catalog)
    ids = [k.encode("ascii") for k in keys]
    strs = [catalog[k].encode("ascii") for k in keys]
    n = len(keys)
    orig_off = 28
    trans_off = orig_off + n * 8
    data_off = trans_off + n * 8

    data = b""
    orig_table = b""
    for item in ids:
        orig_table += struct.pack("<II", len(item), data_off + len(data))
        data += item + b"\0"
    trans_table = b""
    for item in strs:
        trans_table += struct.pack("<II", len(item), data_off + len(data))
        data += item + b"\0"

    header = struct.pack("<7I", 0x950412DE, 0, n, orig_off, trans_off, 0, 0)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(header + orig_table + trans_table + data)


def test_user_locale_prefers_language():
    assert intl.user_locale({"LANGUAGE": "fr", "LANG": "de"}) == "fr"


def test_user_locale_falls_back_to_lang():
    assert intl.user_locale({"LANG": "de_DE.UTF-8"}) == "de_DE.UTF-8"


def test_user_locale_default():
    assert intl.user_locale({}) == "C.UTF-8"


def test_gettext_before_init_is_identity(clean_state):
    assert intl.gettext("warn:") == "warn:"


def test_gettext_init_translates(clean_state, monkeypatch, tmp_path):
    monkeypatch.setenv("LANGUAGE", "de")
    _write_mo(
        tmp_path / "de" / "LC_MESSAGES" / "ng39test.mo",
        {"warn:": "Warnung:"},
    )

    assert intl.gettext_init("ng39test", tmp_path) == "de"
    assert intl.gettext("warn:") == "Warnung:"
    assert intl.gettext("untranslated") == "untranslated"


def test_gettext_init_exports_language(clean_state, monkeypatch, tmp_path):
    monkeypatch.delenv("LANGUAGE", raising=False)
    monkeypatch.setenv("LANG", "fr_FR.UTF-8")

    chosen = intl.gettext_init("ng39none", tmp_path)

    assert chosen == "fr_FR.UTF-8"
    assert os.environ["LANGUAGE"] == chosen
    assert intl.gettext("fatal:") == "fatal:"