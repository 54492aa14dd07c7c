"""Message translation through the gettext catalogue."""

import gettext as _gettext
import locale
import os

__all__ = ["gettext", "user_locale", "gettext_init"]

TEXT_DOMAIN = "ng39"
TEXT_LOCALE = ""

_domain = None


def gettext(msgid):
    """Translate ``msgid``; it is returned as is until gettext_init runs."""
    if _domain is None:
        return msgid
    return _gettext.dgettext(_domain, msgid)


def user_locale(environ=None):
    """Pick the locale for messages: LANGUAGE, then LANG, then C.UTF-8."""
    if TEXT_LOCALE:
        return TEXT_LOCALE
    if environ is None:
        environ = os.environ
    for name in ("LANGUAGE", "LANG"):
        value = environ.get(name)
        if value is not None:
            return value
    return "C.UTF-8"


def _setlocale(category, name):
    try:
        locale.setlocale(category, name)
    except locale.Error:
        pass


def gettext_init(domain=TEXT_DOMAIN, locale_dir=None):
    """Bind the text domain and set up the locale; return the locale used."""
    global _domain

    lang = user_locale()
    _gettext.textdomain(domain)
    _gettext.bindtextdomain(
        domain, None if locale_dir is None else os.fspath(locale_dir)
    )

    os.environ["LANGUAGE"] = lang

    _setlocale(locale.LC_CTYPE, "C.UTF-8")
    _setlocale(locale.LC_TIME, lang)
    _setlocale(locale.LC_MONETARY, lang)
    messages = getattr(locale, "LC_MESSAGES", None)
    if messages is not None:
        _setlocale(messages, lang)

    _domain = domain
    return lang