"""Name ordering for category listings.

The default key approximates a root-locale string comparison in three levels:

1. base characters, ignoring case and diacritics ("cafe" == "Café"), with
   spaces and punctuation before symbols, symbols before digits, digits
   before letters
2. diacritics, unaccented first ("cafe" < "café")
3. case, lowercase first ("cola" < "Cola")

When a locale name is configured, ``locale.strxfrm`` under that LC_COLLATE
replaces the default key.
"""

from __future__ import annotations

import locale
import unicodedata
from typing import Callable, Optional

from drinkbar.config import ConfigError

SortKey = Callable[[str], object]


def _char_rank(ch: str) -> int:
    """Class order for primary comparison: spaces, punctuation, symbols, digits, letters."""
    cat = unicodedata.category(ch)
    if cat[0] in "ZC":
        return 0
    if cat[0] == "P":
        return 1
    if cat[0] == "S":
        return 2
    if cat[0] == "N":
        return 3
    return 4


def default_key(text: str) -> tuple:
    """Three-level collation key for ``text``."""
    decomposed = unicodedata.normalize("NFD", text)

    base_chars: list[str] = []
    marks: list[tuple[int, ...]] = []
    for ch in decomposed:
        if unicodedata.combining(ch):
            # Leading combining marks have no base letter to attach to
            if marks:
                marks[-1] += (ord(ch),)
            continue
        base_chars.append(ch)
        marks.append(())

    base = "".join(base_chars)
    primary = tuple((_char_rank(c), c) for c in base.casefold())
    case = tuple(1 if ch.isupper() else 0 for ch in base)
    return (primary, tuple(marks), case)


def make_sort_key(locale_name: Optional[str] = None) -> SortKey:
    """Return the name sort key for the given locale.

    Args:
        locale_name: An LC_COLLATE locale such as 'ro_RO.UTF-8', or None/''
            for the built-in key.

    Raises:
        ConfigError: The platform does not know ``locale_name``.
    """
    if not locale_name:
        return default_key
    try:
        locale.setlocale(locale.LC_COLLATE, locale_name)
    except locale.Error as e:
        raise ConfigError(f"Unknown locale: {locale_name} ({e})") from e
    return locale.strxfrm


def describe(locale_name: Optional[str]) -> str:
    """Short label for the active collation, used in status output."""
    return f"locale {locale_name}" if locale_name else "built-in"
