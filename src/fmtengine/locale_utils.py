"""Locale code helpers.

Every locale code reaching Babel passes through normalize_locale, so callers
may use BCP-47 ("de-AT") or POSIX ("de_AT.UTF-8") spellings interchangeably.
get_system_locale supplies the code when a formatter is built without one.

Python 3.11+.
"""

from __future__ import annotations

import locale
import os
from collections.abc import Iterator

from fmtengine.constants import FALLBACK_LOCALE

__all__ = [
    "get_system_locale",
    "normalize_locale",
]

# Consulted after locale.getlocale(), most specific first.
_ENV_VARS: tuple[str, ...] = ("LC_ALL", "LC_MESSAGES", "LANG")

# Pseudo-locales that carry no language information.
_PSEUDO_LOCALES: frozenset[str] = frozenset({"C", "POSIX", ""})


def normalize_locale(locale_code: str) -> str:
    """Return ``locale_code`` with underscores and without POSIX suffixes.

    Examples:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("de_DE.UTF-8")
        'de_DE'
        >>> normalize_locale("ca_ES@valencia")
        'ca_ES'
    """
    code = locale_code.split(".", 1)[0].split("@", 1)[0]
    return code.replace("-", "_")


def _candidates() -> Iterator[str | None]:
    try:
        yield locale.getlocale()[0]
    except (ValueError, AttributeError):
        pass
    for var in _ENV_VARS:
        yield os.environ.get(var)


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Locale code of the running process.

    Tries ``locale.getlocale()`` and then the LC_ALL, LC_MESSAGES and LANG
    environment variables, skipping the C/POSIX pseudo-locales.

    Args:
        raise_on_failure: Raise instead of returning the fallback locale

    Returns:
        Normalized code, or FALLBACK_LOCALE when nothing usable is set

    Raises:
        RuntimeError: Nothing usable is set and ``raise_on_failure`` is True
    """
    for candidate in _candidates():
        if candidate:
            code = normalize_locale(candidate)
            if code not in _PSEUDO_LOCALES:
                return code

    if raise_on_failure:
        msg = f"Could not determine the system locale from getlocale() or {', '.join(_ENV_VARS)}"
        raise RuntimeError(msg)
    return FALLBACK_LOCALE
