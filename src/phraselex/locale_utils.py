"""Locale utilities for tag normalization and primary-language lookup.

Centralizes locale format normalization used throughout the codebase.
Provides canonical locale handling to ensure consistent map keys and lookups.

Python 3.13+. External dependency: Babel (locale identifier parsing).
"""

from __future__ import annotations

import functools
import os

from phraselex.constants import (
    DEFAULT_LOCALE_FALLBACK,
    LOCALE_ENV_VARS,
    MAX_LOCALE_CACHE_SIZE,
)

__all__ = [
    "clear_locale_cache",
    "get_primary_language",
    "get_system_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert a locale tag to lowercase POSIX form.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Tags are case-insensitive, so the result is lowercased for stable keys.

    Args:
        locale_code: Locale tag in BCP-47 or POSIX form

    Returns:
        Lowercase POSIX-formatted tag

    Example:
        >>> normalize_locale("en-US")
        'en_us'
        >>> normalize_locale("bs-Latn-BA")
        'bs_latn_ba'
        >>> normalize_locale("")
        ''
    """
    return locale_code.strip().replace("-", "_").lower()


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_primary_language(locale_code: str) -> str:
    """Reduce a locale tag to its primary-language subtag.

    Uses Babel's identifier parser, which also strips encoding suffixes
    (``.UTF-8``) and modifiers (``@euro``). Tags Babel refuses to parse
    fall back to the text before the first separator.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale tag (BCP-47 or POSIX, any case)

    Returns:
        Lowercase primary-language subtag; empty string for the invariant tag

    Example:
        >>> get_primary_language("pt-BR")
        'pt'
        >>> get_primary_language("sr_Latn_RS")
        'sr'
        >>> get_primary_language("de_DE.UTF-8")
        'de'
    """
    # Lazy import: defer loading Babel until a tag actually needs reducing
    from babel.core import parse_locale  # noqa: PLC0415

    normalized = normalize_locale(locale_code)
    try:
        language, *_ = parse_locale(normalized)
    except ValueError:
        language = normalized.split("_", 1)[0]
    return language.lower()


def clear_locale_cache() -> None:
    """Clear the memoized primary-language lookups."""
    get_primary_language.cache_clear()


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales and strips encoding suffixes.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en_US" as fallback.

    Returns:
        Detected locale tag in POSIX format (case preserved).

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'ru_RU.UTF-8'
        >>> get_system_locale()
        'ru_RU'
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in ("C", "POSIX"):
            return system_locale.split(".")[0].replace("-", "_")
    except (ValueError, AttributeError):
        pass

    for var in LOCALE_ENV_VARS:
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX"):
            locale_code = value.split(".")[0]
            if locale_code and locale_code not in ("C", "POSIX"):
                return locale_code.replace("-", "_")

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return DEFAULT_LOCALE_FALLBACK
