"""Shared constants for phraselex.

Single source of truth for locale and logging limits used across the
plural and runtime packages.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale handling
    "INVARIANT_LOCALE",
    "DEFAULT_LOCALE_FALLBACK",
    "LOCALE_ENV_VARS",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Logging
    "LOG_TRUNCATE",
]

# ============================================================================
# LOCALE HANDLING
# ============================================================================

# The invariant locale is represented by the empty tag. It resolves to the
# German family (singular for exactly one, plural otherwise), which matches
# English.
INVARIANT_LOCALE: str = ""

# Returned by get_system_locale() when the environment names no locale.
DEFAULT_LOCALE_FALLBACK: str = "en_US"

# Checked in order after locale.getlocale(); first non-empty value wins.
LOCALE_ENV_VARS: tuple[str, ...] = ("LC_ALL", "LC_MESSAGES", "LANG")

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum memoized primary-language lookups. Locale tags in a process are few.
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# LOGGING
# ============================================================================

# Phrase keys and templates are truncated to this many characters in log
# records so that user-supplied text cannot flood logs.
LOG_TRUNCATE: int = 50
