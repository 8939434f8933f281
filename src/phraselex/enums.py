"""Enumerations for phraselex type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class PluralFamily(StrEnum):
    """Family of languages sharing one count-to-variant rule.

    Each member names a rule in ``phraselex.plural.rules``. The set is closed:
    every locale resolves to exactly one of these families.

    StrEnum provides automatic string conversion: str(PluralFamily.GERMAN) == "german"
    """

    ARABIC = "arabic"
    """Six forms: zero, one, two, few, many, other."""

    BOSNIAN_SERBIAN = "bosnian_serbian"
    """Three forms keyed on the last digit (shares its rule with Russian)."""

    CHINESE = "chinese"
    """Single form; count never changes the phrase."""

    CROATIAN = "croatian"
    """Three forms keyed on the last digit (shares its rule with Russian)."""

    FRENCH = "french"
    """Two forms; zero takes the singular."""

    GERMAN = "german"
    """Two forms; only exactly one takes the singular. Also used for English."""

    RUSSIAN = "russian"
    """Three forms: one, few, many."""

    LITHUANIAN = "lithuanian"
    """Three forms with a teens exception."""

    CZECH = "czech"
    """Three forms: one, two-to-four, other."""

    POLISH = "polish"
    """Three forms: one, few, many."""

    ICELANDIC = "icelandic"
    """Two forms keyed on the last digit."""

    SLOVENIAN = "slovenian"
    """Four forms keyed on the last two digits."""


__all__ = [
    "PluralFamily",
]
