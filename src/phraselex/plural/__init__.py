"""Plural family resolution and variant index selection.

Python 3.13+. External dependency: Babel (locale identifier parsing).
"""

from .families import (
    DEFAULT_FAMILY_MAP,
    DEFAULT_RESOLVER,
    FAMILY_TABLE,
    PluralFamilyResolver,
    build_family_map,
)
from .rules import PluralCount, clamp_index, plural_forms, select_plural_index, to_decimal

__all__ = [
    "DEFAULT_FAMILY_MAP",
    "DEFAULT_RESOLVER",
    "FAMILY_TABLE",
    "PluralCount",
    "PluralFamilyResolver",
    "build_family_map",
    "clamp_index",
    "plural_forms",
    "select_plural_index",
    "to_decimal",
]
