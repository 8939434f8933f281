"""Plural variant index selection.

Each plural family maps a count to a 0-based index into a phrase's variant
sequence. Rules work on ``decimal.Decimal`` so that fractional counts and
very large integers are exact; ``%`` on Decimal keeps the sign of the
dividend, and negative counts go through the same arithmetic unchanged.

Variant order per family:
    ARABIC                      zero, one, two, few, many, other
    BOSNIAN_SERBIAN / CROATIAN  one, few, many
    RUSSIAN                     one, few, many
    CHINESE                     other
    FRENCH / GERMAN             one, other
    LITHUANIAN                  one, few, other
    CZECH                       one, few, other
    POLISH                      one, few, many
    ICELANDIC                   one, other
    SLOVENIAN                   one, two, few, other

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import numbers
from collections.abc import Callable, Mapping
from decimal import Decimal, localcontext
from types import MappingProxyType
from typing import TypeAlias

from phraselex.enums import PluralFamily

__all__ = [
    "PluralCount",
    "clamp_index",
    "plural_forms",
    "select_plural_index",
    "to_decimal",
]

PluralCount: TypeAlias = int | float | Decimal

_TEN = Decimal(10)
_HUNDRED = Decimal(100)


def to_decimal(count: PluralCount) -> Decimal:
    """Convert a count to Decimal.

    Any numbers.Integral (int, NumPy integer scalars) converts exactly.

    Floats go through their shortest repr so that ``1.1`` becomes
    ``Decimal("1.1")`` rather than its binary expansion.

    Raises:
        TypeError: If count is not an integer, float, or Decimal
        ValueError: If count is NaN or infinite
    """
    if isinstance(count, Decimal):
        value = count
    elif isinstance(count, bool):
        msg = "Plural count must be a number, got bool"
        raise TypeError(msg)
    elif isinstance(count, numbers.Integral):
        value = Decimal(int(count))
    elif isinstance(count, float):
        value = Decimal(repr(count))
    else:
        msg = f"Plural count must be int, float or Decimal, got {type(count).__name__}"
        raise TypeError(msg)

    if not value.is_finite():
        msg = f"Plural count must be finite, got {count!r}"
        raise ValueError(msg)
    return value


def _remainders(n: Decimal) -> tuple[Decimal, Decimal]:
    """Return (n % 10, n % 100) without overflowing the context precision."""
    with localcontext() as ctx:
        # The integer quotient must fit in prec digits or % raises.
        ctx.prec = max(ctx.prec, n.adjusted() + 3)
        return n % _TEN, n % _HUNDRED


def _arabic(n: Decimal, mod10: Decimal, mod100: Decimal) -> int:
    if n < 3:
        return int(n)
    if 3 <= mod100 <= 10:
        return 3
    return 4 if mod100 >= 11 else 5


def _slavic(n: Decimal, mod10: Decimal, mod100: Decimal) -> int:
    if n != 11 and mod10 == 1:
        return 0
    if 2 <= mod10 <= 4 and not 12 <= n <= 14:
        return 1
    return 2


def _chinese(n: Decimal, mod10: Decimal, mod100: Decimal) -> int:
    return 0


def _french(n: Decimal, mod10: Decimal, mod100: Decimal) -> int:
    return 1 if n > 1 else 0


def _german(n: Decimal, mod10: Decimal, mod100: Decimal) -> int:
    return 1 if n != 1 else 0


def _lithuanian(n: Decimal, mod10: Decimal, mod100: Decimal) -> int:
    if mod10 == 1 and mod100 != 11:
        return 0
    return 1 if 2 <= mod10 <= 9 and (mod100 < 11 or mod100 > 19) else 2


def _czech(n: Decimal, mod10: Decimal, mod100: Decimal) -> int:
    if n == 1:
        return 0
    return 1 if 2 <= n <= 4 else 2


def _polish(n: Decimal, mod10: Decimal, mod100: Decimal) -> int:
    if n == 1:
        return 0
    # No upper bound on n itself: 1002 takes the same branch as 2.
    return 1 if n >= 2 and mod10 <= 4 and (mod100 < 10 or mod100 >= 20) else 2


def _icelandic(n: Decimal, mod10: Decimal, mod100: Decimal) -> int:
    return 1 if mod10 != 1 or mod100 == 11 else 0


def _slovenian(n: Decimal, mod10: Decimal, mod100: Decimal) -> int:
    if mod100 == 1:
        return 0
    if mod100 == 2:
        return 1
    if mod100 in (3, 4):
        return 2
    return 3


_RULES: Mapping[PluralFamily, Callable[[Decimal, Decimal, Decimal], int]] = MappingProxyType({
    PluralFamily.ARABIC: _arabic,
    PluralFamily.BOSNIAN_SERBIAN: _slavic,
    PluralFamily.CHINESE: _chinese,
    PluralFamily.CROATIAN: _slavic,
    PluralFamily.FRENCH: _french,
    PluralFamily.GERMAN: _german,
    PluralFamily.RUSSIAN: _slavic,
    PluralFamily.LITHUANIAN: _lithuanian,
    PluralFamily.CZECH: _czech,
    PluralFamily.POLISH: _polish,
    PluralFamily.ICELANDIC: _icelandic,
    PluralFamily.SLOVENIAN: _slovenian,
})

_FORMS: Mapping[PluralFamily, int] = MappingProxyType({
    PluralFamily.ARABIC: 6,
    PluralFamily.BOSNIAN_SERBIAN: 3,
    PluralFamily.CHINESE: 1,
    PluralFamily.CROATIAN: 3,
    PluralFamily.FRENCH: 2,
    PluralFamily.GERMAN: 2,
    PluralFamily.RUSSIAN: 3,
    PluralFamily.LITHUANIAN: 3,
    PluralFamily.CZECH: 3,
    PluralFamily.POLISH: 3,
    PluralFamily.ICELANDIC: 2,
    PluralFamily.SLOVENIAN: 4,
})


def select_plural_index(family: PluralFamily, count: PluralCount) -> int:
    """Select the variant index for ``count`` under ``family``'s rule.

    Args:
        family: Plural family of the active locale
        count: Number being pluralized (int, float, or Decimal)

    Returns:
        0-based variant index. Only Arabic with a negative count can return
        a negative index; clamp_index() maps that to the default variant.

    Raises:
        TypeError: If count is not a number
        ValueError: If count is NaN or infinite

    Examples:
        >>> select_plural_index(PluralFamily.GERMAN, 1)
        0
        >>> select_plural_index(PluralFamily.RUSSIAN, 22)
        1
        >>> select_plural_index(PluralFamily.ARABIC, 100)
        5
        >>> select_plural_index(PluralFamily.SLOVENIAN, 103)
        2
    """
    n = to_decimal(count)
    mod10, mod100 = _remainders(n)
    return _RULES[family](n, mod10, mod100)


def clamp_index(index: int, variant_count: int) -> int:
    """Fall back to the default variant when ``index`` is out of range.

    Phrase authors may omit rarely used forms; variant 0 is the catch-all.

    Examples:
        >>> clamp_index(1, 2)
        1
        >>> clamp_index(5, 2)
        0
    """
    return index if 0 <= index < variant_count else 0


def plural_forms(family: PluralFamily) -> int:
    """Number of distinct variants ``family``'s rule can select."""
    return _FORMS[family]
