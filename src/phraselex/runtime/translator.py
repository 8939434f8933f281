"""Translator - Main API for phrase translation and pluralization.

Python 3.13+. External dependency: Babel (locale identifier parsing).
"""

from __future__ import annotations

import logging
import numbers
from typing import TYPE_CHECKING, Any

from phraselex.constants import LOG_TRUNCATE
from phraselex.locale_utils import get_system_locale
from phraselex.plural import DEFAULT_RESOLVER, clamp_index, select_plural_index
from phraselex.runtime.interpolation import try_interpolate
from phraselex.runtime.phrase_bank import PhraseBank

if TYPE_CHECKING:
    from collections.abc import Mapping

    from phraselex.enums import PluralFamily
    from phraselex.plural import PluralCount, PluralFamilyResolver
    from phraselex.runtime.phrase_bank import PhraseEntries

__all__ = ["Translator", "is_integral"]

logger = logging.getLogger(__name__)


def is_integral(value: object) -> bool:
    """Return True if ``value`` is an integer number (bool excluded).

    Accepts any ``numbers.Integral``, which covers ``int`` and NumPy
    integer scalars. Floats, Decimals and numeric strings are not integral.
    """
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


class Translator:
    """Phrase translator for a single locale.

    Looks up a phrase by key, picks the plural variant for a leading integer
    argument, and interpolates ``{N}`` placeholders. Translation never
    raises: a missing key yields the key itself and a template that cannot
    be interpolated is returned as written.

    Thread Safety:
        All methods are safe to call concurrently. Lookups share the bank's
        read lock; extend/unset/clear/replace take it exclusively.

    Examples:
        >>> t = Translator("en", {"cart": ["{0} item", "{0} items"]})
        >>> t.translate("cart", 1)
        '1 item'
        >>> t.translate("cart", 3)
        '3 items'
        >>> t.translate("no.such.key")
        'no.such.key'
        >>>
        >>> ru = Translator("ru-RU", {"files": ["{0} файл", "{0} файла", "{0} файлов"]})
        >>> ru.translate("files", 22)
        '22 файла'
    """

    __slots__ = ("_bank", "_family", "_locale", "_resolver")

    def __init__(
        self,
        locale: str | None = None,
        phrases: PhraseEntries | None = None,
        *,
        resolver: PluralFamilyResolver | None = None,
    ) -> None:
        """Initialize translator.

        Args:
            locale: Locale tag used for pluralization (en, en-US, pt_BR).
                None uses the system locale; "" is the invariant locale.
            phrases: Initial phrases, as accepted by extend()
            resolver: Locale -> plural family resolver (default: the shared
                resolver over the built-in family table)

        Raises:
            InvalidPhraseError: If a seed phrase is invalid
        """
        self._locale = get_system_locale() if locale is None else locale
        self._resolver = resolver if resolver is not None else DEFAULT_RESOLVER
        self._family = self._resolver.resolve(self._locale)
        self._bank = PhraseBank(phrases)

        logger.info(
            "Translator initialized for locale: %r (plural_family=%s, phrases=%d)",
            self._locale,
            self._family,
            len(self._bank),
        )

    @property
    def locale(self) -> str:
        """Locale tag used for pluralization (read-only)."""
        return self._locale

    @property
    def plural_family(self) -> PluralFamily:
        """Plural family resolved from the locale (read-only)."""
        return self._family

    @property
    def phrases(self) -> Mapping[str, tuple[str, ...]]:
        """Read-only snapshot of the phrase bank."""
        return self._bank.snapshot()

    def extend(self, phrases: PhraseEntries | None) -> None:
        """Add or overwrite phrases.

        Args:
            phrases: Mapping of key -> templates, or iterable of (key, templates)

        Raises:
            MissingPhrasesError: If phrases is None
            InvalidPhraseError: If any entry has no variants or a non-string
                variant; no entry from the call is applied
        """
        self._bank.extend(phrases)

    def unset(self, *keys: str) -> int:
        """Remove phrases by key. Absent keys are ignored.

        Returns:
            Number of phrases removed
        """
        return self._bank.unset(*keys)

    def clear(self) -> None:
        """Remove all phrases."""
        self._bank.clear()

    def replace(self, phrases: PhraseEntries | None) -> None:
        """Replace all phrases with ``phrases``.

        Raises:
            MissingPhrasesError: If phrases is None
            InvalidPhraseError: If any entry is invalid (phrases left unchanged)
        """
        self._bank.replace(phrases)

    def has(self, key: str) -> bool:
        """Return True if ``key`` has a phrase."""
        return key in self._bank

    def translate(self, key: str, *args: Any) -> str:
        """Translate ``key``, interpolating positional ``args``.

        When the first argument is an integer, it selects the plural variant
        for this translator's locale. Otherwise variant 0 is used.

        Args:
            key: Phrase key
            *args: Interpolation arguments; ``{N}`` takes ``args[N]``

        Returns:
            Translated text, the key itself if the phrase is missing, or the
            raw template if interpolation fails

        Example:
            >>> t = Translator("", {"greet": ["{0}, your name is {0}!"]})
            >>> t.translate("greet", "Ada")
            'Ada, your name is Ada!'
        """
        variants = self._bank.get(key)
        if variants is None:
            return key

        if args and is_integral(args[0]):
            template = self._pick(variants, args[0])
        else:
            template = variants[0]
        return try_interpolate(template, args)

    def translate_plural(self, key: str, count: PluralCount, *args: Any) -> str:
        """Translate ``key`` with an explicit plural count.

        Unlike translate(), the count may be fractional (float or Decimal).
        The count is also argument ``{0}``; ``args`` follow from ``{1}``.

        Example:
            >>> t = Translator("fr", {"apples": ["{0} pomme de {1}", "{0} pommes de {1}"]})
            >>> t.translate_plural("apples", 2, "Normandie")
            '2 pommes de Normandie'
        """
        variants = self._bank.get(key)
        if variants is None:
            return key
        return try_interpolate(self._pick(variants, count), (count, *args))

    def translate_singular(self, key: str, *args: Any) -> str:
        """Translate ``key`` using variant 0 regardless of argument types."""
        variants = self._bank.get(key)
        if variants is None:
            return key
        return try_interpolate(variants[0], args)

    def _pick(self, variants: tuple[str, ...], count: PluralCount) -> str:
        """Select the variant for ``count``, falling back to variant 0."""
        try:
            index = select_plural_index(self._family, count)
        except (TypeError, ValueError):
            logger.debug("Unusable plural count %r; using default variant", count)
            return variants[0]

        clamped = clamp_index(index, len(variants))
        if clamped != index and logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Plural variant %d missing (have %d) for template %r; using default",
                index,
                len(variants),
                variants[0][:LOG_TRUNCATE],
            )
        return variants[clamped]

    def __repr__(self) -> str:
        return (
            f"Translator(locale={self._locale!r}, plural_family={self._family!s}, "
            f"phrases={len(self._bank)})"
        )
