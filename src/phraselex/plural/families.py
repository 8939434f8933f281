"""Locale-to-plural-family mapping and resolution.

The family table lists, for each plural family, the locale tags whose
languages share that family's rule. It is flattened once at import into an
immutable mapping keyed by normalized tag and shared by reference; resolvers
receive the mapping explicitly rather than reaching for a global.

Resolution order:
    1. Exact (normalized) tag
    2. Primary-language subtag
    3. Invariant tag (German family)

Python 3.13+. External dependency: Babel (via locale_utils).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from phraselex.constants import INVARIANT_LOCALE
from phraselex.enums import PluralFamily
from phraselex.locale_utils import get_primary_language, normalize_locale

__all__ = [
    "DEFAULT_FAMILY_MAP",
    "DEFAULT_RESOLVER",
    "FAMILY_TABLE",
    "PluralFamilyResolver",
    "build_family_map",
]

FAMILY_TABLE: Mapping[PluralFamily, tuple[str, ...]] = MappingProxyType({
    PluralFamily.ARABIC: ("ar",),
    PluralFamily.BOSNIAN_SERBIAN: ("bs-Latn-BA", "bs-Cyrl-BA", "srl-RS", "sr-RS"),
    PluralFamily.CHINESE: (
        "id", "id-ID", "ja", "ko", "ko-KR", "lo", "ms", "th", "th-TH", "zh",
    ),
    PluralFamily.CROATIAN: ("hr", "hr-HR"),
    # The invariant tag lives here: English pluralizes like German.
    PluralFamily.GERMAN: (
        INVARIANT_LOCALE, "fa", "da", "de", "en", "es", "fi", "el", "he", "hi-IN",
        "hu", "hu-HU", "it", "nl", "no", "pt", "sv", "tr",
    ),
    PluralFamily.FRENCH: ("fr", "tl", "pt-BR"),
    PluralFamily.RUSSIAN: ("ru", "ru-RU"),
    PluralFamily.LITHUANIAN: ("lt",),
    PluralFamily.CZECH: ("cs", "cs-CZ", "sk"),
    PluralFamily.POLISH: ("pl",),
    PluralFamily.ICELANDIC: ("is",),
    PluralFamily.SLOVENIAN: ("sl-SL", "sl"),
})


def build_family_map(
    table: Mapping[PluralFamily, Iterable[str]],
) -> Mapping[str, PluralFamily]:
    """Flatten a family table into a read-only tag -> family mapping.

    Args:
        table: Family -> locale tags. Tags may use any case and either separator.

    Returns:
        Read-only mapping keyed by normalized tag

    Raises:
        ValueError: If a tag is listed under two families, or the table does
            not map the invariant tag (resolution would not be total)

    Example:
        >>> family_map = build_family_map({PluralFamily.GERMAN: ("", "en")})
        >>> family_map["en"]
        <PluralFamily.GERMAN: 'german'>
    """
    flattened: dict[str, PluralFamily] = {}
    for family, tags in table.items():
        for tag in tags:
            key = normalize_locale(tag)
            existing = flattened.get(key)
            if existing is not None and existing is not family:
                msg = f"Locale '{tag}' listed under both {existing.name} and {family.name}"
                raise ValueError(msg)
            flattened[key] = family

    if INVARIANT_LOCALE not in flattened:
        msg = "Family table must map the invariant locale ''"
        raise ValueError(msg)

    return MappingProxyType(flattened)


class PluralFamilyResolver:
    """Resolve locale tags to plural families.

    Holds a reference to an immutable family map; safe to share between
    threads without synchronization.

    Example:
        >>> resolver = PluralFamilyResolver()
        >>> resolver.resolve("ru-RU")
        <PluralFamily.RUSSIAN: 'russian'>
        >>> resolver.resolve("ru-UA")  # falls back to "ru"
        <PluralFamily.RUSSIAN: 'russian'>
        >>> resolver.resolve("xx-YY")  # unknown language
        <PluralFamily.GERMAN: 'german'>
    """

    __slots__ = ("_default", "_family_map")

    def __init__(self, family_map: Mapping[str, PluralFamily] | None = None) -> None:
        """Initialize resolver.

        Args:
            family_map: Tag -> family mapping from build_family_map().
                Defaults to DEFAULT_FAMILY_MAP.

        Raises:
            ValueError: If family_map does not map the invariant tag
        """
        if family_map is None:
            family_map = DEFAULT_FAMILY_MAP
        if INVARIANT_LOCALE not in family_map:
            msg = "Family map must map the invariant locale ''"
            raise ValueError(msg)
        self._family_map = family_map
        self._default = family_map[INVARIANT_LOCALE]

    @property
    def family_map(self) -> Mapping[str, PluralFamily]:
        """Tag -> family mapping used by this resolver (read-only)."""
        return self._family_map

    @property
    def default_family(self) -> PluralFamily:
        """Family returned for unrecognized locales."""
        return self._default

    def resolve(self, locale: str | None) -> PluralFamily:
        """Resolve a locale tag to its plural family.

        Never raises: unknown tags resolve to the invariant locale's family.

        Args:
            locale: Locale tag in any case, BCP-47 or POSIX form. None is the
                invariant locale.

        Returns:
            PluralFamily for the tag
        """
        if not locale:
            return self._default

        family = self._family_map.get(normalize_locale(locale))
        if family is not None:
            return family

        family = self._family_map.get(get_primary_language(locale))
        if family is not None:
            return family

        return self._default

    def locales_for(self, family: PluralFamily) -> tuple[str, ...]:
        """Return the normalized tags mapped to ``family``, sorted."""
        return tuple(sorted(tag for tag, fam in self._family_map.items() if fam is family))

    def __repr__(self) -> str:
        return f"PluralFamilyResolver(locales={len(self._family_map)})"


DEFAULT_FAMILY_MAP: Mapping[str, PluralFamily] = build_family_map(FAMILY_TABLE)
DEFAULT_RESOLVER: PluralFamilyResolver = PluralFamilyResolver(DEFAULT_FAMILY_MAP)
