"""Thread-safe phrase storage.

Maps phrase keys to an ordered tuple of template variants (variant 0 is the
singular/default form). Variants are stored as tuples, so a reader can never
observe a partially written entry.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import TypeAlias

from phraselex.constants import LOG_TRUNCATE
from phraselex.diagnostics import ErrorTemplate, InvalidPhraseError, MissingPhrasesError
from phraselex.runtime.rwlock import RWLock

__all__ = ["PhraseBank", "PhraseEntries", "validate_phrases"]

logger = logging.getLogger(__name__)

PhraseEntries: TypeAlias = Mapping[str, Iterable[str]] | Iterable[tuple[str, Iterable[str]]]
"""Phrase input: a mapping of key to templates, or (key, templates) pairs."""


def validate_phrases(entries: PhraseEntries | None) -> list[tuple[str, tuple[str, ...]]]:
    """Validate phrase input and freeze each entry's variants.

    The whole batch is checked before anything is returned, so callers can
    apply it all-or-nothing.

    Args:
        entries: Mapping of key -> templates, or iterable of (key, templates)

    Returns:
        List of (key, variants) with variants frozen to tuples, in input order

    Raises:
        MissingPhrasesError: If entries is None
        InvalidPhraseError: If entries is not a mapping or an iterable of
            (key, templates) pairs, a key is not a string, or its variants are
            None, empty, a bare string, not iterable, or contain a non-string

    Example:
        >>> validate_phrases({"cart": ["{0} item", "{0} items"]})
        [('cart', ('{0} item', '{0} items'))]
    """
    if entries is None:
        raise MissingPhrasesError(ErrorTemplate.phrases_missing())

    if isinstance(entries, Mapping):
        pairs: Iterable[object] = entries.items()
    elif isinstance(entries, (str, bytes)) or not isinstance(entries, Iterable):
        raise InvalidPhraseError(ErrorTemplate.phrase_entry_invalid(entries))
    else:
        pairs = entries

    validated: list[tuple[str, tuple[str, ...]]] = []
    for pair in pairs:
        if isinstance(pair, (str, bytes)) or not isinstance(pair, Iterable):
            raise InvalidPhraseError(ErrorTemplate.phrase_entry_invalid(pair))
        item = tuple(pair)
        if len(item) != 2:
            raise InvalidPhraseError(ErrorTemplate.phrase_entry_invalid(pair))
        key, variants = item
        if not isinstance(key, str):
            raise InvalidPhraseError(ErrorTemplate.phrase_key_invalid(key))
        if variants is None:
            raise InvalidPhraseError(ErrorTemplate.phrase_empty(key))
        if isinstance(variants, (str, bytes)) or not isinstance(variants, Iterable):
            raise InvalidPhraseError(ErrorTemplate.phrase_not_sequence(key, variants))

        frozen = tuple(variants)
        if not frozen:
            raise InvalidPhraseError(ErrorTemplate.phrase_empty(key))
        for index, variant in enumerate(frozen):
            if not isinstance(variant, str):
                raise InvalidPhraseError(
                    ErrorTemplate.phrase_variant_invalid(key, index, variant)
                )
        validated.append((key, frozen))
    return validated


class PhraseBank:
    """Key -> template variants store safe for concurrent use.

    Lookups share a readers-writer lock; mutations hold it exclusively.
    ``extend`` and ``replace`` validate their whole batch before touching
    the store, so a rejected batch leaves the bank unchanged.

    Example:
        >>> bank = PhraseBank()
        >>> bank.extend({"cart.items": ["{0} item", "{0} items"]})
        >>> bank.get("cart.items")
        ('{0} item', '{0} items')
        >>> bank.unset("cart.items", "never.set")
        1
        >>> "cart.items" in bank
        False
    """

    __slots__ = ("_lock", "_phrases")

    def __init__(self, entries: PhraseEntries | None = None) -> None:
        """Initialize bank, optionally seeded with ``entries``.

        Raises:
            InvalidPhraseError: If a seed entry is invalid
        """
        self._phrases: dict[str, tuple[str, ...]] = {}
        self._lock = RWLock()
        if entries is not None:
            self.extend(entries)

    def extend(self, entries: PhraseEntries | None) -> None:
        """Insert or overwrite phrases. Last writer wins per key.

        Raises:
            MissingPhrasesError: If entries is None
            InvalidPhraseError: If any entry is invalid (nothing is applied)
        """
        validated = validate_phrases(entries)
        with self._lock.write():
            self._phrases.update(validated)
        logger.debug("Extended phrase bank with %d phrase(s)", len(validated))

    def unset(self, *keys: str) -> int:
        """Remove ``keys``; absent keys are ignored.

        Returns:
            Number of keys actually removed
        """
        removed = 0
        with self._lock.write():
            for key in keys:
                if self._phrases.pop(key, None) is not None:
                    removed += 1
        logger.debug("Unset %d of %d phrase key(s)", removed, len(keys))
        return removed

    def clear(self) -> None:
        """Remove every phrase."""
        with self._lock.write():
            self._phrases.clear()
        logger.debug("Cleared phrase bank")

    def replace(self, entries: PhraseEntries | None) -> None:
        """Swap the bank contents for ``entries`` in one exclusive section.

        Readers observe either the old bank or the new one.

        Raises:
            MissingPhrasesError: If entries is None
            InvalidPhraseError: If any entry is invalid (bank left unchanged)
        """
        validated = validate_phrases(entries)
        with self._lock.write():
            self._phrases = dict(validated)
        logger.debug("Replaced phrase bank with %d phrase(s)", len(validated))

    def get(self, key: str) -> tuple[str, ...] | None:
        """Return the variants for ``key``, or None when absent."""
        with self._lock.read():
            variants = self._phrases.get(key)
        if variants is None and logger.isEnabledFor(logging.DEBUG):
            logger.debug("Phrase not found: %s", str(key)[:LOG_TRUNCATE])
        return variants

    def snapshot(self) -> Mapping[str, tuple[str, ...]]:
        """Return a read-only copy of the current bank."""
        with self._lock.read():
            return MappingProxyType(dict(self._phrases))

    def keys(self) -> tuple[str, ...]:
        """Return the stored keys in insertion order."""
        with self._lock.read():
            return tuple(self._phrases)

    def __contains__(self, key: object) -> bool:
        with self._lock.read():
            return key in self._phrases

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._phrases)

    def __repr__(self) -> str:
        return f"PhraseBank(phrases={len(self)})"
