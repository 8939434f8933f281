"""Phrase runtime package.

Provides phrase storage, positional interpolation, and the Translator API.
Depends on the plural package for variant selection.

Python 3.13+.
"""

from .interpolation import interpolate, try_interpolate
from .phrase_bank import PhraseBank, PhraseEntries, validate_phrases
from .rwlock import RWLock
from .translator import Translator, is_integral

__all__ = [
    "PhraseBank",
    "PhraseEntries",
    "RWLock",
    "Translator",
    "interpolate",
    "is_integral",
    "try_interpolate",
    "validate_phrases",
]
