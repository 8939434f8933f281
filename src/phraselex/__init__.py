"""phraselex - phrase translation with per-locale pluralization.

Stores phrases as ordered template variants (singular, plural, dual, ...),
picks the variant a count calls for under the locale's plural family, and
interpolates ``{N}`` positional arguments.

Public API:
    Translator - Single-locale phrase translation
    PhraseBank - Thread-safe phrase storage
    PluralFamily - Closed set of plural families
    PluralFamilyResolver - Locale tag -> plural family
    select_plural_index - Variant index for a count under a family

Exceptions:
    PhraseError - Base exception class
    InvalidPhraseError - Phrase entry rejected by extend/replace
    MissingPhrasesError - Phrase collection was None

Submodules:
    phraselex.plural - Family table, resolver, and index rules
    phraselex.runtime - Phrase bank, interpolation, and translator
    phraselex.diagnostics - Error codes and structured diagnostics
    phraselex.locale_utils - Locale normalization and system locale detection
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import InvalidPhraseError, MissingPhrasesError, PhraseError
from .enums import PluralFamily
from .plural import PluralFamilyResolver, select_plural_index
from .runtime import PhraseBank, Translator

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("phraselex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "InvalidPhraseError",
    "MissingPhrasesError",
    "PhraseBank",
    "PhraseError",
    "PluralFamily",
    "PluralFamilyResolver",
    "Translator",
    "__version__",
    "select_plural_index",
]
