"""phraselex exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "InterpolationError",
    "InvalidPhraseError",
    "MissingPhrasesError",
    "PhraseError",
]


class PhraseError(Exception):
    """Base exception for all phraselex errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize PhraseError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidPhraseError(PhraseError, ValueError):
    """A phrase entry cannot be stored.

    Raised by extend() and replace() when a key's variants are None, empty,
    not a sequence, or hold a non-string template. The whole batch is
    rejected; nothing from it is applied.
    """


class MissingPhrasesError(PhraseError, TypeError):
    """The phrase collection itself was None."""


class InterpolationError(PhraseError):
    """Positional interpolation failed.

    Examples:
    - Placeholder index with no matching argument
    - Named or attribute placeholder ({name}, {0.attr})
    - Unbalanced braces

    Never escapes Translator.translate(); the template is returned as-is.
    """
