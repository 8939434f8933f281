"""Diagnostic system for phraselex errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    InterpolationError,
    InvalidPhraseError,
    MissingPhrasesError,
    PhraseError,
)
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "InterpolationError",
    "InvalidPhraseError",
    "MissingPhrasesError",
    "PhraseError",
]
