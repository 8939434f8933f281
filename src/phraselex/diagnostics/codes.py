"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by phraselex errors.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Phrase input errors (raised by extend/replace)
        2000-2999: Interpolation errors (always recovered by translate)
    """

    # Phrase input errors (1000-1999)
    PHRASES_MISSING = 1001
    PHRASE_EMPTY = 1002
    PHRASE_NOT_SEQUENCE = 1003
    PHRASE_VARIANT_INVALID = 1004
    PHRASE_KEY_INVALID = 1005
    PHRASE_ENTRY_INVALID = 1006

    # Interpolation errors (2000-2999)
    INTERPOLATION_INDEX_OUT_OF_RANGE = 2001
    INTERPOLATION_FIELD_INVALID = 2002
    INTERPOLATION_SYNTAX_INVALID = 2003
    INTERPOLATION_FORMAT_FAILED = 2004


def _escape_control(text: str) -> str:
    """Render control characters visibly so diagnostics stay on one line."""
    return "".join(
        char if char.isprintable() else char.encode("unicode_escape").decode("ascii")
        for char in text
    )


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough context to tell
    which phrase key or template caused an error.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        key: Phrase key involved (None when not tied to a key)
        template: Template text involved (interpolation errors only)
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    key: str | None = None
    template: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[PHRASE_EMPTY]: Phrase 'cart.items' has no variants
              = key: cart.items
              = help: Provide at least one template string

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {_escape_control(self.message)}"]
        if self.key is not None:
            lines.append(f"  = key: {_escape_control(self.key)}")
        if self.template is not None:
            lines.append(f"  = template: {_escape_control(self.template)}")
        if self.hint is not None:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
