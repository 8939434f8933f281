"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def phrases_missing() -> Diagnostic:
        """Phrase collection passed as None.

        Returns:
            Diagnostic for PHRASES_MISSING
        """
        return Diagnostic(
            code=DiagnosticCode.PHRASES_MISSING,
            message="Phrase collection must not be None",
            hint="Pass a mapping of key to templates, or an iterable of (key, templates) pairs",
        )

    @staticmethod
    def phrase_empty(key: str) -> Diagnostic:
        """Phrase has None or zero variants.

        Args:
            key: The phrase key whose variants are missing

        Returns:
            Diagnostic for PHRASE_EMPTY
        """
        msg = f"Phrase '{key}' has no variants"
        return Diagnostic(
            code=DiagnosticCode.PHRASE_EMPTY,
            message=msg,
            hint="Provide at least one template string",
            key=key,
        )

    @staticmethod
    def phrase_not_sequence(key: str, received: object) -> Diagnostic:
        """Phrase variants are not a sequence of templates.

        Args:
            key: The phrase key
            received: The value given in place of the variants

        Returns:
            Diagnostic for PHRASE_NOT_SEQUENCE
        """
        msg = f"Phrase '{key}' variants must be a sequence, got {type(received).__name__}"
        if isinstance(received, str):
            hint = "Wrap a single template in a list: ['{0} item']"
        else:
            hint = "Use a list or tuple of template strings"
        return Diagnostic(
            code=DiagnosticCode.PHRASE_NOT_SEQUENCE,
            message=msg,
            hint=hint,
            key=key,
        )

    @staticmethod
    def phrase_variant_invalid(key: str, index: int, received: object) -> Diagnostic:
        """A single variant is not a string.

        Args:
            key: The phrase key
            index: Position of the offending variant
            received: The offending value

        Returns:
            Diagnostic for PHRASE_VARIANT_INVALID
        """
        msg = (
            f"Phrase '{key}' variant {index} must be str, "
            f"got {type(received).__name__}"
        )
        return Diagnostic(
            code=DiagnosticCode.PHRASE_VARIANT_INVALID,
            message=msg,
            hint="Every variant must be a template string; None is not allowed",
            key=key,
        )

    @staticmethod
    def phrase_key_invalid(received: object) -> Diagnostic:
        """Phrase key is not a string.

        Args:
            received: The offending key

        Returns:
            Diagnostic for PHRASE_KEY_INVALID
        """
        msg = f"Phrase key must be str, got {type(received).__name__}"
        return Diagnostic(
            code=DiagnosticCode.PHRASE_KEY_INVALID,
            message=msg,
            hint="Phrase keys are matched by exact string equality",
        )

    @staticmethod
    def phrase_entry_invalid(received: object) -> Diagnostic:
        """Phrase input is not a mapping or an iterable of (key, templates) pairs.

        Args:
            received: The offending batch or pair

        Returns:
            Diagnostic for PHRASE_ENTRY_INVALID
        """
        msg = (
            "Phrase entries must be a mapping or (key, templates) pairs, "
            f"got {type(received).__name__}"
        )
        return Diagnostic(
            code=DiagnosticCode.PHRASE_ENTRY_INVALID,
            message=msg,
            hint='Pass {"key": ["template", ...]} or [("key", ["template", ...])]',
        )

    @staticmethod
    def interpolation_index_out_of_range(template: str, index: int, arg_count: int) -> Diagnostic:
        """Placeholder refers to an argument that was not supplied.

        Args:
            template: The template being interpolated
            index: The placeholder index
            arg_count: Number of arguments supplied

        Returns:
            Diagnostic for INTERPOLATION_INDEX_OUT_OF_RANGE
        """
        msg = f"Placeholder {{{index}}} has no argument ({arg_count} supplied)"
        return Diagnostic(
            code=DiagnosticCode.INTERPOLATION_INDEX_OUT_OF_RANGE,
            message=msg,
            hint="Pass one positional argument per placeholder index",
            template=template,
        )

    @staticmethod
    def interpolation_field_invalid(template: str, field: str) -> Diagnostic:
        """Placeholder is not a plain positional index.

        Args:
            template: The template being interpolated
            field: The offending field name

        Returns:
            Diagnostic for INTERPOLATION_FIELD_INVALID
        """
        msg = f"Placeholder '{{{field}}}' is not a positional index"
        return Diagnostic(
            code=DiagnosticCode.INTERPOLATION_FIELD_INVALID,
            message=msg,
            hint="Use numbered placeholders such as {0} and {1}",
            template=template,
        )

    @staticmethod
    def interpolation_syntax_invalid(template: str, detail: str) -> Diagnostic:
        """Template braces are malformed.

        Args:
            template: The template being interpolated
            detail: Parser error text

        Returns:
            Diagnostic for INTERPOLATION_SYNTAX_INVALID
        """
        msg = f"Malformed template: {detail}"
        return Diagnostic(
            code=DiagnosticCode.INTERPOLATION_SYNTAX_INVALID,
            message=msg,
            hint="Escape literal braces as {{ and }}",
            template=template,
        )

    @staticmethod
    def interpolation_format_failed(template: str, detail: str) -> Diagnostic:
        """Argument rejected its format spec or could not be rendered.

        Args:
            template: The template being interpolated
            detail: Underlying error text

        Returns:
            Diagnostic for INTERPOLATION_FORMAT_FAILED
        """
        msg = f"Formatting argument failed: {detail}"
        return Diagnostic(
            code=DiagnosticCode.INTERPOLATION_FORMAT_FAILED,
            message=msg,
            hint="Check the format spec after ':' matches the argument type",
            template=template,
        )
