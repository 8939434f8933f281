"""Positional interpolation of phrase templates.

Templates use numbered placeholders: ``{0}``, ``{1}``, ... Each may carry a
conversion and a format spec (``{0!r}``, ``{1:>8}``); ``{{`` and ``}}`` are
literal braces. Only plain indices are accepted as field names: ``{name}``,
``{0.attr}``, ``{0[key]}`` and auto-numbered ``{}`` are rejected, so a
template can never reach into argument attributes.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import string
from typing import TYPE_CHECKING, Any

from phraselex.constants import LOG_TRUNCATE
from phraselex.diagnostics import ErrorTemplate, InterpolationError

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence

__all__ = ["interpolate", "try_interpolate"]

logger = logging.getLogger(__name__)

_CONVERSIONS = frozenset({None, "r", "s", "a"})


class _PositionalFormatter(string.Formatter):
    """str.format semantics restricted to numbered positional fields."""

    def __init__(self, template: str) -> None:
        self._template = template

    def parse(self, format_string: str) -> Iterator[tuple[str, str | None, str | None, str | None]]:
        for literal, field_name, format_spec, conversion in super().parse(format_string):
            if field_name is not None and not (field_name.isascii() and field_name.isdigit()):
                raise InterpolationError(
                    ErrorTemplate.interpolation_field_invalid(self._template, field_name)
                )
            yield literal, field_name, format_spec, conversion

    def get_field(
        self, field_name: str, args: Sequence[Any], kwargs: Mapping[str, Any]
    ) -> tuple[Any, int]:
        index = int(field_name)
        if index >= len(args):
            raise InterpolationError(
                ErrorTemplate.interpolation_index_out_of_range(self._template, index, len(args))
            )
        return args[index], index

    def format_field(self, value: Any, format_spec: str) -> Any:
        try:
            return format(value, format_spec)
        except Exception as e:  # noqa: BLE001 - arbitrary __format__ must not escape
            raise InterpolationError(
                ErrorTemplate.interpolation_format_failed(self._template, str(e))
            ) from e

    def convert_field(self, value: Any, conversion: str | None) -> Any:
        if conversion not in _CONVERSIONS:
            detail = f"Unknown conversion specifier {conversion}"
            raise InterpolationError(
                ErrorTemplate.interpolation_syntax_invalid(self._template, detail)
            )
        try:
            return super().convert_field(value, conversion)
        except Exception as e:  # noqa: BLE001 - arbitrary __repr__/__str__ must not escape
            raise InterpolationError(
                ErrorTemplate.interpolation_format_failed(self._template, str(e))
            ) from e


def interpolate(template: str, args: Sequence[Any]) -> str:
    """Substitute positional arguments into ``template``.

    Args:
        template: Template with ``{N}`` placeholders
        args: Positional arguments; placeholder N takes ``args[N]``

    Returns:
        Interpolated string

    Raises:
        InterpolationError: If a placeholder has no argument, is not a plain
            index, the braces are malformed, or an argument fails to
            convert or format

    Example:
        >>> interpolate("{0}, your name is {0}!", ["Ada"])
        'Ada, your name is Ada!'
        >>> interpolate("{1} of {0}", [10, 3])
        '3 of 10'
    """
    formatter = _PositionalFormatter(template)
    try:
        return formatter.vformat(template, tuple(args), {})
    except InterpolationError:
        raise
    except ValueError as e:
        # Unbalanced braces, unknown conversion, or runaway nesting
        raise InterpolationError(
            ErrorTemplate.interpolation_syntax_invalid(template, str(e))
        ) from e


def try_interpolate(template: str, args: Sequence[Any]) -> str:
    """Interpolate, returning ``template`` unchanged when interpolation fails.

    Example:
        >>> try_interpolate("{0} {1}", [])
        '{0} {1}'
    """
    try:
        return interpolate(template, args)
    except InterpolationError as e:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Interpolation failed for template %r: %s",
                template[:LOG_TRUNCATE],
                e.diagnostic.message if e.diagnostic is not None else e,
            )
        return template
