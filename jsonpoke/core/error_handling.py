"""
Common error handling utilities for spec processing.

This module builds the context shown under an error message (the spec text
with a caret under the failing step) and the short suggestions attached to
the more common mistakes.
"""

from typing import Any

from .exceptions import (
    ErrorContext,
    JsonPokeError,
    SpecSyntaxError,
    TypeMismatchError,
)


class ErrorContextBuilder:
    """Builds error context information from a spec and an offset."""

    @staticmethod
    def build_context(spec: str, offset: int, max_width: int = 60) -> ErrorContext:
        """Build error context for the step of ``spec`` starting at ``offset``."""
        offset = max(0, min(offset, len(spec)))

        if len(spec) <= max_width:
            line_text = spec
            indicator_pos = offset
        else:
            # Window the spec around the offset so long paths stay readable
            start = max(0, offset - max_width // 2)
            end = min(len(spec), start + max_width)
            start = max(0, end - max_width)
            line_text = spec[start:end]
            indicator_pos = offset - start
            if start > 0:
                line_text = "..." + line_text
                indicator_pos += 3
            if end < len(spec):
                line_text += "..."

        return ErrorContext(
            text=spec,
            offset=offset,
            line_text=line_text,
            column_indicator=" " * indicator_pos + "^",
        )


class ErrorSuggestionEngine:
    """Generates suggestions for common spec mistakes."""

    @staticmethod
    def suggest_for_syntax(remainder: str) -> list[str]:
        suggestions = []
        if remainder.startswith("."):
            suggestions.append("Member names may only contain letters, digits and '_'")
        elif remainder.startswith("["):
            suggestions.append("Array steps look like '[]', '[3]' or '[-1]'")
            if remainder.startswith("[]") and len(remainder) > 2:
                suggestions.append("'[]' (append) is only allowed as the last step")
        else:
            suggestions.append("Each step must start with '.' or '['")
        return suggestions

    @staticmethod
    def suggest_for_type(expected: str, actual: str) -> list[str]:
        if actual == "null":
            return [
                f"An intermediate member may be missing; create it as an {expected} first"
            ]
        return []


def json_kind(value: Any) -> str:
    """Name the JSON kind of a Python value, as used in error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def syntax_error(remainder: str) -> SpecSyntaxError:
    """Create the error for a spec remainder that matches no step."""
    return SpecSyntaxError(
        f"Invalid spec '{remainder}'",
        remainder=remainder,
        suggestions=ErrorSuggestionEngine.suggest_for_syntax(remainder),
    )


def type_mismatch(expected: str, value: Any) -> TypeMismatchError:
    """Create the error for a step that found the wrong kind of JSON value."""
    actual = json_kind(value)
    return TypeMismatchError(
        f"Expected {expected}, got {actual}",
        suggestions=ErrorSuggestionEngine.suggest_for_type(expected, actual),
    )


def wrap_with_spec(error: JsonPokeError, spec: str, offset: int) -> JsonPokeError:
    """Tie ``error`` to the spec step at ``offset``, unless it already is."""
    if error.has_spec_context:
        return error
    return error.with_context(
        spec, offset, ErrorContextBuilder.build_context(spec, offset)
    )
