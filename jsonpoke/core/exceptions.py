"""
Exception classes for jsonpoke.

Every failure raised while resolving a path spec or mutating a document is a
JsonPokeError. The concrete classes mirror the failure kinds callers care
about and also derive from the closest builtin exception, so code that only
knows about IndexError or ValueError keeps working.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class ErrorContext:
    """Where in a spec an error was detected."""

    text: str
    offset: int
    line_text: str
    column_indicator: str


class JsonPokeError(Exception):
    """Base exception for all jsonpoke errors."""

    def __init__(
        self,
        message: str,
        spec: Optional[str] = None,
        offset: Optional[int] = None,
        remainder: Optional[str] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.message = message
        self.spec = spec
        self.offset = offset
        self.remainder = remainder
        self.context = context
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _headline(self) -> str:
        return self.message

    def _format_message(self) -> str:
        msg = self._headline()

        if self.spec is not None:
            msg = f"{msg} (processing spec '{self.spec}' at offset {self.offset})"

        if self.context:
            msg += f"\n\nContext:\n  {self.context.line_text}"
            msg += f"\n  {self.context.column_indicator}"

        if self.suggestions:
            msg += "\n\nSuggestions:"
            for suggestion in self.suggestions:
                msg += f"\n  • {suggestion}"

        return msg

    @property
    def has_spec_context(self) -> bool:
        """Whether this error already names the spec it was raised for."""
        return self.spec is not None

    def with_context(
        self, spec: str, offset: int, context: Optional[ErrorContext] = None
    ) -> "JsonPokeError":
        """Return a copy of this error (same class) tied to a spec position."""
        return type(self)(
            self.message,
            spec=spec,
            offset=offset,
            remainder=self.remainder,
            context=context,
            suggestions=list(self.suggestions),
        )


class SpecSyntaxError(JsonPokeError, ValueError):
    """The spec text does not match the path grammar at some offset."""


class TypeMismatchError(JsonPokeError, TypeError):
    """A step expected an object or an array but found another JSON kind."""


class IndexOutOfRangeError(JsonPokeError, IndexError):
    """An array index is outside the range the current step allows."""


class PreconditionFailedError(JsonPokeError, ValueError):
    """An EXISTING / NON_EXISTING mode check failed."""


class UnsupportedOperationError(JsonPokeError, ValueError):
    """The operation cannot be applied to the resolved mutation site."""


class DocumentError(JsonPokeError, ValueError):
    """JSON text could not be decoded into a document."""

    def __init__(self, message: str, line: int = 1, column: int = 1, **kwargs: Any):
        self.line = line
        self.column = column
        super().__init__(message, **kwargs)

    def _headline(self) -> str:
        return f"{self.message} at line {self.line}, column {self.column}"
