"""
Test cases for exceptions and error context.

Tests focus on message formatting, spec context wrapping and suggestions.
"""

import unittest

from jsonpoke.core.error_handling import (
    ErrorContextBuilder,
    ErrorSuggestionEngine,
    json_kind,
    syntax_error,
    type_mismatch,
    wrap_with_spec,
)
from jsonpoke.core.exceptions import (
    DocumentError,
    ErrorContext,
    IndexOutOfRangeError,
    JsonPokeError,
    PreconditionFailedError,
    SpecSyntaxError,
    TypeMismatchError,
    UnsupportedOperationError,
)


class TestJsonPokeError(unittest.TestCase):
    """Test the base exception class."""

    def test_basic_error_creation(self) -> None:
        """Test an error with a message only."""
        error = JsonPokeError("Something failed")

        self.assertEqual(error.message, "Something failed")
        self.assertIsNone(error.spec)
        self.assertIsNone(error.offset)
        self.assertEqual(error.suggestions, [])
        self.assertEqual(str(error), "Something failed")

    def test_error_with_spec(self) -> None:
        """Test that the spec position is part of the message."""
        error = JsonPokeError("Bad", spec=".a.b", offset=2)
        self.assertEqual(str(error), "Bad (processing spec '.a.b' at offset 2)")

    def test_error_with_context_and_suggestions(self) -> None:
        """Test the context and suggestion blocks."""
        context = ErrorContext(text=".a", offset=0, line_text=".a", column_indicator="^")
        error = JsonPokeError("Bad", spec=".a", offset=0, context=context,
                              suggestions=["Try this"])

        text = str(error)
        self.assertIn("Context:\n  .a\n  ^", text)
        self.assertIn("Suggestions:", text)
        self.assertIn("Try this", text)

    def test_kinds_extend_builtins(self) -> None:
        """Test that each kind can be caught as the closest builtin."""
        self.assertIsInstance(SpecSyntaxError("x"), ValueError)
        self.assertIsInstance(TypeMismatchError("x"), TypeError)
        self.assertIsInstance(IndexOutOfRangeError("x"), IndexError)
        self.assertIsInstance(PreconditionFailedError("x"), ValueError)
        self.assertIsInstance(UnsupportedOperationError("x"), ValueError)
        self.assertIsInstance(DocumentError("x"), ValueError)

    def test_with_context_keeps_class(self) -> None:
        """Test that adding spec context keeps kind, message and remainder."""
        error = SpecSyntaxError("Invalid", remainder="!x", suggestions=["s"])
        wrapped = error.with_context("..!x", 2)

        self.assertIsInstance(wrapped, SpecSyntaxError)
        self.assertIsNot(wrapped, error)
        self.assertEqual(wrapped.message, "Invalid")
        self.assertEqual(wrapped.remainder, "!x")
        self.assertEqual(wrapped.suggestions, ["s"])
        self.assertEqual((wrapped.spec, wrapped.offset), ("..!x", 2))
        self.assertIsNone(error.spec)

    def test_document_error_position(self) -> None:
        """Test the line and column of document errors."""
        error = DocumentError("Expecting value", line=2, column=5)
        self.assertEqual(str(error), "Expecting value at line 2, column 5")


class TestErrorContextBuilder(unittest.TestCase):
    """Test building the caret context under messages."""

    def test_short_spec(self) -> None:
        """Test that short specs are shown whole."""
        context = ErrorContextBuilder.build_context(".a.b[3]", 4)

        self.assertEqual(context.line_text, ".a.b[3]")
        self.assertEqual(context.column_indicator, "    ^")
        self.assertEqual(context.offset, 4)

    def test_long_spec_is_windowed(self) -> None:
        """Test that long specs are cut around the offset."""
        spec = "".join(f".m{i:02d}" for i in range(25))  # 100 characters
        context = ErrorContextBuilder.build_context(spec, 80)

        self.assertTrue(context.line_text.startswith("..."))
        self.assertEqual(context.column_indicator, " " * 43 + "^")
        self.assertEqual(context.line_text[43], spec[80])

    def test_offset_at_end(self) -> None:
        """Test an offset just past the last character."""
        context = ErrorContextBuilder.build_context(".a", 2)
        self.assertEqual(context.column_indicator, "  ^")


class TestErrorHelpers(unittest.TestCase):
    """Test error factories and suggestions."""

    def test_json_kind(self) -> None:
        """Test naming JSON kinds."""
        cases = [
            (None, "null"), (True, "boolean"), (1, "number"), (1.5, "number"),
            ("s", "string"), ([], "array"), ({}, "object"),
        ]
        for value, kind in cases:
            with self.subTest(value=value):
                self.assertEqual(json_kind(value), kind)

    def test_syntax_error(self) -> None:
        """Test the syntax error factory."""
        error = syntax_error("?x")
        self.assertEqual(error.remainder, "?x")
        self.assertIn("Each step must start with '.' or '['", error.suggestions)

    def test_type_mismatch_on_null_suggests_missing_member(self) -> None:
        """Test the hint for a missing intermediate member."""
        self.assertTrue(type_mismatch("array", None).suggestions)
        self.assertEqual(type_mismatch("array", 3).suggestions, [])

    def test_suggestions_for_brackets(self) -> None:
        """Test hints for malformed array steps."""
        suggestions = ErrorSuggestionEngine.suggest_for_syntax("[x]")
        self.assertIn("Array steps look like '[]', '[3]' or '[-1]'", suggestions)

    def test_wrap_only_once(self) -> None:
        """Test that an error tied to a spec is not wrapped again."""
        wrapped = wrap_with_spec(TypeMismatchError("x"), ".a", 0)
        self.assertIs(wrap_with_spec(wrapped, ".b.c", 2), wrapped)
        self.assertEqual(wrapped.spec, ".a")
        self.assertIsNotNone(wrapped.context)


if __name__ == "__main__":
    unittest.main()
