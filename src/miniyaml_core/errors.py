"""Exception hierarchy for miniyaml_core."""

from __future__ import annotations


class MiniYamlError(Exception):
    """Base class for every error raised by this package."""


class ParseError(MiniYamlError):
    """A document could not be parsed.

    ``line`` is the 1-based number of the offending line, or ``None`` when
    the error is not tied to a position (e.g. a standalone fragment).
    """

    def __init__(self, message: str, line: int | None = None) -> None:
        self.message = message
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class UnexpectedEndOfLine(ParseError):
    """The line ended where a marker character or value was expected."""


class UnterminatedQuote(ParseError):
    """A quote opened inside an inline fragment is never closed."""


class MalformedInlineField(ParseError):
    """An inline object field has no ``name: value`` separator."""


class InconsistentIndentation(ParseError):
    """A nested block is not indented deeper than its parent."""


class UnexpectedLine(ParseError):
    """A line inside a block does not carry that block's marker."""


class NestingTooDeep(ParseError):
    """The document nests deeper than ``ParserOptions.max_depth``."""


class TrailingContent(ParseError):
    """Lines remain after the root value was parsed."""


class EmitError(MiniYamlError):
    """A value cannot be written in the document grammar."""
