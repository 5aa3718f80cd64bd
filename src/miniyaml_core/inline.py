"""Inline fragments: single-line ``{...}`` objects and ``[...]`` arrays.

Fields are split on commas outside quotes. Nested brackets are not
recognised inside a fragment; every field is a scalar.
"""

from __future__ import annotations

from .errors import MalformedInlineField, UnexpectedEndOfLine, UnterminatedQuote
from .scalars import DEFAULT_QUOTES, coerce_scalar, trimmed, unquote
from .values import Value, VArray, VObject

_CLOSERS = {"{": "}", "[": "]"}


# ---------------------------------------------------------------------------
# Quote-aware scanning
# ---------------------------------------------------------------------------

def split_fields(
    text: str,
    quotes: tuple[str, ...] = DEFAULT_QUOTES,
    line: int | None = None,
) -> list[str]:
    """Split *text* on commas that are not inside quotes.

    A quote opened by one quote character is closed only by the same
    character. Raises UnterminatedQuote if a quote is left open.
    """
    fields: list[str] = []
    current: list[str] = []
    open_quote: str | None = None

    for c in text:
        if open_quote is not None:
            if c == open_quote:
                open_quote = None
        elif c in quotes:
            open_quote = c
        elif c == ",":
            fields.append("".join(current))
            current = []
            continue
        current.append(c)

    if open_quote is not None:
        raise UnterminatedQuote(f"unterminated {open_quote} quote in {text!r}", line)

    fields.append("".join(current))
    return fields


def find_unquoted(text: str, target: str, quotes: tuple[str, ...] = DEFAULT_QUOTES) -> int:
    """Index of the first *target* outside quotes, or -1."""
    open_quote: str | None = None
    for i, c in enumerate(text):
        if open_quote is not None:
            if c == open_quote:
                open_quote = None
        elif c in quotes:
            open_quote = c
        elif c == target:
            return i
    return -1


def _body(fragment: str, opener: str, quotes: tuple[str, ...], line: int | None) -> str:
    """Validate the fragment's quotes and brackets and return its inner text."""
    fragment = trimmed(fragment)
    # Checked first so an unclosed quote is reported as such, not as a missing bracket.
    split_fields(fragment, quotes, line)
    if not fragment.startswith(opener):
        raise MalformedInlineField(f"expected {opener!r} at start of {fragment!r}", line)
    closer = _CLOSERS[opener]
    if len(fragment) < 2 or not fragment.endswith(closer):
        raise UnexpectedEndOfLine(f"missing closing {closer!r} in {fragment!r}", line)
    return fragment[1:-1]


# ---------------------------------------------------------------------------
# Fragment parsers
# ---------------------------------------------------------------------------

def parse_inline_array(
    fragment: str,
    quotes: tuple[str, ...] = DEFAULT_QUOTES,
    line: int | None = None,
) -> VArray:
    """``[a, 'b', 3]`` → VArray([VText("a"), VText("b"), VInteger(3)])."""
    body = _body(fragment, "[", quotes, line)
    result = VArray()
    if not trimmed(body):
        return result
    for item in split_fields(body, quotes, line):
        result.append(coerce_scalar(item, quotes))
    return result


def parse_inline_object(
    fragment: str,
    quotes: tuple[str, ...] = DEFAULT_QUOTES,
    line: int | None = None,
) -> VObject:
    """``{'name': 'Bob', 'age': 20}`` → VObject(name="Bob", age=20).

    Names are quote-stripped; values get full scalar coercion.
    """
    body = _body(fragment, "{", quotes, line)
    result = VObject()
    if not trimmed(body):
        return result
    for item in split_fields(body, quotes, line):
        item = trimmed(item)
        colon = find_unquoted(item, ":", quotes)
        if colon == -1:
            raise MalformedInlineField(f"missing ':' in inline field {item!r}", line)
        name = unquote(trimmed(item[:colon]), quotes)
        result[name] = coerce_scalar(item[colon + 1:], quotes)
    return result


def parse_fragment(
    fragment: str,
    quotes: tuple[str, ...] = DEFAULT_QUOTES,
    line: int | None = None,
) -> Value:
    """Parse either kind of fragment, chosen by its first character."""
    fragment = trimmed(fragment)
    if fragment.startswith("{"):
        return parse_inline_object(fragment, quotes, line)
    if fragment.startswith("["):
        return parse_inline_array(fragment, quotes, line)
    raise MalformedInlineField(f"not an inline fragment: {fragment!r}", line)
