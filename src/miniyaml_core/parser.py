"""Block parser: indentation-driven recursive descent over a BlockCursor.

Every line is classified by the character sitting at its indent column
(``indent * 2``):

- ``-``            → list block, one item per line at this indent
- ``{`` / ``[``    → standalone inline fragment
- ``name:``        → object block, one property per line at this indent
- anything else    → scalar

A block lasts while the cursor's indent equals the indent it started at.
"""

from __future__ import annotations

import logging
from typing import IO, Any, Union

from .cursor import BlockCursor
from .errors import (
    InconsistentIndentation,
    NestingTooDeep,
    TrailingContent,
    UnexpectedEndOfLine,
    UnexpectedLine,
)
from .inline import parse_fragment, parse_inline_array, parse_inline_object
from .options import DEFAULT_OPTIONS, ParserOptions
from .scalars import coerce_scalar, is_letter_or_digit
from .values import Null, Value, VArray, VObject, to_python

logger = logging.getLogger(__name__)


def read_property_name(line: str, start: int) -> int:
    """Index of the ``:`` ending an identifier run that begins at *start*.

    Returns -1 when *start* does not begin ``name:``.
    """
    i = start
    while i < len(line) and is_letter_or_digit(line[i]):
        i += 1
    if i == start or i == len(line) or line[i] != ":":
        return -1
    return i


class Parser:
    """Parses one document per :meth:`parse` call."""

    def __init__(self, options: ParserOptions | None = None) -> None:
        self.options = options or DEFAULT_OPTIONS
        self.cursor = BlockCursor(skip_blank_lines=self.options.skip_blank_lines)

    def parse(self, text: str) -> Value:
        if not self.cursor.start(text):
            return Null
        try:
            value = self._parse_value(1)
        except RecursionError:
            # max_depth set beyond what the interpreter stack can hold
            raise NestingTooDeep(
                "nesting exceeds the interpreter recursion limit", self.cursor.line_no
            ) from None
        if not self.cursor.done:
            self._trailing_content()
        return value

    # -- Dispatch -------------------------------------------------------

    def _parse_value(self, depth: int) -> Value:
        cur = self.cursor
        if depth > self.options.max_depth:
            raise NestingTooDeep(
                f"nesting exceeds max_depth={self.options.max_depth}", cur.line_no
            )

        col = cur.column
        marker = cur.char_at(col)
        if marker is None:
            raise UnexpectedEndOfLine(f"expected a value at column {col + 1}", cur.line_no)

        if marker == "-":
            return self._parse_list(depth)
        if marker in "{[":
            value = parse_fragment(cur.line[col:], self.options.quote_chars, cur.line_no)
            cur.advance()
            return value
        if read_property_name(cur.line, col) != -1:
            return self._parse_object(depth)
        return self._parse_scalar()

    # -- Blocks ---------------------------------------------------------

    def _parse_list(self, depth: int) -> VArray:
        cur = self.cursor
        block_indent = cur.indent
        logger.debug("list block at line %d (indent %d)", cur.line_no, block_indent)
        result = VArray()

        while cur.indent == block_indent:
            marker = cur.char_at(cur.column)
            if marker is None:
                raise UnexpectedEndOfLine("expected '-' list item", cur.line_no)
            if marker != "-":
                raise UnexpectedLine(
                    f"expected '-' list item, got {cur.line.strip()!r}", cur.line_no
                )
            cur.step_into()
            result.append(self._parse_value(depth + 1))

        return result

    def _parse_object(self, depth: int) -> VObject:
        cur = self.cursor
        quotes = self.options.quote_chars
        block_indent = cur.indent
        logger.debug("object block at line %d (indent %d)", cur.line_no, block_indent)
        result = VObject()

        while cur.indent == block_indent:
            line = cur.line
            col = cur.column
            colon = read_property_name(line, col)
            if colon == -1:
                if cur.char_at(col) is None:
                    raise UnexpectedEndOfLine("expected 'name:' property", cur.line_no)
                raise UnexpectedLine(
                    f"expected 'name:' property, got {line.strip()!r}", cur.line_no
                )

            key = line[col:colon]
            if colon == len(line) - 1:
                value = self._parse_nested(block_indent, depth)
            elif line.endswith("}") and cur.char_at(colon + 2) == "{":
                start = line.find("{", colon)
                value = parse_inline_object(line[start:], quotes, cur.line_no)
                cur.advance()
            elif line.endswith("]") and cur.char_at(colon + 2) == "[":
                start = line.find("[", colon)
                value = parse_inline_array(line[start:], quotes, cur.line_no)
                cur.advance()
            else:
                value = coerce_scalar(line[colon + 1:], quotes)
                cur.advance()

            result[key] = value

        return result

    def _parse_nested(self, parent_indent: int, depth: int) -> Value:
        """Value of a ``name:`` line: the block starting on the next line."""
        cur = self.cursor
        owner = cur.line_no
        if not cur.has_next():
            raise UnexpectedEndOfLine("property has no value before end of input", owner)
        cur.fetch()
        if cur.done:
            raise UnexpectedEndOfLine("property has no value before end of input", owner)
        if not cur.line:
            raise UnexpectedEndOfLine("empty line where a nested value was expected", cur.line_no)
        if cur.indent <= parent_indent:
            raise InconsistentIndentation(
                f"nested value must be indented deeper than line {owner}", cur.line_no
            )
        return self._parse_value(depth + 1)

    def _parse_scalar(self) -> Value:
        cur = self.cursor
        value = coerce_scalar(cur.line[cur.column:], self.options.quote_chars)
        cur.advance()
        return value

    def _trailing_content(self) -> None:
        cur = self.cursor
        if self.options.reject_trailing:
            raise TrailingContent(
                f"unexpected content after the document: {cur.line.strip()!r}", cur.line_no
            )
        logger.warning("ignoring content from line %d onward", cur.line_no)


# ---------------------------------------------------------------------------
# Module-level entry points
# ---------------------------------------------------------------------------

def parse(text: str, options: ParserOptions | None = None) -> Value:
    """Parse *text* into a Value tree. Empty text gives ``Null``."""
    return Parser(options).parse(text)


def loads(text: str, options: ParserOptions | None = None) -> Any:
    """Parse *text* into plain Python data (``dict``/``list``/``str``/``int``/``None``)."""
    return to_python(parse(text, options))


def load(source: Union[IO[str], str], options: ParserOptions | None = None) -> Value:
    """Parse a readable stream, or the file at path *source*."""
    if hasattr(source, "read"):
        return parse(source.read(), options)
    with open(source, encoding="utf-8") as fh:
        return parse(fh.read(), options)
