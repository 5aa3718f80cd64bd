"""Emitter: renders a Value tree as a document that parses back to it."""

from __future__ import annotations

import re
from typing import Any

from .errors import EmitError
from .scalars import int_to_digits
from .values import Null, Value, VArray, VInteger, VNumber, VObject, VText, _NullType, from_python

_INDENT = "  "

_KEY_RE = re.compile(r"[A-Za-z0-9]+")
_INTEGER_RE = re.compile(r"[0-9]+")
# Text that could be mistaken for a key, a marker or a quoted token.
_PLAIN_UNSAFE_START = ("-", "{", "[", '"', "'", " ", "\t")
_PLAIN_UNSAFE_END = (":", "}", "]", '"', "'", " ", "\t")


def dump(value: Any) -> str:
    """Render *value* (a Value or plain Python data) as document text.

    The top-level ``Null`` is the empty document. Raises EmitError for
    anything the grammar has no spelling for.
    """
    try:
        value = from_python(value)
    except TypeError as exc:
        raise EmitError(str(exc)) from exc
    if isinstance(value, _NullType):
        return ""
    return "\n".join(_emit(value)) + "\n"


def _emit(value: Value) -> list[str]:
    """Lines for *value* relative to its own indent column."""
    if isinstance(value, VArray):
        if not value.items:
            return ["[]"]
        lines: list[str] = []
        for item in value.items:
            child = _emit(item)
            lines.append("- " + child[0])
            lines.extend(_INDENT + line for line in child[1:])
        return lines

    if isinstance(value, VObject):
        if not value.entries:
            return ["{}"]
        lines = []
        for key, item in value.entries.items():
            if not _KEY_RE.fullmatch(key):
                raise EmitError(f"key {key!r} is not a run of ASCII letters/digits")
            if _is_block(item):
                lines.append(f"{key}:")
                lines.extend(_INDENT + line for line in _emit(item))
            else:
                lines.append(f"{key}: {_emit(item)[0]}")
        return lines

    return [format_scalar(value)]


def _is_block(value: Value) -> bool:
    return isinstance(value, (VArray, VObject)) and len(value) > 0


def format_scalar(value: Value) -> str:
    if isinstance(value, VInteger):
        if value.value < 0:
            raise EmitError(f"negative integer {value.value} cannot be written")
        return int_to_digits(value.value)
    if isinstance(value, VText):
        return _format_text(value.value)
    if isinstance(value, VNumber):
        raise EmitError(f"floating number {value.value} cannot be written")
    if value is Null:
        raise EmitError("null can only appear as the whole (empty) document")
    raise EmitError(f"cannot write {value!r}")


def _format_text(text: str) -> str:
    if "\n" in text or "\r" in text:
        raise EmitError(f"text {text!r} spans several lines")
    if _needs_quotes(text):
        return f'"{text}"'
    return text


def _needs_quotes(text: str) -> bool:
    if not text or _INTEGER_RE.fullmatch(text):
        return True
    if text.startswith(_PLAIN_UNSAFE_START) or text.endswith(_PLAIN_UNSAFE_END):
        return True
    # "name: x" inside a list item would be read as an object
    colon = text.find(":")
    return colon > 0 and _KEY_RE.fullmatch(text[:colon]) is not None
