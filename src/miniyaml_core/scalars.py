"""Character classification and scalar coercion."""

from __future__ import annotations

import re

from .values import VInteger, VText, Value

_INTEGER_RE = re.compile(r"[0-9]+")

# int() refuses very long digit strings, so they are converted in slices.
_INT_SLICE = 4000

DEFAULT_QUOTES = ('"', "'")


# ---------------------------------------------------------------------------
# Character classes (ASCII only)
# ---------------------------------------------------------------------------

def is_space(c: str) -> bool:
    return c == " " or c == "\t"


def is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def is_letter(c: str) -> bool:
    return "a" <= c <= "z" or "A" <= c <= "Z"


def is_letter_or_digit(c: str) -> bool:
    return is_letter(c) or is_digit(c)


def trimmed(s: str) -> str:
    """Strip spaces and tabs from both ends (newlines are left alone)."""
    return s.strip(" \t")


# ---------------------------------------------------------------------------
# Coercion
# ---------------------------------------------------------------------------

def is_quoted(token: str, quotes: tuple[str, ...] = DEFAULT_QUOTES) -> bool:
    """True if *token* starts and ends with the same quote character."""
    return len(token) >= 2 and token[0] in quotes and token[-1] == token[0]


def unquote(token: str, quotes: tuple[str, ...] = DEFAULT_QUOTES) -> str:
    """Remove one pair of enclosing quotes, if present. No escape handling."""
    if is_quoted(token, quotes):
        return token[1:-1]
    return token


def is_integer_token(token: str) -> bool:
    return _INTEGER_RE.fullmatch(token) is not None


def digits_to_int(token: str) -> int:
    result = 0
    for start in range(0, len(token), _INT_SLICE):
        chunk = token[start:start + _INT_SLICE]
        result = result * 10 ** len(chunk) + int(chunk)
    return result


def int_to_digits(n: int) -> str:
    """Decimal text of *n*, of any size. Inverse of :func:`digits_to_int`."""
    if n < 0:
        return "-" + int_to_digits(-n)
    base = 10 ** _INT_SLICE
    chunks: list[str] = []
    while n >= base:
        n, rest = divmod(n, base)
        chunks.append(str(rest).zfill(_INT_SLICE))
    chunks.append(str(n))
    return "".join(reversed(chunks))


def coerce_scalar(raw: str, quotes: tuple[str, ...] = DEFAULT_QUOTES) -> Value:
    """Convert a raw token to a Value.

    - ``"text"`` / ``'text'`` → VText with the quotes removed
    - ASCII digits only → VInteger
    - anything else → VText, trimmed

    ``true``, ``null`` and ``3.14`` stay text.
    """
    token = trimmed(raw)
    if is_quoted(token, quotes):
        return VText(token[1:-1])
    if is_integer_token(token):
        return VInteger(digits_to_int(token))
    return VText(token)
