"""miniyaml_core — parser for a restricted, indentation-based YAML-like notation."""

from .values import (
    Null,
    Value,
    VArray,
    VInteger,
    VNumber,
    VObject,
    VText,
    _NullType,
    from_python,
    to_python,
)
from .errors import (
    EmitError,
    InconsistentIndentation,
    MalformedInlineField,
    MiniYamlError,
    NestingTooDeep,
    ParseError,
    TrailingContent,
    UnexpectedEndOfLine,
    UnexpectedLine,
    UnterminatedQuote,
)
from .options import DEFAULT_OPTIONS, ParserOptions
from .parser import Parser, load, loads, parse
from .emitter import dump
from .repl import MiniYamlRepl

__all__ = [
    "parse",
    "loads",
    "load",
    "dump",
    "Parser",
    "ParserOptions",
    "DEFAULT_OPTIONS",
    "Null",
    "Value",
    "VArray",
    "VInteger",
    "VNumber",
    "VObject",
    "VText",
    "from_python",
    "to_python",
    "MiniYamlError",
    "ParseError",
    "UnexpectedEndOfLine",
    "UnterminatedQuote",
    "MalformedInlineField",
    "InconsistentIndentation",
    "UnexpectedLine",
    "NestingTooDeep",
    "TrailingContent",
    "EmitError",
    "MiniYamlRepl",
]
