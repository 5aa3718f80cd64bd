"""MiniYamlRepl — incremental document entry for notebook / interactive use.

Also provides the ``miniyaml`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from typing import IO, Sequence

from .errors import MiniYamlError
from .options import ParserOptions
from .parser import load, parse
from .scalars import int_to_digits
from .values import Value, VArray, VInteger, VNumber, VObject, VText, _NullType, to_python

# Stays below the 4300-digit limit of str(int).
_JSON_SAFE_BITS = 14000
_BIG_INT_RE = re.compile(r'"\\u0000bigint:(\d+)\\u0000"')


# ---------------------------------------------------------------------------
# MiniYamlRepl class (notebook / programmatic use)
# ---------------------------------------------------------------------------

class MiniYamlRepl:
    """Collects document lines and parses them on demand.

    Usage::

        repl = MiniYamlRepl()
        repl.feed("name: Bob")
        repl.feed("age: 20")
        repl.flush()      # → VObject({"name": VText("Bob"), "age": VInteger(20)})
        repl.last_value   # same value
        repl.reset()      # drop pending lines
    """

    def __init__(self, options: ParserOptions | None = None) -> None:
        self.options = options
        self.buffer: list[str] = []
        self.last_value: Value | None = None

    def feed(self, line: str) -> None:
        """Queue one document line."""
        self.buffer.append(line.rstrip("\n"))

    def flush(self) -> Value | None:
        """Parse the queued lines as one document and clear the queue.

        Returns ``None`` if nothing was queued. The queue is cleared even
        when parsing fails.
        """
        if not self.buffer:
            return None
        text = "\n".join(self.buffer)
        self.buffer = []
        self.last_value = parse(text, self.options)
        return self.last_value

    def reset(self) -> None:
        """Clear pending lines and the last value."""
        self.buffer = []
        self.last_value = None


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _fmt_inline(value: Value) -> str:
    """Format a single value for compact one-line display."""
    if isinstance(value, VText):
        return f'"{value.value}"'
    if isinstance(value, VInteger):
        return int_to_digits(value.value)
    if isinstance(value, VNumber):
        return str(value)
    if isinstance(value, VArray):
        return "[" + ", ".join(_fmt_inline(v) for v in value.items) + "]"
    if isinstance(value, VObject):
        return "{" + ", ".join(f"{k}: {_fmt_inline(v)}" for k, v in value.entries.items()) + "}"
    if isinstance(value, _NullType):
        return "null"
    return repr(value)


def _fmt_inspect(value: Value) -> str:
    """Pretty-print the top level of a value."""
    if isinstance(value, _NullType):
        return "Null"

    if isinstance(value, VObject):
        if not value.entries:
            return "VObject {}"
        width = max(len(k) for k in value.entries)
        lines = ["VObject {"]
        for k, v in value.entries.items():
            lines.append(f"  {k:<{width}}: {_fmt_inline(v)}")
        lines.append("}")
        return "\n".join(lines)

    if isinstance(value, VArray):
        if not value.items:
            return "VArray []"
        lines = ["VArray ["]
        for i, v in enumerate(value.items, 1):
            lines.append(f"  {i}: {_fmt_inline(v)}")
        lines.append("]")
        return "\n".join(lines)

    return _fmt_inline(value)


def _to_json(value: Value) -> str:
    """JSON text for *value*; integers past CPython's str() limit are spliced in."""
    big: list[str] = []

    def prepare(obj):
        if isinstance(obj, int) and obj.bit_length() > _JSON_SAFE_BITS:
            big.append(int_to_digits(obj))
            return f"\x00bigint:{len(big) - 1}\x00"
        if isinstance(obj, list):
            return [prepare(v) for v in obj]
        if isinstance(obj, dict):
            return {k: prepare(v) for k, v in obj.items()}
        return obj

    text = json.dumps(prepare(to_python(value)), indent=2, ensure_ascii=False)
    return _BIG_INT_RE.sub(lambda m: big[int(m.group(1))], text)


def _print_value(value: Value, dest: IO[str], as_json: bool = False) -> None:
    if as_json:
        print(_to_json(value), file=dest)
    else:
        print(_fmt_inspect(value), file=dest)


def _run_file(
    path: str,
    dest: IO[str],
    options: ParserOptions | None = None,
    as_json: bool = False,
) -> bool:
    """Parse the file at *path* and print its value. False on failure."""
    try:
        value = load(path, options)
    except OSError as exc:
        print(f"Error reading '{path}': {exc}", file=sys.stderr)
        return False
    except UnicodeDecodeError as exc:
        print(f"{path}: not UTF-8 text: {exc}", file=sys.stderr)
        return False
    except MiniYamlError as exc:
        print(f"{path}: {exc}", file=sys.stderr)
        return False
    _print_value(value, dest, as_json)
    return True


def _process_line(
    repl: MiniYamlRepl,
    line: str,
    dest: IO[str],
    as_json: bool = False,
) -> bool:
    """Process one input line.  Returns False when the session should end."""
    command = line.strip()

    # ── Blank line: parse what has been collected ────────────────────────
    if not command:
        try:
            value = repl.flush()
        except MiniYamlError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return True
        if value is not None:
            _print_value(value, dest, as_json)
        return True

    # Commands are only recognised between documents.
    if not repl.buffer:
        if command in (":q", ":quit"):
            return False

        if command == ":reset":
            repl.reset()
            return True

        if command.startswith("?<< "):
            _run_file(command[4:].strip(), dest, repl.options, as_json)
            return True

    # ── Document line ────────────────────────────────────────────────────
    repl.feed(line)
    return True


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def _build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="miniyaml",
        description="Parse miniyaml documents and print the resulting values.",
    )
    ap.add_argument("files", nargs="*", help="documents to parse (interactive when omitted)")
    ap.add_argument("--json", action="store_true", help="print values as JSON")
    ap.add_argument("--strict", action="store_true", help="reject content after the root value")
    ap.add_argument("--skip-blank", action="store_true", help="ignore blank lines")
    ap.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return ap


def _interactive(repl: MiniYamlRepl, as_json: bool) -> None:
    dest: IO[str] = sys.stdout
    _file: IO[str] | None = None

    print("miniyaml  (:q to quit  |  :reset  |  blank line parses  |  ?<< file  ?>> file)")

    while True:
        try:
            line = input("... " if repl.buffer else "YML> ")
        except EOFError:
            print()
            _process_line(repl, "", dest, as_json)
            break
        except KeyboardInterrupt:
            print()
            repl.reset()
            continue

        command = line.strip()

        # ── Output redirect: ?>> filepath  /  ?>> ─────────────────────────
        if not repl.buffer and command.startswith("?>> "):
            filepath = command[4:].strip()
            if _file:
                _file.close()
            try:
                _file = open(filepath, "w", encoding="utf-8")
                dest = _file
            except OSError as exc:
                _file = None
                dest = sys.stdout
                print(f"Error opening '{filepath}': {exc}", file=sys.stderr)
            continue

        if not repl.buffer and command == "?>>":
            if _file:
                _file.close()
                _file = None
            dest = sys.stdout
            continue

        if not _process_line(repl, line, dest, as_json):
            break

    if _file:
        _file.close()


def main(argv: Sequence[str] | None = None) -> int:
    """``miniyaml`` / ``python -m miniyaml_core.repl``."""
    args = _build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    options = ParserOptions(reject_trailing=args.strict, skip_blank_lines=args.skip_blank)

    if not args.files:
        _interactive(MiniYamlRepl(options), args.json)
        return 0

    status = 0
    for path in args.files:
        if not _run_file(path, sys.stdout, options, args.json):
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
