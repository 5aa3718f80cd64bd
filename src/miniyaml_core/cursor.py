"""Line cursor: walks a document one logical line at a time."""

from __future__ import annotations

from .scalars import is_space


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n")


def compute_indent(line: str) -> int:
    """Indent level: leading spaces/tabs counted in units of two, rounded down."""
    i = 0
    while i < len(line) and is_space(line[i]):
        i += 1
    return i // 2


# ---------------------------------------------------------------------------
# LineCursor — raw line splitting
# ---------------------------------------------------------------------------

class LineCursor:
    """Reads ``\\n``-separated lines from a text, strictly forward."""

    def __init__(self, text: str = "") -> None:
        self.reset(text)

    def reset(self, text: str) -> None:
        self._text = text
        self._pos = 0

    @property
    def pos(self) -> int:
        return self._pos

    def at_end(self) -> bool:
        return self._pos == len(self._text)

    def rest_is_blank(self) -> bool:
        """True if only spaces, tabs and newlines remain."""
        return not self._text[self._pos:].strip(" \t\n")

    def read_line(self) -> str:
        """Return the text up to the next newline and move past it."""
        n = self._text.find("\n", self._pos)
        if n == -1:
            n = len(self._text)
        result = self._text[self._pos:n]
        self._pos = n if n == len(self._text) else n + 1
        return result


# ---------------------------------------------------------------------------
# BlockCursor — parser state over a LineCursor
# ---------------------------------------------------------------------------

class BlockCursor:
    """Current line, its indent level and line number.

    ``indent`` is normally the indent of ``line`` but list items push it one
    level deeper (see :meth:`step_into`). Once input is exhausted ``done``
    is set and ``indent`` becomes -1, which matches no block.
    """

    def __init__(self, skip_blank_lines: bool = False) -> None:
        self.lines = LineCursor()
        self.skip_blank_lines = skip_blank_lines
        self.line = ""
        self.indent = 0
        self.line_no = 0
        self.done = False

    def start(self, text: str) -> bool:
        """Load *text* and fetch its first line. False if there is none."""
        self.lines.reset(normalize_newlines(text))
        self.line = ""
        self.indent = 0
        self.line_no = 0
        self.done = False
        if self.lines.at_end():
            self.done = True
            return False
        self.fetch()
        return not self.done

    def has_next(self) -> bool:
        return not self.lines.at_end()

    def fetch(self) -> None:
        """Read the next line, strip trailing blanks and compute its indent."""
        while True:
            self.line = self.lines.read_line().rstrip(" \t")
            self.line_no += 1
            if not self.line and self.lines.rest_is_blank():
                # blank lines closing the document are end of input
                self._finish()
                return
            if self.line or not self.skip_blank_lines:
                break
            if self.lines.at_end():
                self._finish()
                return
        self.indent = compute_indent(self.line)

    def advance(self) -> None:
        """Move to the next line, or mark the cursor done at end of input."""
        if self.has_next():
            self.fetch()
        else:
            self._finish()

    def step_into(self) -> None:
        self.indent += 1

    @property
    def column(self) -> int:
        return self.indent * 2

    def char_at(self, index: int) -> str | None:
        if 0 <= index < len(self.line):
            return self.line[index]
        return None

    def _finish(self) -> None:
        self.done = True
        self.indent = -1
