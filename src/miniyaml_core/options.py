"""Parser configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserOptions:
    """Knobs accepted by :func:`miniyaml_core.parse`.

    - ``max_depth``: deepest allowed block/item nesting
    - ``quote_chars``: characters that delimit quoted scalars
    - ``skip_blank_lines``: drop empty lines instead of rejecting them
    - ``reject_trailing``: raise on lines left after the root value
      (otherwise they are logged and ignored)
    """

    max_depth: int = 200
    quote_chars: tuple[str, ...] = ('"', "'")
    skip_blank_lines: bool = False
    reject_trailing: bool = False

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        if any(len(q) != 1 for q in self.quote_chars):
            raise ValueError("quote_chars must be single characters")


DEFAULT_OPTIONS = ParserOptions()
