"""Offset to line/column mapping."""

from __future__ import annotations

from dataclasses import dataclass

from error_snippet.text.lines import split_lines
from error_snippet.text.span import SpanLike, SpanRange


@dataclass(frozen=True, slots=True, order=True)
class Coord:
    """Zero-indexed line and column of a character."""

    line: int = 0
    column: int = 0


@dataclass(frozen=True, slots=True)
class Span:
    start: Coord
    end: Coord

    @property
    def is_multiline(self) -> bool:
        return self.start.line != self.end.line

    def columns(self) -> range:
        """Columns covered on the span's line.

        Empty and inverted spans cover a single column at their start, so an
        underline never has zero or negative width.
        """
        if self.start.column >= self.end.column:
            return range(self.start.column, self.start.column + 1)
        return range(self.start.column, self.end.column)


def coords_of_index(content: str, index: int) -> Coord:
    """Line and column of the character at `index`.

    Indices past the end clamp to the end of the last line; negative indices
    clamp to the first character.
    """
    if index > len(content):
        lines = split_lines(content)
        if not lines:
            return Coord()
        return Coord(len(lines) - 1, len(lines[-1]))

    line = 0
    column = 0
    for ch in content[: max(index, 0)]:
        if ch == "\n":
            line += 1
            column = 0
        else:
            column += 1
    return Coord(line, column)


def coords_of_span(content: str, span: SpanLike) -> Span:
    """Map both ends of a range independently; reversed ranges give inverted spans."""
    resolved = SpanRange.of(span)
    return Span(
        start=coords_of_index(content, resolved.start),
        end=coords_of_index(content, resolved.end),
    )
