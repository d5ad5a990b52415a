"""Inline rendering of suggested edits below a help message."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from rich.style import Style

from error_snippet.diagnostics import Deletion, Insertion, Replacement, Source, Suggestion
from error_snippet.render.styled import StyledText
from error_snippet.render.theme import ThemeStyle
from error_snippet.text import coords_of_index, coords_of_span, line_spans


@dataclass(frozen=True, slots=True)
class SuggestionLine:
    """Suggestions whose anchor falls on the same zero-indexed line."""

    line: int
    suggestions: tuple[Suggestion, ...]

    @property
    def source(self) -> Source:
        return self.suggestions[0].source


def group_suggestions_by_source(suggestions: Iterable[Suggestion]) -> list[list[Suggestion]]:
    """Bucket suggestions by source name, in first-seen order."""
    groups: dict[str | None, list[Suggestion]] = {}
    for suggestion in suggestions:
        groups.setdefault(suggestion.source.name, []).append(suggestion)
    return list(groups.values())


def group_suggestions_by_line(suggestions: Iterable[Suggestion]) -> list[SuggestionLine]:
    """Bucket suggestions of a single source by the line of their anchor, in first-seen order."""
    lines: dict[int, list[Suggestion]] = {}
    for suggestion in suggestions:
        line = coords_of_index(suggestion.source.content, suggestion.anchor).line
        lines.setdefault(line, []).append(suggestion)
    return [SuggestionLine(line, tuple(items)) for line, items in lines.items()]


def marker_style(suggestion: Suggestion, styles: ThemeStyle) -> Style:
    if isinstance(suggestion, Deletion):
        return styles.deletion
    return styles.insertion


def _split_at(line: StyledText, first: int, second: int) -> tuple[StyledText, StyledText, StyledText]:
    first, second = sorted((min(max(first, 0), len(line)), min(max(second, 0), len(line))))
    return line.slice(0, first), line.slice(first, second), line.slice(second)


def apply_suggestion(line: StyledText, suggestion: Suggestion, styles: ThemeStyle) -> StyledText:
    """Return `line` with `suggestion` applied and its edited text styled.

    Columns are taken from the suggestion's span in its source, so edits must
    be applied right to left for earlier columns to stay valid.
    """
    span = coords_of_span(suggestion.source.content, suggestion.span())
    start = span.start.column
    end = len(line) if span.is_multiline else span.end.column

    match suggestion:
        case Deletion():
            before, middle, after = _split_at(line, start, end)
            middle.style_span(0, len(middle), styles.deletion)
            before.extend(middle)
        case Insertion(value=value):
            before, middle, after = _split_at(line, start, end)
            before.append(value, styles.insertion)
            before.extend(middle)
        case Replacement(range=range_, replacement=replacement):
            before, _, after = _split_at(line, start, start + range_.span.len())
            before.append(replacement, styles.insertion)
        case _:
            raise TypeError(f"unsupported suggestion: {suggestion!r}")

    before.extend(after)
    return before


def source_line(content: str, line: int) -> str:
    """Text of the zero-indexed `line` without its terminator, empty past the last line."""
    spans = line_spans(content)
    if not 0 <= line < len(spans):
        return ""
    span = spans[line]
    return content[span.start : span.end]


def suggested_line(line: int, suggestions: Sequence[Suggestion], styles: ThemeStyle) -> StyledText:
    """Source `line` of `suggestions` with every edit applied.

    `suggestions` must be sorted by position and anchored on `line`.
    """
    edited = StyledText(source_line(suggestions[0].source.content, line))
    for suggestion in reversed(suggestions):
        edited = apply_suggestion(edited, suggestion, styles)
    return edited


def marker_row(suggestions: Sequence[Suggestion], styles: ThemeStyle, glyph: str) -> StyledText:
    """Row of `glyph` markers under each edit of an already edited line.

    Each marker starts at the edit's column, moved right by the length change
    of the edits to its left.
    """
    row = StyledText()
    shift = 0
    for suggestion in suggestions:
        column = coords_of_index(suggestion.source.content, suggestion.span().start).column + shift
        row.append(" " * max(column - len(row), 0))
        row.append(glyph * suggestion.marker_length, marker_style(suggestion, styles))
        shift += suggestion.length_delta
    return row
