"""Text primitives: offset ranges, line splitting, coordinates and context windows."""

from error_snippet.text.context import extract_with_context
from error_snippet.text.coords import Coord, Span, coords_of_index, coords_of_span
from error_snippet.text.lines import LineSpan, line_count, line_spans, split_lines
from error_snippet.text.span import SpanLike, SpanRange

__all__ = [
    "Coord",
    "LineSpan",
    "Span",
    "SpanLike",
    "SpanRange",
    "coords_of_index",
    "coords_of_span",
    "extract_with_context",
    "line_count",
    "line_spans",
    "split_lines",
]
