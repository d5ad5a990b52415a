"""Bounded line-window extraction around a span."""

from __future__ import annotations

from error_snippet.text.lines import line_spans
from error_snippet.text.span import SpanLike, SpanRange


def extract_with_context(content: str, span: SpanLike, context_lines: int) -> tuple[str, int]:
    """Extract the lines intersecting `span` plus `context_lines` lines around them.

    Returns the extracted text along with the index of the first line which
    actually intersects the span (as opposed to a context line).

    When no line intersects the span, e.g. when it lies entirely past the end
    of the content, the first `context_lines * 2 + 1` lines are returned
    instead and `context_lines` is reported as the matching line.
    """
    resolved = SpanRange.of(span)
    spans = line_spans(content)

    matching = [i for i, line in enumerate(spans) if line.intersects(resolved.start, resolved.end)]

    if not matching:
        if not spans:
            return "", context_lines
        last = spans[min(context_lines * 2, len(spans) - 1)]
        return content[: last.end], context_lines

    first_matching = matching[0]
    first = max(first_matching - context_lines, 0)
    last = min(matching[-1] + context_lines, len(spans) - 1)

    return content[spans[first].start : spans[last].end], first_matching
