"""Line splitting shared by the coordinate mapper and the context extractor."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LineSpan:
    """Offsets of one line's text, excluding its terminator."""

    start: int
    end: int

    def intersects(self, start: int, end: int) -> bool:
        return self.end > start and self.start < end


def split_lines(text: str) -> list[str]:
    """Split text into lines.

    Lines end at `\\n`; a trailing `\\r` is stripped from each line and a
    single trailing empty line is not counted, so `"a\\n"` has one line and
    `""` has none.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def line_spans(text: str) -> list[LineSpan]:
    """Offsets of every line of `split_lines(text)` within `text`."""
    spans: list[LineSpan] = []
    position = 0
    for raw in text.split("\n"):
        if position >= len(text) and raw == "":
            break
        length = len(raw) - 1 if raw.endswith("\r") else len(raw)
        spans.append(LineSpan(position, position + length))
        position += len(raw) + 1
    return spans


def line_count(text: str) -> int:
    return len(split_lines(text))
