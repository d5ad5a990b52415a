from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True, order=True)
class SpanRange:
    """
    Half-open range [start, end) of character offsets into some source text.

    Unlike most ranges, no ordering is enforced between the two ends:
    reversed or out-of-bounds ranges are valid and rendering degrades
    gracefully when it meets them.
    """

    start: int
    end: int

    @staticmethod
    def of(value: SpanLike) -> SpanRange:
        """Coerce a `SpanRange`, a unit-step `range` or a `(start, end)` pair."""
        if isinstance(value, SpanRange):
            return value
        if isinstance(value, range):
            if value.step != 1:
                raise ValueError("SpanRange requires a range with a step of 1")
            return SpanRange(value.start, value.stop)
        if isinstance(value, tuple):
            if len(value) != 2:
                raise ValueError("SpanRange requires a (start, end) pair")
            start, end = value
            return SpanRange(int(start), int(end))
        raise TypeError(f"Cannot build a SpanRange from {type(value).__name__}")

    @staticmethod
    def at(offset: int, length: int) -> SpanRange:
        """Create a SpanRange at offset with given length."""
        return SpanRange(offset, offset + length)

    def len(self) -> int:
        """Length of the range; reversed ranges have a length of zero."""
        return max(self.end - self.start, 0)

    def contains(self, offset: int) -> bool:
        return self.start <= offset < self.end

    def __repr__(self) -> str:
        return f"SpanRange({self.start}..{self.end})"

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"


SpanLike: TypeAlias = SpanRange | range | tuple[int, int]
