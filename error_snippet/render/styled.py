"""Text buffer where every character carries its own style."""

from __future__ import annotations

from rich.color import ColorSystem
from rich.style import Style


class StyledText:
    """A string paired one-to-one with per-character styles.

    Characters and styles live in two parallel lists, so re-styling any
    sub-range is a plain indexed write and overlapping styles simply
    overwrite each other. Nothing is emitted until `render`.
    """

    __slots__ = ("_chars", "_styles")

    def __init__(self, text: str = "", style: Style | None = None) -> None:
        self._chars: list[str] = list(text)
        self._styles: list[Style | None] = [style] * len(self._chars)

    @staticmethod
    def blank(width: int) -> StyledText:
        return StyledText(" " * max(width, 0))

    def __len__(self) -> int:
        return len(self._chars)

    @property
    def plain(self) -> str:
        return "".join(self._chars)

    def style_at(self, offset: int) -> Style | None:
        return self._styles[offset]

    def set_char(self, offset: int, char: str) -> bool:
        """Replace the character at `offset`, keeping its style.

        Returns `False` and leaves the text untouched when `offset` is out of range.
        """
        if not 0 <= offset < len(self._chars):
            return False
        self._chars[offset] = char
        return True

    def style_span(self, start: int, stop: int, style: Style | None) -> None:
        """Style the characters in `[start, stop)`, stopping at the end of the text."""
        for offset in range(max(start, 0), min(stop, len(self._styles))):
            self._styles[offset] = style

    def append(self, text: str, style: Style | None = None) -> None:
        self._chars.extend(text)
        self._styles.extend([style] * len(text))

    def extend(self, other: StyledText) -> None:
        """Append another buffer, keeping its per-character styles."""
        self._chars.extend(other._chars)
        self._styles.extend(other._styles)

    def slice(self, start: int, stop: int | None = None) -> StyledText:
        """Copy of the characters in `[start, stop)` together with their styles."""
        piece = StyledText()
        piece._chars = self._chars[start:stop]
        piece._styles = self._styles[start:stop]
        return piece

    def render(self, color_system: ColorSystem | None = ColorSystem.TRUECOLOR) -> str:
        """Emit the text, wrapping each run of equally styled characters in escape codes.

        With no color system the plain text is returned.
        """
        if color_system is None:
            return self.plain

        parts: list[str] = []
        run_start = 0
        for offset in range(1, len(self._chars) + 1):
            if offset < len(self._chars) and self._styles[offset] == self._styles[run_start]:
                continue
            run = "".join(self._chars[run_start:offset])
            style = self._styles[run_start]
            parts.append(style.render(run, color_system=color_system) if style else run)
            run_start = offset
        return "".join(parts)

    def __str__(self) -> str:
        return self.plain

    def __repr__(self) -> str:
        return f"StyledText({self.plain!r})"
