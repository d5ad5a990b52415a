"""Style and symbol presets used by the graphical renderer."""

from __future__ import annotations

from dataclasses import dataclass

from rich.style import Style

from error_snippet.diagnostics import Severity


@dataclass(frozen=True, slots=True)
class ThemeStyle:
    error: Style
    warning: Style
    info: Style
    note: Style
    help: Style

    deletion: Style
    insertion: Style

    link: Style
    gutter: Style

    @staticmethod
    def rgb() -> ThemeStyle:
        """Preset using true-color RGB values."""
        return ThemeStyle(
            error=Style(color="rgb(233,114,99)", bold=True),
            warning=Style(color="rgb(235,191,131)", bold=True),
            info=Style(color="rgb(114,159,207)"),
            note=Style(color="rgb(166,227,161)"),
            help=Style(color="rgb(171,161,247)"),
            deletion=Style(color="rgb(233,114,99)"),
            insertion=Style(color="rgb(166,227,161)"),
            link=Style(color="rgb(166,173,200)"),
            gutter=Style(color="rgb(156,156,192)"),
        )

    @staticmethod
    def ansi() -> ThemeStyle:
        """Preset restricted to the 16 standard terminal colors."""
        return ThemeStyle(
            error=Style(color="bright_red", bold=True),
            warning=Style(color="bright_yellow", bold=True),
            info=Style(color="bright_blue", bold=True),
            note=Style(color="bright_green", bold=True),
            help=Style(color="bright_cyan", bold=True),
            deletion=Style(color="bright_red"),
            insertion=Style(color="bright_green"),
            link=Style(color="bright_white"),
            gutter=Style(color="bright_white"),
        )

    def for_severity(self, severity: Severity) -> Style:
        match severity:
            case Severity.ERROR:
                return self.error
            case Severity.WARNING:
                return self.warning
            case Severity.INFO:
                return self.info
            case Severity.NOTE:
                return self.note
            case Severity.HELP:
                return self.help


@dataclass(frozen=True, slots=True)
class ThemeSymbols:
    error: str
    warning: str
    info: str
    note: str
    help: str

    @staticmethod
    def unicode() -> ThemeSymbols:
        return ThemeSymbols(error="×", warning="⚠", info="☞", note="☞", help="☞")

    def for_severity(self, severity: Severity) -> str:
        match severity:
            case Severity.ERROR:
                return self.error
            case Severity.WARNING:
                return self.warning
            case Severity.INFO:
                return self.info
            case Severity.NOTE:
                return self.note
            case Severity.HELP:
                return self.help


@dataclass(frozen=True, slots=True)
class ArrowSymbols:
    """Glyphs for gutters, underlines and connectors."""

    hbar: str = "─"
    hbot: str = "┬"
    vertical: str = "│"
    vertical_break: str = "∶"
    top_left: str = "╭"
    bottom_left: str = "╰"
    horizontal_right: str = "├"
    arrow_up: str = "^"
    arrow_right: str = "▶"

    @staticmethod
    def unicode() -> ArrowSymbols:
        return ArrowSymbols()


@dataclass(frozen=True, slots=True)
class Theme:
    style: ThemeStyle
    symbols: ThemeSymbols
    arrows: ArrowSymbols

    @staticmethod
    def fancy() -> Theme:
        """RGB colors with unicode symbols."""
        return Theme(
            style=ThemeStyle.rgb(),
            symbols=ThemeSymbols.unicode(),
            arrows=ArrowSymbols.unicode(),
        )

    @staticmethod
    def ansi() -> Theme:
        """16-color styles with unicode symbols, for terminals without true-color support."""
        return Theme(
            style=ThemeStyle.ansi(),
            symbols=ThemeSymbols.unicode(),
            arrows=ArrowSymbols.unicode(),
        )
