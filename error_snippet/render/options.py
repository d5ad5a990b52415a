"""Renderer configuration options."""

from __future__ import annotations

import os
import shutil
from collections.abc import Mapping
from dataclasses import dataclass, field

from rich.color import ColorSystem

from error_snippet.render.theme import Theme

DEFAULT_TERM_WIDTH = 80

_TRUTHY = {"1", "true", "yes", "on"}


def terminal_width() -> int:
    """Width of the attached terminal, or `DEFAULT_TERM_WIDTH` when there is none."""
    return shutil.get_terminal_size(fallback=(DEFAULT_TERM_WIDTH, 24)).columns


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Feature flags and layout settings for the graphical renderer."""

    theme: Theme = field(default_factory=Theme.fancy)
    # advisory only, output is never wrapped
    width: int = field(default_factory=terminal_width)
    # spaces per level of nesting for causes and related diagnostics
    padding: int = 6
    gutter_margin: int = 2
    context_lines: int = 1
    use_colors: bool = True
    # styles labelled ranges inside the source lines, requires `use_colors`
    highlight_source: bool = False
    color_system: ColorSystem = ColorSystem.TRUECOLOR

    @staticmethod
    def plain() -> RenderOptions:
        """Options producing uncolored output."""
        return RenderOptions(use_colors=False)

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> RenderOptions:
        """Options honouring `NO_COLOR` and `ERROR_SNIPPET_HIGHLIGHT`."""
        env = os.environ if environ is None else environ
        use_colors = not env.get("NO_COLOR")
        highlight = env.get("ERROR_SNIPPET_HIGHLIGHT", "0").lower() in _TRUTHY
        return RenderOptions(use_colors=use_colors, highlight_source=highlight)

    @property
    def active_color_system(self) -> ColorSystem | None:
        return self.color_system if self.use_colors else None
