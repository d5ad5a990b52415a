"""Rendering of diagnostics into terminal text."""

from error_snippet.render.graphical import GraphicalRenderer
from error_snippet.render.grouping import LabelContext, LabelGroup, group_labels_by_source, group_overlapping_labels
from error_snippet.render.options import DEFAULT_TERM_WIDTH, RenderOptions, terminal_width
from error_snippet.render.renderer import Renderer, TextSink
from error_snippet.render.styled import StyledText
from error_snippet.render.suggestions import (
    SuggestionLine,
    apply_suggestion,
    group_suggestions_by_line,
    group_suggestions_by_source,
    marker_row,
    source_line,
    suggested_line,
)
from error_snippet.render.theme import ArrowSymbols, Theme, ThemeStyle, ThemeSymbols

__all__ = [
    "DEFAULT_TERM_WIDTH",
    "ArrowSymbols",
    "GraphicalRenderer",
    "LabelContext",
    "LabelGroup",
    "RenderOptions",
    "Renderer",
    "StyledText",
    "SuggestionLine",
    "TextSink",
    "Theme",
    "ThemeStyle",
    "ThemeSymbols",
    "apply_suggestion",
    "group_labels_by_source",
    "group_overlapping_labels",
    "group_suggestions_by_line",
    "group_suggestions_by_source",
    "marker_row",
    "source_line",
    "suggested_line",
    "terminal_width",
]
