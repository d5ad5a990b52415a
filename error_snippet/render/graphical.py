"""Graphical renderer drawing source snippets with underlined labels."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeAlias

from rich.style import Style

from error_snippet.diagnostics import Diagnostic, Help, Label, Severity
from error_snippet.render.grouping import LabelContext, LabelGroup, group_labels_by_source, group_overlapping_labels
from error_snippet.render.options import RenderOptions
from error_snippet.render.renderer import Renderer, TextSink
from error_snippet.render.styled import StyledText
from error_snippet.render.suggestions import (
    SuggestionLine,
    group_suggestions_by_line,
    group_suggestions_by_source,
    marker_row,
    suggested_line,
)
from error_snippet.render.theme import Theme
from error_snippet.text import Span, coords_of_span, extract_with_context, line_count, split_lines

HELP_PREFIX = "   help: "

_PlacedLabel: TypeAlias = tuple[Label, Span]


class GraphicalRenderer(Renderer):
    """Renders diagnostics as framed source snippets.

    Example output, without colors:

        × error[E4012]: mismatched types
           ╭─[src/test.lm:2:5]
         1 │ let a = 1;
         2 │ let b = 2;
           ∶     ^^^^^ expected `Int`
         3 │ let c = a + b;
           ╰──
           help: did you mean `b`?

    Causes and related diagnostics are rendered recursively, each level
    indented by `RenderOptions.padding` spaces.
    """

    __slots__ = ("options", "_indent")

    def __init__(self, options: RenderOptions | None = None) -> None:
        self.options = options if options is not None else RenderOptions()
        self._indent = 0

    @property
    def theme(self) -> Theme:
        return self.options.theme

    def render_to(self, stream: TextSink, diagnostic: Diagnostic) -> None:
        self._render_diagnostic(stream, diagnostic)

    def gutter_size_of(self, content: str) -> int:
        """Width of the line number column for `content`, margin included."""
        return len(str(line_count(content))) + self.options.gutter_margin

    # helpers

    def _indentation(self) -> str:
        return " " * (self._indent * self.options.padding)

    def _paint(self, text: str, style: Style) -> str:
        if not self.options.use_colors:
            return text
        return style.render(text, color_system=self.options.color_system)

    def _emit(self, text: StyledText) -> str:
        return text.render(self.options.active_color_system)

    def _style_for(self, severity: Severity) -> Style:
        return self.theme.style.for_severity(severity)

    def _gutter(self, padding: int, gutter: str, bar: str) -> str:
        return f"{self._indentation()}{gutter:^{padding}}{bar} "

    def _line_gutter(self, padding: int, line_num: int) -> str:
        number = self._paint(f"{line_num:^{padding}}", self.theme.style.gutter)
        return f"{self._indentation()}{number}{self.theme.arrows.vertical} "

    def _empty_gutter(self, padding: int) -> str:
        return self._gutter(padding, "", self.theme.arrows.vertical)

    def _break(self, padding: int) -> str:
        return self._gutter(padding, "", self.theme.arrows.vertical_break)

    def _breakln(self, padding: int) -> str:
        return self._break(padding) + "\n"

    # diagnostic

    def _render_diagnostic(self, stream: TextSink, diagnostic: Diagnostic) -> None:
        self._render_header(stream, diagnostic)
        self._render_source(stream, diagnostic)
        self._render_footer(stream, diagnostic)

    def _render_header(self, stream: TextSink, diagnostic: Diagnostic) -> None:
        severity = diagnostic.severity()
        style = self._style_for(severity)
        symbol = self.theme.symbols.for_severity(severity)

        parts = [self._indentation(), self._paint(symbol, style), " ", self._paint(str(severity), style)]
        code = diagnostic.code()
        if code is not None:
            parts.append(self._paint(f"[{code}]", style))
        parts.append(f": {diagnostic.message()}\n")
        stream.write("".join(parts))

    def _render_nested(self, stream: TextSink, diagnostic: Diagnostic) -> None:
        self._indent += 1
        try:
            self._render_diagnostic(stream, diagnostic)
            stream.write("\n")
        finally:
            self._indent -= 1

    def _render_source(self, stream: TextSink, diagnostic: Diagnostic) -> None:
        for cause in diagnostic.causes():
            self._render_nested(stream, cause)

        labels = diagnostic.labels()
        if labels is not None:
            for group in group_labels_by_source(diagnostic.source_code(), labels):
                self._render_label_group(stream, group, diagnostic.severity())

        for related in diagnostic.related():
            self._render_nested(stream, related)

    # labels

    def _render_label_group(self, stream: TextSink, group: LabelGroup, severity: Severity) -> None:
        if not group.labels:
            return

        source = group.source
        content = source.content
        gutter_size = self.gutter_size_of(content)
        arrows = self.theme.arrows

        header = [self._indentation(), " " * gutter_size, arrows.top_left, arrows.hbar]
        if source.name is not None:
            start = coords_of_span(content, group.labels[0].range).start
            header.append(f"[{self._paint(source.name, self.theme.style.link)}:{start.line + 1}:{start.column + 1}]")
        else:
            header.append(arrows.hbar * 10)
        stream.write("".join(header) + "\n")

        contexts = group_overlapping_labels(source, group.labels)
        for idx, context in enumerate(contexts):
            self._render_label_context(stream, context, severity)
            if idx < len(contexts) - 1:
                stream.write(self._breakln(gutter_size))

        stream.write(f"{self._indentation()}{' ' * gutter_size}{arrows.bottom_left}{arrows.hbar * 2}\n")

    def _render_label_context(self, stream: TextSink, context: LabelContext, severity: Severity) -> None:
        content = context.source.content
        context_lines = self.options.context_lines
        gutter_size = self.gutter_size_of(content)
        arrows = self.theme.arrows
        style = self._style_for(severity)

        joined = context.max_span()
        span = coords_of_span(content, joined)
        window, first_matching = extract_with_context(content, joined, context_lines)
        lines = split_lines(window)
        first_line = max(first_matching - context_lines, 0)

        # Spans outside every line get a fallback window; point at them from its last line.
        anchor_line = span.start.line
        if not first_line <= anchor_line < first_line + len(lines):
            anchor_line = first_line + len(lines) - 1

        children = [(label, coords_of_span(content, label.range)) for label in context.children]

        for idx, line in enumerate(lines):
            line_idx = first_line + idx
            line_labels = sorted(
                (item for item in children if not item[1].is_multiline and item[1].start.line == line_idx),
                key=lambda item: item[1].start.column,
                reverse=True,
            )

            parts = [self._line_gutter(gutter_size, line_idx + 1)]
            if span.is_multiline:
                if idx == 0:
                    parts.append(self._paint(arrows.top_left + arrows.hbar + arrows.arrow_right, style) + " ")
                elif idx == len(lines) - 1:
                    parts.append(self._paint(arrows.horizontal_right + arrows.hbar + arrows.arrow_right, style) + " ")
                else:
                    parts.append(self._paint(arrows.vertical, style) + "   ")

            underlines_parent = not span.is_multiline and line_idx == anchor_line and not line_labels

            styled = StyledText(line)
            if self.options.highlight_source:
                for label, label_span in line_labels:
                    styled.style_span(label_span.start.column, label_span.end.column, self._label_style(label, severity))
                if underlines_parent:
                    styled.style_span(span.start.column, span.end.column, self._label_style(context.parent, severity))
            parts.append(self._emit(styled))
            stream.write("".join(parts) + "\n")

            if underlines_parent:
                self._render_line_labels(stream, severity, [(context.parent, span)], gutter_size, in_multiline=False)
            else:
                self._render_line_labels(stream, severity, line_labels, gutter_size, in_multiline=True)

        if span.is_multiline:
            stream.write(self._break(gutter_size) + self._paint(arrows.vertical, style) + "\n")
            stream.write(
                self._empty_gutter(gutter_size)
                + self._paint(arrows.bottom_left, style)
                + " "
                + self._paint(context.parent.message, style)
                + "\n"
            )

    def _label_style(self, label: Label, fallback: Severity) -> Style:
        return self._style_for(label.severity if label.severity is not None else fallback)

    def _render_line_labels(
        self,
        stream: TextSink,
        severity: Severity,
        labels: Sequence[_PlacedLabel],
        gutter_size: int,
        *,
        in_multiline: bool,
    ) -> None:
        """Underline the labelled columns of a line and point at each label's message.

        A lone label gets `^` markers with the message on the same row; several
        labels share a `─┬` row followed by one `╰─ message` row per label.
        """
        if not labels:
            return

        arrows = self.theme.arrows
        single = len(labels) == 1
        prefix = self._break(gutter_size)
        if in_multiline:
            prefix += self._paint(arrows.vertical, self._style_for(severity)) + "   "

        underline = StyledText.blank(max(span.columns().stop for _, span in labels))
        for label, span in labels:
            label_style = self._label_style(label, severity)
            columns = span.columns()
            for offset in columns:
                if single:
                    glyph = arrows.arrow_up
                elif offset == columns.stop - 1:
                    glyph = arrows.hbot
                else:
                    glyph = arrows.hbar
                underline.set_char(offset, glyph)
            underline.style_span(columns.start, columns.stop, label_style)
            if single:
                underline.append(f" {label.message}", label_style)
        stream.write(prefix + self._emit(underline) + "\n")

        if single:
            return

        rows = [StyledText.blank(span.columns().stop + 1) for _, span in labels]
        for idx, (label, span) in enumerate(labels):
            label_style = self._label_style(label, severity)
            stop = span.columns().stop
            last_column = stop - 1

            for row in rows[:idx]:
                row.set_char(last_column, arrows.vertical)
                row.style_span(last_column, stop, label_style)

            row = rows[idx]
            row.set_char(last_column, arrows.bottom_left)
            row.set_char(stop, arrows.hbar)
            row.style_span(last_column, stop + 1, label_style)
            row.append(f" {label.message}", label_style)

        for row in rows:
            stream.write(prefix + self._emit(row) + "\n")

    # help and suggestions

    def _render_footer(self, stream: TextSink, diagnostic: Diagnostic) -> None:
        helps = diagnostic.help()
        if helps is None:
            return
        for help in helps:
            self._render_help(stream, help)

    def _render_help(self, stream: TextSink, help: Help) -> None:
        for idx, line in enumerate(split_lines(help.message)):
            lead = self._paint(HELP_PREFIX, self.theme.style.help) if idx == 0 else " " * len(HELP_PREFIX)
            stream.write(f"{self._indentation()}{lead}{line}\n")

        padding = max((self.gutter_size_of(s.source.content) for s in help.suggestions), default=0)
        for group in group_suggestions_by_source(help.suggestions):
            lines = group_suggestions_by_line(group)
            for idx, suggestion_line in enumerate(lines):
                self._render_suggestion_line(stream, suggestion_line)
                if idx < len(lines) - 1:
                    stream.write(self._breakln(padding))

    def _render_suggestion_line(self, stream: TextSink, suggestion_line: SuggestionLine) -> None:
        ordered = sorted(suggestion_line.suggestions, key=lambda suggestion: suggestion.sort_key())
        gutter_size = self.gutter_size_of(suggestion_line.source.content)
        styles = self.theme.style

        edited = suggested_line(suggestion_line.line, ordered, styles)
        stream.write(self._line_gutter(gutter_size, suggestion_line.line + 1) + self._emit(edited) + "\n")

        markers = marker_row(ordered, styles, self.theme.arrows.arrow_up)
        stream.write(self._empty_gutter(gutter_size) + self._emit(markers) + "\n")
