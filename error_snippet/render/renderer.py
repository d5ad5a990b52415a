"""Renderer contract."""

from __future__ import annotations

import io
import sys
from typing import Protocol, runtime_checkable

from error_snippet.diagnostics import Diagnostic


class TextSink(Protocol):
    def write(self, text: str, /) -> object: ...


@runtime_checkable
class Renderer(Protocol):
    """Turns a diagnostic into text written to a sink.

    Implementations provide `render_to`; the other methods are derived from it.
    Errors raised by the sink propagate to the caller unchanged.
    """

    def render_to(self, stream: TextSink, diagnostic: Diagnostic) -> None: ...

    def render(self, diagnostic: Diagnostic) -> str:
        buffer = io.StringIO()
        self.render_to(buffer, diagnostic)
        return buffer.getvalue()

    def render_stderr(self, diagnostic: Diagnostic) -> None:
        self.render_to(sys.stderr, diagnostic)
