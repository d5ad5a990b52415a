"""Deferred reporting of diagnostics."""

from __future__ import annotations

import logging
import sys
from typing import Protocol, runtime_checkable

from error_snippet.diagnostics import Diagnostic, SimpleDiagnostic, count_errors
from error_snippet.render import GraphicalRenderer, Renderer

logger = logging.getLogger(__name__)


@runtime_checkable
class Handler(Protocol):
    """Store of diagnostics which decides when to show them to the user."""

    def report(self, diagnostic: Diagnostic) -> None: ...

    def drain(self) -> None: ...

    def report_and_drain(self, diagnostic: Diagnostic) -> None:
        self.report(diagnostic)
        self.drain()


class DiagnosticHandler(Handler):
    """Buffers diagnostics until drained to stderr.

    With `exit_on_error` set, draining any error-severity diagnostic ends the
    process with exit status 1 after an abort summary is rendered.
    """

    __slots__ = ("renderer", "exit_on_error", "_queue")

    def __init__(self, renderer: Renderer | None = None, *, exit_on_error: bool = False) -> None:
        self.renderer: Renderer = renderer if renderer is not None else GraphicalRenderer()
        self.exit_on_error = exit_on_error
        self._queue: list[Diagnostic] = []

    def enable_exit_on_error(self) -> DiagnosticHandler:
        self.exit_on_error = True
        return self

    def count(self) -> int:
        """Number of diagnostics waiting to be drained."""
        return len(self._queue)

    def report(self, diagnostic: Diagnostic) -> None:
        self._queue.append(diagnostic)

    def drain(self) -> None:
        pending, self._queue = self._queue, []
        logger.debug("draining %d diagnostic(s)", len(pending))

        for idx, diagnostic in enumerate(pending):
            try:
                self.renderer.render_stderr(diagnostic)
            except BaseException:
                # Undrained diagnostics go back in front of anything reported meanwhile.
                self._queue[:0] = pending[idx:]
                raise

        errors = count_errors(pending)
        if errors and self.exit_on_error:
            self.renderer.render_stderr(SimpleDiagnostic(f"aborting due to {errors} previous errors"))
            sys.exit(1)
