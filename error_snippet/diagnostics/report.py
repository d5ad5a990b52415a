"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from error_snippet.diagnostics.diagnostic import Diagnostic
from error_snippet.diagnostics.severity import Severity


def count_errors(diagnostics: Iterable[Diagnostic]) -> int:
    return sum(1 for d in diagnostics if d.severity() == Severity.ERROR)
