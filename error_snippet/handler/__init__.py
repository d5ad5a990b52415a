"""Diagnostic handlers."""

from error_snippet.handler.handler import DiagnosticHandler, Handler

__all__ = [
    "DiagnosticHandler",
    "Handler",
]
