"""Diagnostics."""

from error_snippet.diagnostics.diagnostic import (
    Deletion,
    Diagnostic,
    DiagnosticLike,
    Help,
    Insertion,
    Label,
    LabelSpan,
    Replacement,
    SimpleDiagnostic,
    SourceLocation,
    SourceRange,
    SourceWrapped,
    Suggestion,
    into_diagnostic,
    with_source,
)
from error_snippet.diagnostics.report import count_errors
from error_snippet.diagnostics.severity import Severity
from error_snippet.diagnostics.source import NamedSource, Source, same_file, source_of

__all__ = [
    "Deletion",
    "Diagnostic",
    "DiagnosticLike",
    "Help",
    "Insertion",
    "Label",
    "LabelSpan",
    "NamedSource",
    "Replacement",
    "Severity",
    "SimpleDiagnostic",
    "Source",
    "SourceLocation",
    "SourceRange",
    "SourceWrapped",
    "Suggestion",
    "count_errors",
    "into_diagnostic",
    "same_file",
    "source_of",
    "with_source",
]
