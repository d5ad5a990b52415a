"""Diagnostic contract and the value types it is built from."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from typing import ClassVar, Protocol, TypeAlias, runtime_checkable

from error_snippet.diagnostics.severity import Severity
from error_snippet.diagnostics.source import Source
from error_snippet.text import SpanLike, SpanRange, extract_with_context, line_count


@runtime_checkable
class Diagnostic(Protocol):
    """A single reportable message plus its structured context.

    Only `message` is required. Classes which subclass this protocol inherit
    the defaults below; any other object providing all methods is accepted
    as well. Renderers consume every returned iterable exactly once.
    """

    def message(self) -> str: ...

    def severity(self) -> Severity:
        return Severity.ERROR

    def code(self) -> object | None:
        """Unique code used to look up more information about the diagnostic."""
        return None

    def source_code(self) -> Source | None:
        """Fallback source for labels which carry no source of their own."""
        return None

    def labels(self) -> Iterable[Label] | None:
        return None

    def causes(self) -> Iterable[Diagnostic]:
        """Diagnostics which were the underlying cause of this one."""
        return ()

    def related(self) -> Iterable[Diagnostic]:
        return ()

    def help(self) -> Iterable[Help] | None:
        return None


@dataclass(frozen=True, slots=True)
class LabelSpan:
    """Lines read around a label, see `Label.read_span`."""

    data: str
    # first displayed line, including context lines
    line: int
    # first line intersecting the label
    start_line: int

    def line_count(self) -> int:
        return line_count(self.data)


@dataclass(frozen=True, slots=True)
class Label:
    """A message anchored to a range of some source text.

    When `source` is absent the source of the owning diagnostic is used; if
    that is absent too, the label is not rendered.
    """

    message: str
    range: SpanRange
    source: Source | None = None
    severity: Severity | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "range", SpanRange.of(self.range))

    @staticmethod
    def error(message: str, span: SpanLike, source: Source | None = None) -> Label:
        return Label(message, SpanRange.of(span), source, Severity.ERROR)

    @staticmethod
    def warning(message: str, span: SpanLike, source: Source | None = None) -> Label:
        return Label(message, SpanRange.of(span), source, Severity.WARNING)

    @staticmethod
    def info(message: str, span: SpanLike, source: Source | None = None) -> Label:
        return Label(message, SpanRange.of(span), source, Severity.INFO)

    @staticmethod
    def note(message: str, span: SpanLike, source: Source | None = None) -> Label:
        return Label(message, SpanRange.of(span), source, Severity.NOTE)

    @staticmethod
    def help(message: str, span: SpanLike, source: Source | None = None) -> Label:
        return Label(message, SpanRange.of(span), source, Severity.HELP)

    def with_severity(self, severity: Severity) -> Label:
        return replace(self, severity=severity)

    def resolve_source(self, fallback: Source | None) -> Source | None:
        return self.source if self.source is not None else fallback

    def read_span(self, diagnostic: Diagnostic | None = None, context_lines: int = 0) -> LabelSpan | None:
        """Read the lines covered by the label, with `context_lines` lines around them.

        Returns `None` when neither the label nor the diagnostic has a source.
        """
        fallback = diagnostic.source_code() if diagnostic is not None else None
        source = self.resolve_source(fallback)
        if source is None:
            return None

        data, start_line = extract_with_context(source.content, self.range, context_lines)
        return LabelSpan(
            data=data,
            line=max(start_line - context_lines, 0),
            start_line=start_line,
        )


@dataclass(frozen=True, slots=True)
class SourceRange:
    """A range within a specific source."""

    source: Source
    span: SpanRange

    def __post_init__(self) -> None:
        object.__setattr__(self, "span", SpanRange.of(self.span))


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """A single offset within a specific source."""

    source: Source
    offset: int


class Suggestion(Protocol):
    """A concrete textual edit proposed to fix a diagnostic.

    Implemented by `Deletion`, `Insertion` and `Replacement`.
    """

    __slots__ = ()

    # Breaks ties between suggestions anchored at the same offset.
    _kind_order: ClassVar[int] = 0

    @staticmethod
    def delete(range: SourceRange) -> Deletion:
        return Deletion(range)

    @staticmethod
    def insert(location: SourceLocation, value: str) -> Insertion:
        return Insertion(location, value)

    @staticmethod
    def replace(range: SourceRange, replacement: str) -> Replacement:
        return Replacement(range, replacement)

    @property
    def source(self) -> Source: ...

    @property
    def anchor(self) -> int:
        """Offset which decides the line the suggestion is shown on."""
        ...

    def span(self) -> SpanRange: ...

    @property
    def marker_length(self) -> int:
        """Number of marker glyphs drawn under the edit."""
        ...

    @property
    def length_delta(self) -> int:
        """How much longer the displayed line gets once the edit is applied."""
        ...

    def sort_key(self) -> tuple[int, int]:
        return (self.anchor, self._kind_order)


@dataclass(frozen=True, slots=True)
class Deletion(Suggestion):
    range: SourceRange

    _kind_order = 0

    @property
    def source(self) -> Source:
        return self.range.source

    @property
    def anchor(self) -> int:
        return self.range.span.start

    def span(self) -> SpanRange:
        return self.range.span

    @property
    def marker_length(self) -> int:
        return self.range.span.len()

    @property
    def length_delta(self) -> int:
        # deleted text stays visible, styled as removed
        return 0


@dataclass(frozen=True, slots=True)
class Insertion(Suggestion):
    location: SourceLocation
    value: str

    _kind_order = 1

    @property
    def source(self) -> Source:
        return self.location.source

    @property
    def anchor(self) -> int:
        return self.location.offset

    def span(self) -> SpanRange:
        return SpanRange.at(self.location.offset, 1)

    @property
    def marker_length(self) -> int:
        return len(self.value)

    @property
    def length_delta(self) -> int:
        return len(self.value)


@dataclass(frozen=True, slots=True)
class Replacement(Suggestion):
    range: SourceRange
    replacement: str

    _kind_order = 2

    @property
    def source(self) -> Source:
        return self.range.source

    @property
    def anchor(self) -> int:
        return self.range.span.start

    def span(self) -> SpanRange:
        return self.range.span

    @property
    def marker_length(self) -> int:
        return len(self.replacement)

    @property
    def length_delta(self) -> int:
        return len(self.replacement) - self.range.span.len()


@dataclass(frozen=True, slots=True)
class Help:
    """A footer message with zero or more suggested fixes."""

    message: str
    suggestions: tuple[Suggestion, ...] = ()

    @staticmethod
    def of(value: Help | str) -> Help:
        if isinstance(value, Help):
            return value
        return Help(value)

    def with_suggestion(self, suggestion: Suggestion) -> Help:
        return replace(self, suggestions=(*self.suggestions, suggestion))

    def with_suggestions(self, suggestions: Iterable[Suggestion]) -> Help:
        return replace(self, suggestions=(*self.suggestions, *suggestions))


DiagnosticLike: TypeAlias = Diagnostic | BaseException


class SimpleDiagnostic(Diagnostic):
    """Diagnostic assembled at runtime through chained builder calls.

    Exceptions given as causes or related diagnostics are converted with
    `into_diagnostic`.
    """

    __slots__ = ("_message", "_code", "_severity", "_help", "_labels", "_causes", "_related")

    def __init__(self, message: str) -> None:
        self._message = message
        self._code: str | None = None
        self._severity = Severity.ERROR
        self._help: list[Help] = []
        self._labels: list[Label] | None = None
        self._causes: list[Diagnostic] = []
        self._related: list[Diagnostic] = []

    def message(self) -> str:
        return self._message

    def severity(self) -> Severity:
        return self._severity

    def code(self) -> str | None:
        return self._code

    def labels(self) -> Iterator[Label] | None:
        if self._labels is None:
            return None
        return iter(tuple(self._labels))

    def causes(self) -> Iterator[Diagnostic]:
        return iter(tuple(self._causes))

    def related(self) -> Iterator[Diagnostic]:
        return iter(tuple(self._related))

    def help(self) -> Iterator[Help]:
        return iter(tuple(self._help))

    def with_severity(self, severity: Severity) -> SimpleDiagnostic:
        self._severity = severity
        return self

    def with_code(self, code: str) -> SimpleDiagnostic:
        self._code = code
        return self

    def with_help(self, help: Help | str) -> SimpleDiagnostic:
        self._help.append(Help.of(help))
        return self

    def set_help(self, help: Help | str) -> SimpleDiagnostic:
        """Replace all help messages with the given one."""
        self._help = [Help.of(help)]
        return self

    def with_label(self, label: Label) -> SimpleDiagnostic:
        return self.with_labels((label,))

    def with_labels(self, labels: Iterable[Label]) -> SimpleDiagnostic:
        if self._labels is None:
            self._labels = []
        self._labels.extend(labels)
        return self

    def add_related(self, related: DiagnosticLike) -> SimpleDiagnostic:
        self._related.append(_as_diagnostic(related))
        return self

    def append_related(self, related: Iterable[DiagnosticLike]) -> SimpleDiagnostic:
        self._related.extend(_as_diagnostic(item) for item in related)
        return self

    def add_cause(self, cause: DiagnosticLike) -> SimpleDiagnostic:
        self._causes.append(_as_diagnostic(cause))
        return self

    def add_causes(self, causes: Iterable[DiagnosticLike]) -> SimpleDiagnostic:
        self._causes.extend(_as_diagnostic(item) for item in causes)
        return self

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"SimpleDiagnostic({self._message!r}, severity={self._severity!s})"


class SourceWrapped(Diagnostic):
    """Diagnostic wrapper supplying a fallback source, see `with_source`."""

    __slots__ = ("diagnostic", "source")

    def __init__(self, diagnostic: Diagnostic, source: Source) -> None:
        self.diagnostic = diagnostic
        self.source = source

    def message(self) -> str:
        return self.diagnostic.message()

    def severity(self) -> Severity:
        return self.diagnostic.severity()

    def code(self) -> object | None:
        return self.diagnostic.code()

    def source_code(self) -> Source | None:
        own = self.diagnostic.source_code()
        return own if own is not None else self.source

    def labels(self) -> Iterable[Label] | None:
        return self.diagnostic.labels()

    def causes(self) -> Iterable[Diagnostic]:
        return self.diagnostic.causes()

    def related(self) -> Iterable[Diagnostic]:
        return self.diagnostic.related()

    def help(self) -> Iterable[Help] | None:
        return self.diagnostic.help()

    def __str__(self) -> str:
        return self.message()


def with_source(diagnostic: Diagnostic, source: Source) -> SourceWrapped:
    """Attach source code to a diagnostic created before the source was available.

    The diagnostic's own source, if any, still takes precedence.
    """
    return SourceWrapped(diagnostic, source)


def into_diagnostic(error: BaseException) -> SimpleDiagnostic:
    """Convert an exception into a diagnostic carrying its message."""
    return SimpleDiagnostic(str(error))


def _as_diagnostic(value: DiagnosticLike) -> Diagnostic:
    if isinstance(value, BaseException):
        return into_diagnostic(value)
    return value
