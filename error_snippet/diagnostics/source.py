"""Source text providers referenced by labels and suggestions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class Source(Protocol):
    """Read-only access to a named (or anonymous) piece of source text.

    Sources are immutable and shared by reference between labels. When labels
    are grouped into snippets, two sources are considered the same file when
    their `name` is equal, regardless of their content.
    """

    @property
    def name(self) -> str | None: ...

    @property
    def content(self) -> str: ...


@dataclass(frozen=True, slots=True)
class NamedSource:
    """In-memory source text with an optional display name."""

    name: str | None
    content: str

    def __repr__(self) -> str:
        return f"NamedSource({self.name!r}, {len(self.content)} chars)"


def source_of(text: str | Source, name: str | None = None) -> Source:
    """Wrap a plain string as a `Source`; existing sources are returned as-is."""
    if isinstance(text, str):
        return NamedSource(name, text)
    return text


def same_file(left: Source, right: Source) -> bool:
    """Grouping equality: sources are the same file when their names match."""
    return left.name == right.name
