"""Partitioning and nesting of labels before they are rendered."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from error_snippet.diagnostics import Label, Source, same_file
from error_snippet.text import SpanRange, coords_of_span

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LabelGroup:
    """Labels sharing one source, in the order they were reported."""

    source: Source
    labels: list[Label] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class LabelContext:
    """A parent label plus the labels starting inside it, rendered as one snippet.

    Only parents spanning several lines have children, and children never
    have children of their own.
    """

    parent: Label
    source: Source
    children: tuple[Label, ...] = ()

    def max_span(self) -> SpanRange:
        """Range from the parent's start to the furthest end of any label in the context."""
        end = max((child.range.end for child in self.children), default=0)
        return SpanRange(self.parent.range.start, max(end, self.parent.range.end))


def group_labels_by_source(fallback: Source | None, labels: Iterable[Label]) -> list[LabelGroup]:
    """Bucket labels by the name of their resolved source, in first-seen order.

    Labels without a source of their own use `fallback`; when that is `None`
    too they are dropped.
    """
    groups: dict[str | None, LabelGroup] = {}
    for label in labels:
        source = label.resolve_source(fallback)
        if source is None:
            logger.debug("dropping label %r: no source attached", label.message)
            continue
        group = groups.get(source.name)
        if group is None:
            group = groups[source.name] = LabelGroup(source)
        group.labels.append(label)
    return list(groups.values())


def group_overlapping_labels(fallback: Source | None, labels: Iterable[Label]) -> list[LabelContext]:
    """Group labels into contexts where a multi-line parent adopts the labels starting inside it.

    Labels are visited by ascending start offset. A label already adopted by an
    earlier parent is never a parent itself, and adopted labels are not
    searched for children of their own.
    """
    ordered = sorted(labels, key=lambda label: label.range.start)
    visited: set[int] = set()
    contexts: list[LabelContext] = []

    for idx, parent in enumerate(ordered):
        if idx in visited:
            continue
        parent_source = parent.resolve_source(fallback)
        if parent_source is None:
            logger.debug("dropping label %r: no source attached", parent.message)
            continue
        visited.add(idx)

        if not coords_of_span(parent_source.content, parent.range).is_multiline:
            contexts.append(LabelContext(parent, parent_source))
            continue

        children: list[Label] = []
        for child_idx in range(idx + 1, len(ordered)):
            if child_idx in visited:
                continue
            child = ordered[child_idx]
            child_source = child.resolve_source(fallback)
            if child_source is None or not same_file(child_source, parent_source):
                continue
            if parent.range.contains(child.range.start):
                visited.add(child_idx)
                children.append(child)

        contexts.append(LabelContext(parent, parent_source, tuple(children)))

    return contexts
