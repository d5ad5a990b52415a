"""Diagnostic severity levels."""

from enum import IntEnum


class Severity(IntEnum):
    """Severity of a diagnostic or label, ordered from most to least severe.

    Only used to pick the style and symbol a diagnostic is rendered with.
    """

    ERROR = 0  # program cannot continue
    WARNING = 1
    INFO = 2
    NOTE = 3
    HELP = 4

    def __str__(self) -> str:
        return self.name.lower()
