"""Diagnostic source kinds.

The raw registry text is tagged with the command that produced it so the
parser can pick the matching grammar. Keeping the enum in the domain layer
lets adapters and services share it without importing each other.
"""

from __future__ import annotations

from enum import Enum


class SourceKind(str, Enum):
    """Which diagnostic command produced a piece of raw text."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    NONE = "none"

    def label(self) -> str:
        """Human readable label for reports and logging."""

        if self is SourceKind.PRIMARY:
            return "primary (account list)"
        if self is SourceKind.SECONDARY:
            return "secondary (legacy status)"
        return "unavailable"
