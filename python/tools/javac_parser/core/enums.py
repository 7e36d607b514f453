"""
Enums for the javac output parser.

This module contains all the enumeration types used throughout the parser:
message severities, bootstrap categories, parser action kinds and report formats.
"""

from enum import Enum, auto
from typing import Optional


class OutputFormat(Enum):
    """Enumeration of supported report formats."""

    JSON = auto()
    CSV = auto()
    XML = auto()

    @classmethod
    def from_string(cls, format_name: str) -> "OutputFormat":
        """Convert string format name to enum value."""
        name = format_name.upper()
        if name in cls.__members__:
            return cls[name]
        raise ValueError(f"Unsupported output format: {format_name}")


class MessageSeverity(Enum):
    """Enumeration of message severity levels."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @classmethod
    def from_string(cls, severity: str) -> "MessageSeverity":
        """Convert string severity to enum value."""
        mapping = {"error": cls.ERROR, "warning": cls.WARNING, "info": cls.INFO}
        normalized = severity.lower()
        if normalized in mapping:
            return mapping[normalized]
        raise ValueError(f"Unknown message severity: {severity}")


class MessageCategory(Enum):
    """
    Categories a compiler may declare in a bootstrap block.

    The values are the literal category names found on the wire.
    """

    PARSING_STARTED = "PARSING_STARTED"
    PARSING_COMPLETED = "PARSING_COMPLETED"
    WROTE = "WROTE"
    CHECKING = "CHECKING"
    LOADING = "LOADING"
    NOTE = "NOTE"
    WARNING = "WARNING"
    STATISTICS = "STATISTICS"
    IGNORED = "IGNORED"

    @classmethod
    def lookup(cls, name: str) -> Optional["MessageCategory"]:
        """Return the category for a wire name, or None when it is unknown."""
        try:
            return cls(name.strip())
        except ValueError:
            return None


class LifecycleKind(Enum):
    """Which point of a file's life a lifecycle rule reports."""

    STARTED = auto()
    COMPLETED = auto()
    WROTE = auto()


class ActionKind(Enum):
    """Closed set of actions a registered rule can trigger."""

    FILE_LIFECYCLE = auto()
    CHECKING = auto()
    LOADING = auto()
    NOTE = auto()
    STATISTICS = auto()
    IGNORED = auto()


class PathKind(Enum):
    """Classification of a decoded file path."""

    SOURCE = "source"
    ARTIFACT = "artifact"
    OTHER = "other"
