"""
Data structures for the javac output parser.

This module contains the data structures used to represent decoded diagnostics,
registered message rules, per-invocation parser state and collected output.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .enums import ActionKind, LifecycleKind, MessageCategory, MessageSeverity

DEFAULT_WARNING_PREFIX = "warning:"


@dataclass(frozen=True)
class Location:
    """Position of a diagnostic. ``column`` is 0-based."""

    file: str
    line: int
    column: int

    @property
    def column_number(self) -> int:
        """1-based column as reported to event sinks."""
        return self.column + 1


@dataclass(frozen=True)
class Diagnostic:
    """A complete compiler message produced by the aggregator."""

    severity: MessageSeverity
    message: str
    location: Optional[Location] = None


@dataclass(frozen=True)
class CompiledRule:
    """A message template compiled into a whole-line, case-insensitive matcher."""

    category: MessageCategory
    template: str
    matcher: re.Pattern

    def match(self, line: str) -> Optional[re.Match]:
        return self.matcher.fullmatch(line)


@dataclass(frozen=True)
class ParserAction:
    """A registered rule together with the action it triggers."""

    kind: ActionKind
    rule: CompiledRule
    lifecycle: Optional[LifecycleKind] = None


@dataclass
class ParserState:
    """Mutable state of a single compiler invocation."""

    tab_width: int
    warning_prefix: str = DEFAULT_WARNING_PREFIX
    rules: List[ParserAction] = field(default_factory=list)

    def replace_rules(self, rules: List[ParserAction]) -> None:
        """Swap in a complete rule set; the previous set is discarded."""
        self.rules = list(rules)


@dataclass
class CompilerMessage:
    """Data class representing a reported compiler message (error, warning, or info)."""

    message: str
    severity: MessageSeverity
    file: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert the CompilerMessage to a dictionary."""
        result: Dict[str, Any] = {
            "message": self.message,
            "severity": self.severity.value,
        }
        if self.file is not None:
            result["file"] = self.file
        if self.line is not None:
            result["line"] = self.line
        if self.column is not None:
            result["column"] = self.column
        return result


@dataclass
class ParsedOutput:
    """Everything an event sink observed while one compiler output was decoded."""

    source: str = "<stream>"
    messages: List[CompilerMessage] = field(default_factory=list)
    processed_files: List[str] = field(default_factory=list)
    generated_files: List[str] = field(default_factory=list)
    progress: List[str] = field(default_factory=list)

    def add_message(self, message: CompilerMessage) -> None:
        """Add a message to the parsed output."""
        self.messages.append(message)

    def get_messages_by_severity(
        self, severity: MessageSeverity
    ) -> List[CompilerMessage]:
        """Get all messages with the specified severity."""
        return [msg for msg in self.messages if msg.severity == severity]

    @property
    def errors(self) -> List[CompilerMessage]:
        """Get all error messages."""
        return self.get_messages_by_severity(MessageSeverity.ERROR)

    @property
    def warnings(self) -> List[CompilerMessage]:
        """Get all warning messages."""
        return self.get_messages_by_severity(MessageSeverity.WARNING)

    @property
    def infos(self) -> List[CompilerMessage]:
        """Get all info messages."""
        return self.get_messages_by_severity(MessageSeverity.INFO)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the ParsedOutput to a dictionary."""
        return {
            "source": self.source,
            "messages": [msg.to_dict() for msg in self.messages],
            "processed_files": list(self.processed_files),
            "generated_files": list(self.generated_files),
        }


@dataclass
class ParseStatistics:
    """Counters for one complete pass over a line stream."""

    lines: int = 0
    handled: int = 0
    unhandled: int = 0

    def record(self, handled: bool) -> None:
        self.lines += 1
        if handled:
            self.handled += 1
        else:
            self.unhandled += 1
