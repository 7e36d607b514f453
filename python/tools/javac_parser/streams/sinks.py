"""
Event sinks.

The parser pushes every decoded event into an object implementing
``EventSink``. Two implementations are provided: ``CollectingSink`` records
events into a ``ParsedOutput`` and ``LoggingSink`` forwards them to loguru.
"""

from typing import List, Optional, Protocol

from loguru import logger

from ..core.data_structures import CompilerMessage, ParsedOutput
from ..core.enums import MessageSeverity


class EventSink(Protocol):
    """Protocol defining the callbacks the parser reports to."""

    def on_file_processing(self, path: str) -> None: ...

    def on_file_generated(self, path: str) -> None: ...

    def on_progress_text(self, text: str) -> None: ...

    def on_diagnostic(
        self,
        severity: MessageSeverity,
        message: str,
        file: Optional[str],
        line: Optional[int],
        column: Optional[int],
    ) -> None: ...


class CollectingSink:
    """Sink that accumulates all events into a ParsedOutput."""

    def __init__(self, source: str = "<stream>"):
        self.output = ParsedOutput(source=source)

    def on_file_processing(self, path: str) -> None:
        self.output.processed_files.append(path)

    def on_file_generated(self, path: str) -> None:
        self.output.generated_files.append(path)

    def on_progress_text(self, text: str) -> None:
        self.output.progress.append(text)

    def on_diagnostic(
        self,
        severity: MessageSeverity,
        message: str,
        file: Optional[str],
        line: Optional[int],
        column: Optional[int],
    ) -> None:
        self.output.add_message(
            CompilerMessage(
                message=message, severity=severity, file=file, line=line, column=column
            )
        )

    @property
    def messages(self) -> List[CompilerMessage]:
        return self.output.messages


class LoggingSink:
    """Sink that writes every event to the log, e.g. while following a live process."""

    _levels = {
        MessageSeverity.ERROR: "ERROR",
        MessageSeverity.WARNING: "WARNING",
        MessageSeverity.INFO: "INFO",
    }

    def __init__(self):
        self.error_count = 0

    def on_file_processing(self, path: str) -> None:
        logger.debug(f"Processing {path}")

    def on_file_generated(self, path: str) -> None:
        logger.debug(f"Generated {path}")

    def on_progress_text(self, text: str) -> None:
        logger.debug(text)

    def on_diagnostic(
        self,
        severity: MessageSeverity,
        message: str,
        file: Optional[str],
        line: Optional[int],
        column: Optional[int],
    ) -> None:
        if severity is MessageSeverity.ERROR:
            self.error_count += 1
        location = ""
        if file is not None:
            location = f"{file}:{line}:{column}: "
        logger.log(self._levels[severity], f"{location}{message}")
