"""
javac output parser.

This module provides the per-line state machine that decodes the output of a
javac process into diagnostics and file lifecycle events. Lines are tried, in
order, against:

1. the bootstrap block start sentinel,
2. the rules registered by the latest bootstrap block,
3. ``error:`` / ``warning:`` style prefixes,
4. ``file:line: message`` diagnostics followed by a source excerpt and a caret line,
5. the out-of-memory marker,

and anything left over is reported verbatim as an informational message.
"""

import re
from pathlib import Path
from typing import List, Optional

from loguru import logger

from ..core.config import ParserConfig
from ..core.data_structures import (
    Diagnostic,
    Location,
    ParserAction,
    ParserState,
    ParseStatistics,
)
from ..core.enums import ActionKind, LifecycleKind, MessageSeverity, PathKind
from ..streams.line_source import LineSource
from ..streams.sinks import EventSink
from .columns import column_number
from .paths import decode_path
from .registry import find_action, is_bootstrap_start, read_bootstrap_block

OUT_OF_MEMORY_MARKER = "java.lang.OutOfMemoryError"
OUT_OF_MEMORY_MESSAGE = (
    "Out of memory. Increase the maximum heap size of the compiler process."
)

ERROR_LABELS = frozenset({"error", "caused by", "javac"})
WARNING_LABEL = "warning"
SYMBOL_LABEL = "symbol"
CARET = "^"

COMPILING_PROGRESS = "Compiling {}..."
LOADING_PROGRESS = "Loading classes..."
PARSING_PROGRESS = "Parsing {}..."

_LINE_NUMBER = re.compile(r"\d+", re.ASCII)


def merge_symbol_line(messages: List[str]) -> List[str]:
    """Fold a trailing ``symbol: name`` line into the message it belongs to."""
    if len(messages) != 2:
        return messages
    label, colon, value = messages[1].partition(":")
    if not colon or label.strip() != SYMBOL_LABEL:
        return messages
    return [f"{messages[0]} {value.strip()}"]


def is_message_continuation(line: Optional[str]) -> bool:
    return bool(line) and line[0].isspace()


class JavacOutputParser:
    """
    Decoder for the output of one javac invocation.

    An instance keeps the rules declared by the compiler and must not be reused
    for another invocation.
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or ParserConfig()
        self.state = ParserState(
            tab_width=self.config.tab_width,
            warning_prefix=self.config.warning_prefix,
        )

    @property
    def rules(self) -> List[ParserAction]:
        return self.state.rules

    def parse(self, source: LineSource, sink: EventSink) -> ParseStatistics:
        """Decode the whole stream."""
        stats = ParseStatistics()
        while (line := source.pull_line()) is not None:
            stats.record(self.process_line(line, source, sink))
        logger.debug(
            f"Parsed {stats.lines} lines ({stats.unhandled} left incomplete)"
        )
        return stats

    def process_next(self, source: LineSource, sink: EventSink) -> Optional[bool]:
        """Pull and decode one line; None once the stream is exhausted."""
        line = source.pull_line()
        if line is None:
            return None
        return self.process_line(line, source, sink)

    def process_line(self, line: str, source: LineSource, sink: EventSink) -> bool:
        """
        Decode a line already pulled from ``source``.

        Further lines may be pulled while a multi-line diagnostic is assembled.

        Returns:
            False when a diagnostic started on this line could not be
            completed, True otherwise
        """
        if is_bootstrap_start(line):
            self._load_patterns(source)
            return True

        if (found := find_action(self.state.rules, line)) is not None:
            action, matched = found
            self._execute(action, line, matched, sink)
            return True

        handled = self._decode_prefixed(line, source, sink)
        if handled is not None:
            return handled

        if line.endswith(OUT_OF_MEMORY_MARKER):
            self._emit(sink, Diagnostic(MessageSeverity.ERROR, OUT_OF_MEMORY_MESSAGE))
            return True

        self._emit(sink, Diagnostic(MessageSeverity.INFO, line))
        return True

    def _load_patterns(self, source: LineSource) -> None:
        block = read_bootstrap_block(source)
        self.state.replace_rules(block.rules)
        if block.warning_prefix is not None:
            self.state.warning_prefix = block.warning_prefix
        logger.debug(
            f"Loaded {len(block.rules)} message patterns, {block.skipped} skipped"
        )

    def _execute(
        self, action: ParserAction, line: str, matched: re.Match, sink: EventSink
    ) -> None:
        parsed = matched.group(1) if matched.re.groups else None

        match action.kind:
            case ActionKind.FILE_LIFECYCLE:
                if parsed is not None:
                    self._report_path(parsed, action.lifecycle, sink)
            case ActionKind.CHECKING:
                if parsed is not None:
                    sink.on_progress_text(COMPILING_PROGRESS.format(parsed))
            case ActionKind.LOADING:
                sink.on_progress_text(LOADING_PROGRESS)
            case ActionKind.NOTE:
                self._emit(sink, Diagnostic(MessageSeverity.INFO, line))
            case ActionKind.STATISTICS | ActionKind.IGNORED:
                pass

    def _report_path(
        self, fragment: str, lifecycle: Optional[LifecycleKind], sink: EventSink
    ) -> None:
        decoded = decode_path(
            fragment, self.config.source_extension, self.config.artifact_extension
        )
        stage = lifecycle.name.lower() if lifecycle is not None else "lifecycle"
        logger.debug(f"{stage}: {decoded.path} ({decoded.kind.name.lower()})")
        match decoded.kind:
            case PathKind.SOURCE:
                sink.on_file_processing(decoded.path)
                sink.on_progress_text(PARSING_PROGRESS.format(decoded.name))
            case PathKind.ARTIFACT:
                sink.on_file_generated(decoded.path)
            case PathKind.OTHER:
                pass

    def _decode_prefixed(
        self, line: str, source: LineSource, sink: EventSink
    ) -> Optional[bool]:
        first = line.find(":")
        if first == 1:
            # drive letter
            first = line.find(":", first + 1)
        if first < 0:
            return None

        prefix = line[:first].strip()
        label = prefix.lower()
        if label in ERROR_LABELS:
            self._emit(
                sink, Diagnostic(MessageSeverity.ERROR, line[first + 1 :].strip())
            )
            return True
        if label == WARNING_LABEL:
            self._emit(
                sink, Diagnostic(MessageSeverity.WARNING, line[first + 1 :].strip())
            )
            return True

        second = line.find(":", first + 1)
        if second < 0:
            return None

        file_path = prefix.replace("\\", "/")
        if not self._file_exists(file_path):
            return None

        line_text = line[first + 1 : second].strip()
        if not _LINE_NUMBER.fullmatch(line_text):
            return None

        message = line[second + 1 :].strip()
        severity = MessageSeverity.ERROR
        warning_prefix = self.state.warning_prefix
        if message.startswith(warning_prefix):
            message = message[len(warning_prefix) :].strip()
            severity = MessageSeverity.WARNING

        return self._accumulate(
            line, file_path, int(line_text), severity, message, source, sink
        )

    def _accumulate(
        self,
        source_line: str,
        file_path: str,
        line_number: int,
        severity: MessageSeverity,
        message: str,
        source: LineSource,
        sink: EventSink,
    ) -> bool:
        messages = [message]
        previous: Optional[str] = None

        while True:
            next_line = source.pull_line()
            if next_line is None:
                logger.debug(
                    f"Output ended before the caret of {file_path}:{line_number}"
                )
                return False
            if next_line.strip() == CARET:
                break
            if next_line.endswith(OUT_OF_MEMORY_MARKER):
                logger.debug(
                    f"Dropping {file_path}:{line_number}, compiler ran out of memory"
                )
                source.push_back(next_line)
                return False
            if previous is not None:
                messages.append(previous)
            previous = next_line

        excerpt = previous if previous is not None else source_line
        column = column_number(excerpt, next_line.find(CARET), self.state.tab_width)

        while True:
            explanation = source.pull_line()
            if not is_message_continuation(explanation):
                if explanation is not None:
                    source.push_back(explanation)
                break
            messages.append(explanation.strip())

        messages = merge_symbol_line(messages)
        self._emit(
            sink,
            Diagnostic(
                severity,
                "\n".join(messages),
                Location(file=file_path, line=line_number, column=column),
            ),
        )
        return True

    def _file_exists(self, file_path: str) -> bool:
        if not file_path:
            return False
        path = Path(file_path)
        if not path.is_absolute() and self.config.base_dir is not None:
            path = self.config.base_dir / path
        try:
            return path.exists()
        except OSError:
            return False

    @staticmethod
    def _emit(sink: EventSink, diagnostic: Diagnostic) -> None:
        location = diagnostic.location
        if location is None:
            sink.on_diagnostic(diagnostic.severity, diagnostic.message, None, None, None)
            return
        sink.on_diagnostic(
            diagnostic.severity,
            diagnostic.message,
            location.file,
            location.line,
            location.column_number,
        )
