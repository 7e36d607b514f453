"""
javac output processor widget.

This module decodes recorded or live compiler output with filtering,
statistics generation, and concurrent processing of several recordings.
Every recording gets its own parser instance.
"""

import io
import re
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, TextIO, Union
from concurrent.futures import ThreadPoolExecutor, as_completed

from loguru import logger

from ..core.config import ParserConfig
from ..core.data_structures import ParsedOutput
from ..core.enums import MessageSeverity
from ..parsers.javac import JavacOutputParser
from ..streams.line_source import PushbackLineSource
from ..streams.sinks import CollectingSink


class JavacProcessorWidget:
    """Widget for decoding javac output from strings, streams and files."""

    def __init__(self, config: Optional[ParserConfig] = None):
        """Initialize the processor widget with optional parser configuration."""
        self.config = config or ParserConfig()

    def create_parser(self) -> JavacOutputParser:
        return JavacOutputParser(self.config)

    def process_lines(self, lines: Iterable[str], source: str = "<stream>") -> ParsedOutput:
        """Decode an iterable of lines, such as an open file or a process pipe."""
        sink = CollectingSink(source)
        stats = self.create_parser().parse(PushbackLineSource(lines), sink)
        if stats.unhandled:
            logger.debug(f"{source}: {stats.unhandled} incomplete diagnostics dropped")
        return sink.output

    def process_string(self, output: str, source: str = "<string>") -> ParsedOutput:
        """Decode compiler output held in a string."""
        return self.process_lines(io.StringIO(output, newline=""), source)

    def process_stream(self, stream: TextIO, source: str = "<stream>") -> ParsedOutput:
        """Decode a text stream line by line as it is produced."""
        return self.process_lines(stream, source)

    def process_file(self, file_path: Union[str, Path]) -> ParsedOutput:
        """Decode a file containing recorded compiler output."""
        file_path = Path(file_path)

        logger.info(f"Processing file: {file_path}")

        try:
            with file_path.open("r", encoding="utf-8") as file:
                return self.process_lines(file, str(file_path))
        except FileNotFoundError:
            logger.error(f"File not found: {file_path}")
            raise
        except Exception as e:
            logger.error(f"Error processing file {file_path}: {e}")
            raise

    def process_files(
        self, file_paths: List[Union[str, Path]], concurrency: int = 4
    ) -> List[ParsedOutput]:
        """Decode multiple files concurrently; failed files are logged and skipped."""
        results = []
        file_paths = [Path(p) for p in file_paths]

        with ThreadPoolExecutor(max_workers=concurrency) as executor:
            futures = {
                executor.submit(self.process_file, file_path): file_path
                for file_path in file_paths
            }

            for future in as_completed(futures):
                file_path = futures[future]
                try:
                    results.append(future.result())
                    logger.info(f"Successfully processed {file_path}")
                except Exception as e:
                    logger.error(f"Failed to process {file_path}: {e}")

        # as_completed yields in completion order
        order = {str(p): i for i, p in enumerate(file_paths)}
        results.sort(key=lambda output: order.get(output.source, len(order)))
        return results

    def filter_messages(
        self,
        parsed_output: ParsedOutput,
        severities: Optional[List[MessageSeverity]] = None,
        file_pattern: Optional[str] = None,
    ) -> ParsedOutput:
        """Filter messages by severity and/or file pattern. Unlocated messages never match a pattern."""
        if not severities and not file_pattern:
            return parsed_output

        filtered = ParsedOutput(
            source=parsed_output.source,
            processed_files=list(parsed_output.processed_files),
            generated_files=list(parsed_output.generated_files),
            progress=list(parsed_output.progress),
        )

        pattern = re.compile(file_pattern) if file_pattern else None
        for msg in parsed_output.messages:
            severity_match = not severities or msg.severity in severities
            file_match = pattern is None or (
                msg.file is not None and pattern.search(msg.file) is not None
            )
            if severity_match and file_match:
                filtered.add_message(msg)

        return filtered

    def combine_outputs(
        self, parsed_outputs: List[ParsedOutput]
    ) -> Optional[ParsedOutput]:
        """Combine multiple parsed outputs into a single one."""
        if not parsed_outputs:
            return None

        combined = ParsedOutput(
            source=", ".join(output.source for output in parsed_outputs)
        )
        for output in parsed_outputs:
            combined.messages.extend(output.messages)
            combined.processed_files.extend(output.processed_files)
            combined.generated_files.extend(output.generated_files)
            combined.progress.extend(output.progress)

        return combined

    def generate_statistics(self, parsed_outputs: List[ParsedOutput]) -> Dict[str, Any]:
        """Generate statistics from a list of parsed outputs."""
        stats = {
            "total_files": len(parsed_outputs),
            "total_messages": 0,
            "by_severity": {"error": 0, "warning": 0, "info": 0},
            "files_with_errors": 0,
            "files_processed": 0,
            "files_generated": 0,
        }

        for output in parsed_outputs:
            errors = len(output.errors)
            warnings = len(output.warnings)
            infos = len(output.infos)

            stats["total_messages"] += errors + warnings + infos
            stats["by_severity"]["error"] += errors
            stats["by_severity"]["warning"] += warnings
            stats["by_severity"]["info"] += infos
            stats["files_processed"] += len(output.processed_files)
            stats["files_generated"] += len(output.generated_files)

            if errors > 0:
                stats["files_with_errors"] += 1

        return stats
