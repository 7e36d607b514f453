"""
Main javac parser widget.

This module provides the widget that orchestrates decoding, filtering,
reporting and console display of javac output.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from loguru import logger

from ..core.config import ParserConfig
from ..core.data_structures import ParsedOutput
from ..core.enums import MessageSeverity, OutputFormat
from ..writers.factory import WriterFactory
from .formatter import ConsoleFormatterWidget
from .processor import JavacProcessorWidget

SeverityFilter = Optional[Sequence[Union[MessageSeverity, str]]]


def resolve_severities(filter_severities: SeverityFilter) -> Optional[List[MessageSeverity]]:
    """Convert string severities to enum values."""
    if not filter_severities:
        return None
    return [
        MessageSeverity.from_string(sev) if isinstance(sev, str) else sev
        for sev in filter_severities
    ]


class JavacParserWidget:
    """Main widget for orchestrating javac output decoding and reporting."""

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or ParserConfig()
        self.processor = JavacProcessorWidget(self.config)
        self.formatter = ConsoleFormatterWidget()

    def _apply_filters(
        self,
        parsed_output: ParsedOutput,
        filter_severities: SeverityFilter,
        file_pattern: Optional[str],
    ) -> ParsedOutput:
        if not filter_severities and not file_pattern:
            return parsed_output
        return self.processor.filter_messages(
            parsed_output,
            severities=resolve_severities(filter_severities),
            file_pattern=file_pattern,
        )

    def parse_from_string(
        self,
        output: str,
        filter_severities: SeverityFilter = None,
        file_pattern: Optional[str] = None,
    ) -> ParsedOutput:
        """Parse javac output from a string."""
        parsed = self.processor.process_string(output)
        return self._apply_filters(parsed, filter_severities, file_pattern)

    def parse_from_file(
        self,
        file_path: Union[str, Path],
        filter_severities: SeverityFilter = None,
        file_pattern: Optional[str] = None,
    ) -> ParsedOutput:
        """Parse javac output from a file."""
        parsed = self.processor.process_file(file_path)
        return self._apply_filters(parsed, filter_severities, file_pattern)

    def parse_from_files(
        self,
        file_paths: List[Union[str, Path]],
        filter_severities: SeverityFilter = None,
        file_pattern: Optional[str] = None,
        concurrency: int = 4,
        combine_outputs: bool = True,
    ) -> Union[ParsedOutput, List[ParsedOutput]]:
        """Parse javac output from multiple files."""
        parsed_outputs = [
            self._apply_filters(output, filter_severities, file_pattern)
            for output in self.processor.process_files(file_paths, concurrency)
        ]

        if combine_outputs:
            combined = self.processor.combine_outputs(parsed_outputs)
            return combined if combined else ParsedOutput(source="<none>")

        return parsed_outputs

    def write_output(
        self,
        parsed_output: ParsedOutput,
        output_format: Union[OutputFormat, str],
        output_path: Union[str, Path],
    ) -> None:
        """Write parsed output to a file in the specified format."""
        writer = WriterFactory.create_writer(output_format)
        writer.write(parsed_output, Path(output_path))

    def display_output(self, parsed_output: ParsedOutput, colorize: bool = True) -> None:
        """Display parsed output on the console."""
        if colorize:
            self.formatter.colorize_output(parsed_output)
        else:
            print(self.formatter.get_formatted_output(parsed_output))

    def generate_statistics(self, parsed_outputs: List[ParsedOutput]) -> Dict[str, Any]:
        return self.processor.generate_statistics(parsed_outputs)

    def process_and_export(
        self,
        input_files: List[Union[str, Path]],
        output_format: Union[OutputFormat, str],
        output_path: Union[str, Path],
        filter_severities: SeverityFilter = None,
        file_pattern: Optional[str] = None,
        concurrency: int = 4,
        display_stats: bool = False,
        display_output: bool = False,
        colorize: bool = True,
    ) -> ParsedOutput:
        """Complete pipeline: parse, filter, combine, export and optionally display."""
        individual_outputs = self.parse_from_files(
            input_files,
            filter_severities,
            file_pattern,
            concurrency,
            combine_outputs=False,
        )
        if not isinstance(individual_outputs, list):
            raise ValueError("Failed to process input files")

        combined = self.processor.combine_outputs(individual_outputs)
        if combined is None:
            raise ValueError("None of the input files could be processed")

        self.write_output(combined, output_format, output_path)
        logger.debug(f"Exported {len(combined.messages)} messages to {output_path}")

        if display_stats:
            stats = self.generate_statistics(individual_outputs)
            print("\nStatistics:")
            print(json.dumps(stats, indent=4))

        if display_output:
            self.display_output(combined, colorize=colorize)

        return combined
