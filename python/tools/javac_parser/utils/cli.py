"""
Command-line interface utilities.

This module provides CLI argument parsing, logging setup and the main function
for command-line operation.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from loguru import logger

from ..core.config import ParserConfig
from ..core.exceptions import ConfigurationError
from ..parsers.javac import JavacOutputParser
from ..streams.line_source import PushbackLineSource
from ..streams.sinks import LoggingSink
from ..widgets.main_widget import JavacParserWidget
from ..writers.factory import WriterFactory

STDIN_MARKER = "-"


def setup_logging(verbose: bool = False) -> None:
    """Replace the default loguru handler with a stderr sink."""
    logger.remove()

    if verbose:
        log_level = "DEBUG"
        log_format = (
            "<green>{time:HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        )
    else:
        log_level = "INFO"
        log_format = "<level>{level: <8}</level> | <level>{message}</level>"

    logger.add(sys.stderr, level=log_level, format=log_format, colorize=True)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Decode javac output into structured diagnostics and reports.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Report a recorded build log as JSON
  javac-parser build.log --output-format json

  # Only errors and warnings from files under src/main
  javac-parser build.log --filter error warning --file-pattern '^src/main/'

  # Follow a running compiler
  javac -J-Xmx512m -d out $(find src -name '*.java') 2>&1 | javac-parser -
""",
    )

    parser.add_argument(
        "file_paths",
        nargs="+",
        help="Files with recorded javac output, or '-' to follow standard input.",
    )

    parser.add_argument(
        "--output-format",
        choices=WriterFactory.supported_formats(),
        default="json",
        help="Report format (default: json).",
    )

    parser.add_argument(
        "--output-file",
        default="javac_output",
        help="Base name of the report file without extension (default: javac_output).",
    )

    parser.add_argument(
        "--output-dir",
        default=".",
        help="Directory for report files (default: current directory).",
    )

    parser.add_argument(
        "--filter",
        nargs="*",
        choices=["error", "warning", "info"],
        help="Filter by message severity types.",
    )

    parser.add_argument(
        "--file-pattern", help="Regular expression to filter messages by source file."
    )

    parser.add_argument(
        "--stats", action="store_true", help="Print statistics after processing."
    )

    parser.add_argument(
        "--verbose", action="store_true", help="Enable verbose logging output."
    )

    parser.add_argument(
        "--concurrency",
        type=int,
        default=4,
        help="Number of concurrent threads for processing files (default: 4).",
    )

    parser.add_argument(
        "--no-color", action="store_true", help="Disable colorized output."
    )

    config_group = parser.add_argument_group("Parser options")
    config_group.add_argument(
        "--config", type=Path, help="JSON file with parser settings."
    )
    config_group.add_argument(
        "--tab-width", type=int, help="Tab width used to compute caret columns."
    )
    config_group.add_argument(
        "--base-dir",
        type=Path,
        help="Directory relative source paths in diagnostics are resolved against.",
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> ParserConfig:
    """Merge the optional config file with command-line overrides."""
    config = ParserConfig.from_file(args.config) if args.config else ParserConfig()

    overrides = {}
    if args.tab_width is not None:
        overrides["tab_width"] = args.tab_width
    if args.base_dir is not None:
        overrides["base_dir"] = args.base_dir
    if overrides:
        config = ParserConfig.from_dict({**config.model_dump(), **overrides})
    return config


def follow_stream(stream: TextIO, config: ParserConfig) -> int:
    """Decode a live stream, logging events as they arrive."""
    sink = LoggingSink()
    stats = JavacOutputParser(config).parse(PushbackLineSource(stream), sink)
    logger.info(f"Decoded {stats.lines} lines, {sink.error_count} errors")
    return 1 if sink.error_count else 0


def main_cli(argv: Optional[List[str]] = None) -> int:
    """Main function for command-line operation."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = build_config(args)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    if args.file_paths == [STDIN_MARKER]:
        return follow_stream(sys.stdin, config)

    logger.info(f"Decoding {len(args.file_paths)} javac output file(s)")

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / f"{args.output_file}.{args.output_format.lower()}"

    widget = JavacParserWidget(config)

    try:
        result = widget.process_and_export(
            input_files=args.file_paths,
            output_format=args.output_format,
            output_path=output_path,
            filter_severities=args.filter,
            file_pattern=args.file_pattern,
            concurrency=args.concurrency,
            display_stats=args.stats,
            display_output=True,
            colorize=not args.no_color,
        )

        print(f"\nOutput saved to: {output_path}")

        if result.messages:
            print(f"Processed {len(result.messages)} messages successfully.")
        else:
            print("No compiler messages found or all messages were filtered out.")

    except Exception as e:
        logger.error(f"Error processing javac output: {e}")
        return 1

    return 0
