"""
javac Output Parser

This package decodes the line-oriented output of a javac process into
structured events: errors, warnings and informational messages with source
locations, plus "file processed" and "file generated" notifications.

Features:
- Streaming, pull-based decoding with one line of lookahead
- Message grammar declared by the compiler at runtime (pattern blocks)
- Multi-line diagnostics with tab-aware caret column resolution
- Decoding of decorated and module-qualified file paths
- JSON, CSV and XML reports, colorized console output
- Concurrent processing of recorded build logs
"""

from typing import Any, Dict, List, Optional, Sequence, Union

from .core import (
    ConfigurationError,
    CompilerMessage,
    Diagnostic,
    JavacParserException,
    Location,
    MessageCategory,
    MessageSeverity,
    OutputFormat,
    ParsedOutput,
    ParserConfig,
    PushbackError,
    TemplateError,
)

from .parsers import JavacOutputParser, column_number, compile_template, decode_path

from .streams import (
    CollectingSink,
    EventSink,
    LineSource,
    LoggingSink,
    PushbackLineSource,
)

from .writers import OutputWriter, WriterFactory

from .widgets import (
    ConsoleFormatterWidget,
    JavacProcessorWidget,
    JavacParserWidget,
)

from .utils import parse_args, main_cli


def _make_widget(tab_width: Optional[int]) -> JavacParserWidget:
    config = ParserConfig() if tab_width is None else ParserConfig(tab_width=tab_width)
    return JavacParserWidget(config)


def parse_javac_output(
    output: str,
    filter_severities: Optional[Sequence[str]] = None,
    tab_width: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Parse javac output and return structured data.

    Args:
        output: The raw compiler output to parse
        filter_severities: Optional list of severities to include (error, warning, info)
        tab_width: Tab width used for caret columns (default from ParserConfig)

    Returns:
        Dictionary with messages, processed files and generated files
    """
    widget = _make_widget(tab_width)
    severities: Optional[List[Union[MessageSeverity, str]]] = None
    if filter_severities is not None:
        severities = [str(s) for s in filter_severities]

    return widget.parse_from_string(output, severities).to_dict()


def parse_javac_file(
    file_path: str,
    filter_severities: Optional[Sequence[str]] = None,
    tab_width: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Parse javac output recorded in a file and return structured data.

    Args:
        file_path: Path to the file containing compiler output
        filter_severities: Optional list of severities to include (error, warning, info)
        tab_width: Tab width used for caret columns (default from ParserConfig)

    Returns:
        Dictionary with messages, processed files and generated files
    """
    widget = _make_widget(tab_width)
    severities: Optional[List[Union[MessageSeverity, str]]] = None
    if filter_severities is not None:
        severities = [str(s) for s in filter_severities]

    return widget.parse_from_file(file_path, severities).to_dict()


__all__ = [
    "ConfigurationError",
    "CompilerMessage",
    "Diagnostic",
    "JavacParserException",
    "Location",
    "MessageCategory",
    "MessageSeverity",
    "OutputFormat",
    "ParsedOutput",
    "ParserConfig",
    "PushbackError",
    "TemplateError",
    "JavacOutputParser",
    "column_number",
    "compile_template",
    "decode_path",
    "CollectingSink",
    "EventSink",
    "LineSource",
    "LoggingSink",
    "PushbackLineSource",
    "OutputWriter",
    "WriterFactory",
    "ConsoleFormatterWidget",
    "JavacProcessorWidget",
    "JavacParserWidget",
    "parse_args",
    "main_cli",
    "parse_javac_output",
    "parse_javac_file",
]
