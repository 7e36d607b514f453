"""
Core module for the javac output parser.

This module contains the fundamental data structures, enums, exceptions and
configuration used throughout the parser.
"""

from .enums import (
    ActionKind,
    LifecycleKind,
    MessageCategory,
    MessageSeverity,
    OutputFormat,
    PathKind,
)
from .data_structures import (
    CompiledRule,
    CompilerMessage,
    Diagnostic,
    Location,
    ParsedOutput,
    ParserAction,
    ParserState,
    ParseStatistics,
)
from .exceptions import (
    ConfigurationError,
    JavacParserException,
    PushbackError,
    TemplateError,
)
from .config import ParserConfig

__all__ = [
    "ActionKind",
    "LifecycleKind",
    "MessageCategory",
    "MessageSeverity",
    "OutputFormat",
    "PathKind",
    "CompiledRule",
    "CompilerMessage",
    "Diagnostic",
    "Location",
    "ParsedOutput",
    "ParserAction",
    "ParserState",
    "ParseStatistics",
    "ConfigurationError",
    "JavacParserException",
    "PushbackError",
    "TemplateError",
    "ParserConfig",
]
