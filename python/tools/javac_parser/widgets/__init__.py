"""
Widget modules for the javac output parser.

This module provides widgets for processing, formatting, and reporting javac output.
"""

from .formatter import ConsoleFormatterWidget
from .processor import JavacProcessorWidget
from .main_widget import JavacParserWidget

__all__ = [
    'ConsoleFormatterWidget',
    'JavacProcessorWidget',
    'JavacParserWidget'
]
