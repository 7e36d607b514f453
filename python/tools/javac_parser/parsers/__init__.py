"""
Parser modules for javac output.

This module provides the template compiler, the pattern registry, path and
column decoding, and the main output parser.
"""

from .columns import column_number
from .javac import JavacOutputParser, merge_symbol_line
from .paths import DecodedPath, decode_path
from .registry import (
    CATEGORY_VALUE_DIVIDER,
    PATTERNS_END,
    PATTERNS_START,
    BootstrapBlock,
    create_action,
    find_action,
    read_bootstrap_block,
)
from .templates import compile_template

__all__ = [
    'column_number',
    'JavacOutputParser',
    'merge_symbol_line',
    'DecodedPath',
    'decode_path',
    'CATEGORY_VALUE_DIVIDER',
    'PATTERNS_END',
    'PATTERNS_START',
    'BootstrapBlock',
    'create_action',
    'find_action',
    'read_bootstrap_block',
    'compile_template',
]
