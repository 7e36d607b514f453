"""
Utility modules for the javac output parser.

This module provides logging setup and CLI support.
"""

from .cli import build_config, main_cli, parse_args, setup_logging

__all__ = [
    'build_config',
    'main_cli',
    'parse_args',
    'setup_logging',
]
