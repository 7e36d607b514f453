"""
Report writers.

Exports a ParsedOutput as JSON (full output), CSV (messages only) or XML.
"""

from .base import OutputWriter
from .csv_writer import CsvWriter
from .factory import WriterFactory
from .json_writer import JsonWriter
from .xml_writer import XmlWriter

__all__ = [
    "OutputWriter",
    "CsvWriter",
    "JsonWriter",
    "WriterFactory",
    "XmlWriter",
]
