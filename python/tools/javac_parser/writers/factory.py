"""
Writer factory.

Maps report formats to writer classes; the CLI builds its ``--output-format``
choices from the same table.
"""

from typing import Dict, List, Type, Union

from ..core.enums import OutputFormat
from .base import OutputWriter
from .json_writer import JsonWriter
from .csv_writer import CsvWriter
from .xml_writer import XmlWriter

_WRITERS: Dict[OutputFormat, Type[OutputWriter]] = {
    OutputFormat.JSON: JsonWriter,
    OutputFormat.CSV: CsvWriter,
    OutputFormat.XML: XmlWriter,
}


class WriterFactory:
    """Factory for report writer instances."""

    @staticmethod
    def supported_formats() -> List[str]:
        return [fmt.name.lower() for fmt in _WRITERS]

    @staticmethod
    def create_writer(format_type: Union[OutputFormat, str]) -> OutputWriter:
        """Create the writer for the given report format."""
        if isinstance(format_type, str):
            format_type = OutputFormat.from_string(format_type)

        writer_cls = _WRITERS.get(format_type)
        if writer_cls is None:
            raise ValueError(f"Unsupported output format: {format_type}")
        return writer_cls()
