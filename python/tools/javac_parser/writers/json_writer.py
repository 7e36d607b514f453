"""
JSON output writer.

This module provides functionality to write parsed javac output to JSON format.
"""

import json
from pathlib import Path

from loguru import logger

from ..core.data_structures import ParsedOutput


class JsonWriter:
    """Writer for JSON output format."""

    def write(self, parsed_output: ParsedOutput, output_path: Path) -> None:
        """Write parsed output to a JSON file."""
        data = parsed_output.to_dict()
        with output_path.open("w", encoding="utf-8") as json_file:
            json.dump(data, json_file, indent=2)
        logger.info(f"JSON output written to {output_path}")
