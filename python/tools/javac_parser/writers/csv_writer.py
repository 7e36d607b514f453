"""
CSV output writer.

This module provides functionality to write parsed javac messages to CSV format.
"""

import csv
from pathlib import Path

from loguru import logger

from ..core.data_structures import ParsedOutput

FIELDNAMES = ["source", "file", "line", "column", "severity", "message"]


class CsvWriter:
    """Writer for CSV output format. One row per message; file events are not exported."""

    def write(self, parsed_output: ParsedOutput, output_path: Path) -> None:
        """Write parsed messages to a CSV file."""
        data = []
        for msg in parsed_output.messages:
            row = msg.to_dict()
            # Unlocated messages leave these columns empty
            row.setdefault("file", None)
            row.setdefault("line", None)
            row.setdefault("column", None)
            row["source"] = parsed_output.source
            data.append(row)

        with output_path.open("w", newline="", encoding="utf-8") as csvfile:
            writer = csv.DictWriter(
                csvfile, fieldnames=FIELDNAMES, extrasaction="ignore"
            )
            writer.writeheader()
            writer.writerows(data)
        logger.info(f"CSV output written to {output_path}")
