"""
XML output writer.

This module provides functionality to write parsed javac output to XML format.
Terminal color sequences and characters XML 1.0 cannot carry are removed from
text content, so the report always parses back.
"""

import re
from pathlib import Path
from typing import Optional
import xml.etree.ElementTree as ET

from loguru import logger

from ..core.data_structures import ParsedOutput

ANSI_ESCAPE_PATTERN = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")
INVALID_XML_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")


def xml_safe_text(value: Optional[object]) -> Optional[str]:
    """Return ``value`` as text that is legal inside an XML 1.0 document."""
    if value is None:
        return None
    text = ANSI_ESCAPE_PATTERN.sub("", str(value))
    return INVALID_XML_CHARS.sub("", text)


class XmlWriter:
    """Writer for XML output format."""

    def write(self, parsed_output: ParsedOutput, output_path: Path) -> None:
        """Write parsed output to an XML file."""
        root = ET.Element("JavacOutput")
        metadata = ET.SubElement(root, "Metadata")
        ET.SubElement(metadata, "Source").text = xml_safe_text(parsed_output.source)
        ET.SubElement(metadata, "MessageCount").text = str(len(parsed_output.messages))

        messages_elem = ET.SubElement(root, "Messages")
        for msg in parsed_output.messages:
            msg_elem = ET.SubElement(messages_elem, "Message")
            for key, value in msg.to_dict().items():
                ET.SubElement(msg_elem, key).text = xml_safe_text(value)

        files_elem = ET.SubElement(root, "Files")
        for path in parsed_output.processed_files:
            ET.SubElement(files_elem, "Processed").text = xml_safe_text(path)
        for path in parsed_output.generated_files:
            ET.SubElement(files_elem, "Generated").text = xml_safe_text(path)

        tree = ET.ElementTree(root)
        tree.write(output_path, encoding="utf-8", xml_declaration=True)
        logger.info(f"XML output written to {output_path}")
