"""
Base writer interface.

This module defines the protocol that all report writers must implement.
"""

from typing import Protocol
from pathlib import Path
from ..core.data_structures import ParsedOutput


class OutputWriter(Protocol):
    """Protocol defining interface for report writers."""
    
    def write(self, parsed_output: ParsedOutput, output_path: Path) -> None:
        """Write the parsed output to the specified path."""
        ...
