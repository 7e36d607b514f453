"""
Console formatter widget.

This module formats parsed javac output for console display with colorized
output based on message severity.
"""

from termcolor import colored

from ..core.data_structures import CompilerMessage, ParsedOutput
from ..core.enums import MessageSeverity


class ConsoleFormatterWidget:
    """Widget for formatting parsed javac output for console display."""

    def __init__(self):
        self.color_map = {
            MessageSeverity.ERROR: "red",
            MessageSeverity.WARNING: "yellow",
            MessageSeverity.INFO: "blue",
        }

        self.prefix_map = {
            MessageSeverity.ERROR: "ERROR",
            MessageSeverity.WARNING: "WARNING",
            MessageSeverity.INFO: "INFO",
        }

    def format_summary(self, parsed_output: ParsedOutput) -> str:
        """Format a summary of parsed output."""
        lines = [
            "\njavac Output Summary:",
            f"Source: {parsed_output.source}",
            f"Total Messages: {len(parsed_output.messages)}",
            f"Errors: {len(parsed_output.errors)}",
            f"Warnings: {len(parsed_output.warnings)}",
            f"Info: {len(parsed_output.infos)}",
            f"Files Processed: {len(parsed_output.processed_files)}",
            f"Files Generated: {len(parsed_output.generated_files)}",
        ]
        return "\n".join(lines)

    def format_plain(self, msg: CompilerMessage) -> str:
        """Format a single message without color."""
        prefix = self.prefix_map.get(msg.severity, "UNKNOWN")
        if msg.file is None:
            return f"{prefix}: {msg.message}"

        location = f"{msg.file}:{msg.line}"
        if msg.column is not None:
            location += f":{msg.column}"
        return f"{prefix}: {location} - {msg.message}"

    def format_message(self, msg: CompilerMessage) -> str:
        """Format a single message with color."""
        return colored(self.format_plain(msg), self.color_map.get(msg.severity, "white"))

    def colorize_output(self, parsed_output: ParsedOutput) -> None:
        """Print parsed output with colorized formatting based on message severity."""
        print(self.format_summary(parsed_output))
        print("\nMessages:")

        for msg in parsed_output.messages:
            print(self.format_message(msg))

    def get_formatted_output(self, parsed_output: ParsedOutput) -> str:
        """Get formatted output as a string without colors."""
        lines = [self.format_summary(parsed_output), "\nMessages:"]
        lines.extend(self.format_plain(msg) for msg in parsed_output.messages)
        return "\n".join(lines)
