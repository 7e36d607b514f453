"""
Exceptions raised by the javac output parser.

Decoding itself never raises on malformed compiler output; these exceptions
signal contract violations by callers and configuration problems.
"""

from typing import Any, Optional

from loguru import logger


class JavacParserException(Exception):
    """Base exception for parser-related errors."""

    def __init__(
        self, message: str, *, error_code: Optional[str] = None, **kwargs: Any
    ):
        super().__init__(message)
        self.error_code = error_code
        self.context = kwargs

        logger.error(
            f"JavacParserException: {message}",
            extra={"error_code": error_code, "context": kwargs},
        )


class PushbackError(JavacParserException):
    """Raised when a line is pushed back while the pushback slot is occupied."""

    def __init__(self, pending: str, rejected: str):
        super().__init__(
            "Pushback slot already holds a line",
            error_code="PUSHBACK_OCCUPIED",
            pending=pending,
            rejected=rejected,
        )
        self.pending = pending
        self.rejected = rejected


class TemplateError(JavacParserException):
    """Raised when a message template cannot be compiled."""

    pass


class ConfigurationError(JavacParserException):
    """Raised when parser configuration is missing or invalid."""

    pass
