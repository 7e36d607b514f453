"""
Configuration model for the javac output parser.

Uses Pydantic v2 for validation so that configuration coming from JSON files
or the command line is checked before a parser is constructed.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .data_structures import DEFAULT_WARNING_PREFIX
from .exceptions import ConfigurationError


class ParserConfig(BaseModel):
    """Settings for one parser instance."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    tab_width: int = Field(
        default=4, ge=1, description="Display width of a tab in column computation"
    )
    warning_prefix: str = Field(
        default=DEFAULT_WARNING_PREFIX,
        min_length=1,
        description="Initial prefix that demotes a located message to a warning",
    )
    source_extension: str = Field(
        default="java", description="Extension of compiled source files"
    )
    artifact_extension: str = Field(
        default="class", description="Extension of generated artifacts"
    )
    base_dir: Optional[Path] = Field(
        default=None,
        description="Directory relative diagnostic paths are resolved against",
    )

    @field_validator("source_extension", "artifact_extension")
    @classmethod
    def normalize_extension(cls, v: str) -> str:
        """Lowercase the extension and drop a leading dot."""
        normalized = v.strip().lower().lstrip(".")
        if not normalized:
            raise ValueError("extension must not be empty")
        return normalized

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ParserConfig:
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid parser configuration: {e}",
                error_code="INVALID_CONFIG",
                validation_error=str(e),
            ) from e

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> ParserConfig:
        """
        Load configuration from a JSON file.

        Args:
            file_path: Path to the JSON file

        Returns:
            Validated ParserConfig

        Raises:
            ConfigurationError: If the file is missing, unreadable or invalid
        """
        path = Path(file_path)

        if not path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {path}",
                error_code="CONFIG_NOT_FOUND",
                file_path=str(path),
            )

        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in configuration file {path}: {e}",
                error_code="INVALID_CONFIG",
                file_path=str(path),
                json_error=str(e),
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {path} must contain a JSON object",
                error_code="INVALID_CONFIG",
                file_path=str(path),
            )

        logger.debug(f"Loaded parser configuration from {path}")
        return cls.from_dict(data)
