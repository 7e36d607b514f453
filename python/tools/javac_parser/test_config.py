import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from .core.config import ParserConfig
from .core.exceptions import ConfigurationError


def test_defaults():
    config = ParserConfig()
    assert config.tab_width == 4
    assert config.warning_prefix == "warning:"
    assert config.source_extension == "java"
    assert config.artifact_extension == "class"
    assert config.base_dir is None


def test_extensions_are_normalized():
    config = ParserConfig(source_extension=".SRC", artifact_extension=" Bin ")
    assert config.source_extension == "src"
    assert config.artifact_extension == "bin"


@pytest.mark.parametrize(
    "field, value",
    [
        ("tab_width", 0),
        ("source_extension", "."),
        ("warning_prefix", ""),
        ("unknown_option", True),
    ],
)
def test_invalid_values_are_rejected(field, value):
    with pytest.raises(ValidationError):
        ParserConfig(**{field: value})


def test_assignment_is_validated():
    config = ParserConfig()
    with pytest.raises(ValidationError):
        config.tab_width = -2


def test_from_dict_wraps_validation_errors():
    with pytest.raises(ConfigurationError) as exc_info:
        ParserConfig.from_dict({"tab_width": "wide"})
    assert exc_info.value.error_code == "INVALID_CONFIG"


def test_from_file(tmp_path):
    config_file = tmp_path / "parser.json"
    config_file.write_text(
        json.dumps({"tab_width": 8, "base_dir": str(tmp_path)}), encoding="utf-8"
    )
    config = ParserConfig.from_file(config_file)
    assert config.tab_width == 8
    assert config.base_dir == Path(tmp_path)


def test_from_file_missing(tmp_path):
    with pytest.raises(ConfigurationError) as exc_info:
        ParserConfig.from_file(tmp_path / "absent.json")
    assert exc_info.value.error_code == "CONFIG_NOT_FOUND"


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_from_file_invalid_content(tmp_path, content):
    config_file = tmp_path / "parser.json"
    config_file.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigurationError) as exc_info:
        ParserConfig.from_file(config_file)
    assert exc_info.value.error_code == "INVALID_CONFIG"
