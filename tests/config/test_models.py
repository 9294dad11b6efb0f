"""Tests for config/models.py module.

Covers:
- LogOutputConfig model
- LoggingConfig model
- GenerationConfig model
- OutputConfig model
- ModelMapperConfig root model
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from modelmapper.config.models import (
    GenerationConfig,
    LoggingConfig,
    LogOutputConfig,
    ModelMapperConfig,
    OutputConfig,
)


class TestLogOutputConfig:
    """Tests for LogOutputConfig model."""

    def test_defaults(self) -> None:
        config = LogOutputConfig()
        assert config.format == "console"
        assert config.destination == "stderr"
        assert config.level is None

    def test_absolute_path_destination(self) -> None:
        config = LogOutputConfig(destination="/var/log/modelmapper.log")
        assert config.destination == "/var/log/modelmapper.log"

    def test_relative_path_fails(self) -> None:
        with pytest.raises(ValidationError, match="absolute path"):
            LogOutputConfig(destination="logs/app.log")


class TestLoggingConfig:
    def test_defaults(self) -> None:
        config = LoggingConfig()
        assert config.level == "WARNING"
        assert len(config.outputs) == 1

    def test_invalid_level(self) -> None:
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")  # type: ignore[arg-type]


class TestGenerationConfig:
    def test_defaults(self) -> None:
        config = GenerationConfig()
        assert config.modules == []
        assert config.file_extension == "g.py"
        assert config.max_workers == 1
        assert config.header is True

    def test_leading_dot_stripped_from_extension(self) -> None:
        assert GenerationConfig(file_extension=".gen.py").file_extension == "gen.py"

    @pytest.mark.parametrize("extension", ["", ".", "out/g.py"])
    def test_invalid_extension(self, extension: str) -> None:
        with pytest.raises(ValidationError, match="Invalid file extension"):
            GenerationConfig(file_extension=extension)

    def test_max_workers_must_be_positive(self) -> None:
        with pytest.raises(ValidationError, match="max_workers"):
            GenerationConfig(max_workers=0)


class TestOutputConfig:
    def test_defaults(self) -> None:
        config = OutputConfig()
        assert config.directory == "generated"
        assert config.layout == "files"

    def test_invalid_layout(self) -> None:
        with pytest.raises(ValidationError):
            OutputConfig(layout="tree")  # type: ignore[arg-type]


class TestModelMapperConfig:
    def test_defaults(self) -> None:
        config = ModelMapperConfig()
        assert isinstance(config.logging, LoggingConfig)
        assert isinstance(config.generation, GenerationConfig)
        assert isinstance(config.output, OutputConfig)

    def test_from_nested_dict(self) -> None:
        config = ModelMapperConfig.model_validate(
            {"output": {"layout": "bundle"}, "generation": {"max_workers": 2}}
        )
        assert config.output.layout == "bundle"
        assert config.generation.max_workers == 2
