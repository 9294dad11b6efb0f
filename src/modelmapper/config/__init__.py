"""Config module exports."""

from modelmapper.config.loader import ModelMapperSettings, load_config, resolve_output_dir
from modelmapper.config.models import (
    GenerationConfig,
    LoggingConfig,
    ModelMapperConfig,
    OutputConfig,
)

__all__ = [
    "load_config",
    "resolve_output_dir",
    "ModelMapperConfig",
    "ModelMapperSettings",
    "GenerationConfig",
    "LoggingConfig",
    "OutputConfig",
]
