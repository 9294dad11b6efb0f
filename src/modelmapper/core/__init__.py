"""Core module exports."""

from modelmapper.core.errors import (
    ConfigError,
    DiscoveryError,
    ErrorCode,
    GenerationError,
    ModelMapperError,
)
from modelmapper.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)
from modelmapper.core.progress import pluralize, spinner, status

__all__ = [
    # Errors
    "ConfigError",
    "DiscoveryError",
    "ErrorCode",
    "GenerationError",
    "ModelMapperError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
    # Progress
    "pluralize",
    "spinner",
    "status",
]
