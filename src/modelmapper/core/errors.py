"""ModelMapper error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Discovery (front-end: importing modules, reading declarations)
- 4xxx: Generation
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Discovery (3xxx)
    DISCOVERY_IMPORT_FAILED = 3001
    DISCOVERY_INVALID_DECLARATION = 3002
    DISCOVERY_UNSUPPORTED_TYPE = 3003

    # Generation (4xxx)
    GENERATION_CANCELLED = 4001
    GENERATION_NAMESPACE_COLLISION = 4002


@dataclass(frozen=True, slots=True)
class ModelMapperError(Exception):
    """Base error with structured context for CLI and log output."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(ModelMapperError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class DiscoveryError(ModelMapperError):
    """Errors raised while reading declarations from source modules."""

    @classmethod
    def import_failed(cls, module: str, reason: str) -> "DiscoveryError":
        return cls(
            code=ErrorCode.DISCOVERY_IMPORT_FAILED,
            message=f"Could not import module '{module}': {reason}",
            details={"module": module, "reason": reason},
        )

    @classmethod
    def invalid_declaration(cls, where: str, reason: str) -> "DiscoveryError":
        return cls(
            code=ErrorCode.DISCOVERY_INVALID_DECLARATION,
            message=f"Invalid generation target on {where}: {reason}",
            details={"location": where, "reason": reason},
        )

    @classmethod
    def unsupported_type(cls, type_name: str, reason: str) -> "DiscoveryError":
        return cls(
            code=ErrorCode.DISCOVERY_UNSUPPORTED_TYPE,
            message=f"Type '{type_name}' cannot be used as a generation source: {reason}",
            details={"type": type_name, "reason": reason},
        )


class GenerationError(ModelMapperError):
    """Errors raised by the generation pipeline."""

    @classmethod
    def cancelled(cls, completed_targets: int) -> "GenerationError":
        return cls(
            code=ErrorCode.GENERATION_CANCELLED,
            message=f"Generation cancelled after {completed_targets} target(s)",
            retryable=True,
            details={"completed_targets": completed_targets},
        )

    @classmethod
    def namespace_collision(cls, namespaces: list[str]) -> "GenerationError":
        return cls(
            code=ErrorCode.GENERATION_NAMESPACE_COLLISION,
            message="Multiple generation targets share a destination namespace: "
            + ", ".join(namespaces),
            details={"namespaces": namespaces},
        )

