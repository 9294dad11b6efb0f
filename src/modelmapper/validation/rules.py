"""Diagnostic rules and the diagnostics they produce."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from modelmapper.symbols import SourceLocation


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True, slots=True)
class DiagnosticDescriptor:
    """A rule: stable id, severity and a message template."""

    id: str
    title: str
    message_format: str
    description: str
    category: str
    severity: Severity

    def create(self, location: SourceLocation, *args: Any) -> Diagnostic:
        return Diagnostic(self, location, self.message_format.format(*args))


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One finding, anchored to a declaration (and argument, when known)."""

    descriptor: DiagnosticDescriptor
    location: SourceLocation
    message: str

    @property
    def id(self) -> str:
        return self.descriptor.id

    @property
    def severity(self) -> Severity:
        return self.descriptor.severity

    @property
    def is_error(self) -> bool:
        return self.descriptor.severity is Severity.ERROR

    @property
    def declaration_key(self) -> tuple[str, str]:
        return (self.location.module, self.location.qualname)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "severity": self.severity.value,
            "location": str(self.location),
            "message": self.message,
        }

    def __str__(self) -> str:
        return f"{self.location}: {self.severity.value} {self.id}: {self.message}"


TARGET_CATEGORY = "modelmapper.target"
SOURCE_CATEGORY = "modelmapper.source"

SINGLE_TARGET_PER_MODULE = DiagnosticDescriptor(
    id="MMG1",
    title="Invalid generation targets",
    message_format="There should only be a single model generation target in module {0}",
    description=(
        "Declaring more than one model generation target in a module prevents "
        "generation for that module."
    ),
    category=TARGET_CATEGORY,
    severity=Severity.ERROR,
)

RECORDS_NOT_SUPPORTED = DiagnosticDescriptor(
    id="MMG2",
    title="Records are not supported",
    message_format="Type {0} listed by a model generation target is a record, which is not supported",
    description="Record-like types (dataclasses and named tuples) are not mirrored.",
    category=SOURCE_CATEGORY,
    severity=Severity.WARNING,
)

SAME_NAME_NOT_ALLOWED = DiagnosticDescriptor(
    id="MMG3",
    title="Multiple types with the same name are not supported",
    message_format="Multiple types named {0} are listed by the same model generation target",
    description=(
        "Listing several types with the same short name on one target is not "
        "supported; move them to targets in separate modules."
    ),
    category=TARGET_CATEGORY,
    severity=Severity.ERROR,
)

OPEN_GENERICS_NOT_SUPPORTED = DiagnosticDescriptor(
    id="MMG4",
    title="Open generics are not supported",
    message_format="Type {0} listed by a model generation target is an open generic, which is not supported",
    description="Generic types must be listed as closed instantiations such as Registration[Person].",
    category=TARGET_CATEGORY,
    severity=Severity.ERROR,
)

ALL_RULES = (
    SINGLE_TARGET_PER_MODULE,
    RECORDS_NOT_SUPPORTED,
    SAME_NAME_NOT_ALLOWED,
    OPEN_GENERICS_NOT_SUPPORTED,
)
