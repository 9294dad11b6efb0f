"""Target descriptor: one declaration and the types it lists."""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from modelmapper.descriptors.types import TypeDescriptor
from modelmapper.symbols import SourceLocation, TargetDeclaration

log = structlog.get_logger(__name__)


@dataclass(eq=False, slots=True)
class TargetDescriptor:
    """Destination namespace plus the de-duplicated listed types.

    ``related_types`` holds the fully-qualified display names of every kept
    type, in listing order; a property whose type appears there is mirrored
    through a nested mapper call.
    """

    target_namespace: str
    contained_types: tuple[TypeDescriptor, ...] = ()
    related_types: tuple[str, ...] = ()
    name: str = ""
    location: SourceLocation = field(default_factory=lambda: SourceLocation("", ""))

    @classmethod
    def create(cls, declaration: TargetDeclaration) -> TargetDescriptor:
        related: list[str] = []
        contained: list[TypeDescriptor] = []
        for info in declaration.types:
            if info.display_name in related:
                continue
            descriptor = TypeDescriptor.create(info)
            if descriptor is None:
                log.debug(
                    "type_skipped",
                    type=info.display_name,
                    target=declaration.namespace,
                    reason="no members",
                )
                continue
            contained.append(descriptor)
            related.append(info.display_name)

        return cls(
            target_namespace=declaration.namespace,
            contained_types=tuple(contained),
            related_types=tuple(related),
            name=declaration.name,
            location=declaration.location,
        )

    def find(self, display_name: str) -> TypeDescriptor | None:
        for descriptor in self.contained_types:
            if descriptor.display_name == display_name:
                return descriptor
        return None

    def is_related(self, display_name: str) -> bool:
        return display_name in self.related_types

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TargetDescriptor):
            return NotImplemented
        if self is other:
            return True
        return (
            self.target_namespace == other.target_namespace
            and self.related_types == other.related_types
            and self.contained_types == other.contained_types
        )

    def __hash__(self) -> int:
        return hash((self.target_namespace, self.related_types))
