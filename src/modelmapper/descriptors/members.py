"""Member descriptors: one class property or one enum constant.

Both compare structurally so that an unchanged type produces equal
descriptors across two generation passes, whatever objects they came from.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from modelmapper.symbols import ConstantInfo, PropertyInfo, TypeKind, TypeRef


@dataclass(frozen=True, slots=True, eq=False)
class PropertyDescriptor:
    """A class property, normalized for generation.

    ``return_type`` is the non-null type; ``is_nullable`` remembers whether the
    source declared ``X | None``. ``generic_position`` is set when the declared
    type is one of the declaring type's own parameters, and becomes the
    synthesized parameter ``T{position}`` of a generic model.

    ``related_namespaces`` is filled in after construction by the relation
    resolver and does not take part in equality.
    """

    name: str
    return_type: TypeRef
    is_nullable: bool = False
    has_public_getter: bool = True
    has_public_setter: bool = True
    generic_position: int | None = None
    related_namespaces: set[str] = field(default_factory=set)

    @classmethod
    def from_info(cls, info: PropertyInfo, generic_position: int | None = None) -> PropertyDescriptor:
        return cls(
            name=info.name,
            return_type=info.type,
            is_nullable=info.nullable,
            has_public_getter=info.has_public_getter,
            has_public_setter=info.has_public_setter,
            generic_position=generic_position,
        )

    @property
    def return_type_name(self) -> str:
        return self.return_type.name

    @property
    def return_type_namespace(self) -> str:
        return self.return_type.namespace

    @property
    def return_type_fully_qualified_name(self) -> str:
        return self.return_type.display_name

    @property
    def return_type_kind(self) -> TypeKind:
        return self.return_type.kind

    @property
    def is_parameter_positional(self) -> bool:
        return self.generic_position is not None

    def mark_related(self, namespace: str) -> None:
        self.related_namespaces.add(namespace)

    def is_related_in(self, namespace: str) -> bool:
        return namespace in self.related_namespaces

    def _key(self) -> tuple[Any, ...]:
        return (
            self.name,
            self.has_public_getter,
            self.has_public_setter,
            self.return_type_name,
            self.return_type_namespace,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PropertyDescriptor):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())


@dataclass(frozen=True, slots=True, eq=False)
class ConstantDescriptor:
    """An enum constant and, when it has a literal form, its value."""

    name: str
    value: Any = None

    @classmethod
    def from_info(cls, info: ConstantInfo) -> ConstantDescriptor:
        return cls(name=info.name, value=info.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConstantDescriptor):
            return NotImplemented
        return self.name == other.name and self.value == other.value

    def __hash__(self) -> int:
        # Literal values may be unhashable (lists, dicts)
        return hash((self.name, repr(self.value)))
