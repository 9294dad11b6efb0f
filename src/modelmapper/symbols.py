"""Read-only symbol model supplied by a front-end.

The generation engine never inspects Python objects directly. A front-end
(see ``modelmapper.frontend.runtime``) turns declarations and the types they
list into these value objects, and everything downstream works on them.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

BUILTINS_NAMESPACE = "builtins"


class TypeKind(str, Enum):
    """Coarse classification of a type, as far as generation cares."""

    CLASS = "class"
    ENUM = "enum"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class TypeRef:
    """A type used as a member type or as a generic type argument."""

    name: str
    namespace: str
    display_name: str
    kind: TypeKind = TypeKind.CLASS
    type_arguments: tuple[TypeRef, ...] = ()

    @property
    def is_builtin(self) -> bool:
        return self.namespace == BUILTINS_NAMESPACE

    def namespaces(self) -> Iterator[str]:
        """Every non-builtin module this reference mentions, outermost first."""
        if self.namespace and not self.is_builtin:
            yield self.namespace
        for argument in self.type_arguments:
            yield from argument.namespaces()


@dataclass(frozen=True, slots=True)
class PropertyInfo:
    """One property of a class: annotated attribute or ``property`` object.

    ``type`` is the declared type with ``None`` stripped and type parameters
    substituted by the instantiation's arguments. ``type_parameter`` names the
    declaring type's own parameter when the declared type is exactly that
    parameter.
    """

    name: str
    type: TypeRef
    nullable: bool = False
    has_public_getter: bool = True
    has_public_setter: bool = True
    type_parameter: str | None = None


@dataclass(frozen=True, slots=True)
class ConstantInfo:
    """One enum member. ``value`` is None when it has no literal form."""

    name: str
    value: Any = None


@dataclass(frozen=True, slots=True)
class TypeInfo:
    """A class or enumeration listed by a declaration."""

    name: str
    namespace: str
    display_name: str
    kind: TypeKind
    definition_name: str = ""
    is_record: bool = False
    is_generic: bool = False
    is_unbound_generic: bool = False
    type_parameters: tuple[str, ...] = ()
    type_arguments: tuple[TypeRef, ...] = ()
    properties: tuple[PropertyInfo, ...] = ()
    constants: tuple[ConstantInfo, ...] = ()

    def __post_init__(self) -> None:
        if not self.definition_name:
            object.__setattr__(self, "definition_name", self.display_name)

    def as_ref(self) -> TypeRef:
        return TypeRef(
            name=self.name,
            namespace=self.namespace,
            display_name=self.display_name,
            kind=self.kind,
            type_arguments=self.type_arguments,
        )


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Where a declaration (or one of its type arguments) was written."""

    module: str
    qualname: str
    argument_index: int | None = None

    def with_argument(self, index: int) -> SourceLocation:
        return SourceLocation(self.module, self.qualname, index)

    def __str__(self) -> str:
        where = f"{self.module}:{self.qualname}"
        if self.argument_index is not None:
            where += f"#{self.argument_index}"
        return where


@dataclass(frozen=True, slots=True)
class TargetDeclaration:
    """A marker class carrying the list of types to mirror.

    ``namespace`` is the module the marker class lives in; it becomes the
    destination namespace of everything generated for this declaration.
    """

    namespace: str
    name: str
    types: tuple[TypeInfo, ...] = ()
    location: SourceLocation = field(default_factory=lambda: SourceLocation("", ""))
