"""Type descriptor: a whole class or enumeration, normalized for generation."""

from __future__ import annotations

from dataclasses import dataclass, field

from modelmapper.descriptors.members import ConstantDescriptor, PropertyDescriptor
from modelmapper.symbols import TypeInfo, TypeKind, TypeRef


def _assign_generic_slots(info: TypeInfo) -> tuple[str, ...]:
    """Order the type's parameters by first use among its properties.

    Parameters no property uses directly keep their declaration order after
    the used ones.
    """
    slots: list[str] = []
    for prop in info.properties:
        if prop.type_parameter is not None and prop.type_parameter not in slots:
            slots.append(prop.type_parameter)
    slots.extend(p for p in info.type_parameters if p not in slots)
    return tuple(slots)


@dataclass(eq=False, slots=True)
class TypeDescriptor:
    """Descriptor of one listed type.

    Equality is structural: same short name, same namespace and pairwise
    equal members in declaration order.
    """

    info: TypeInfo
    name: str
    namespace: str
    display_name: str
    definition_name: str
    kind: TypeKind
    properties: tuple[PropertyDescriptor, ...] = ()
    constants: tuple[ConstantDescriptor, ...] = ()
    is_generic: bool = False
    is_unbound_generic: bool = False
    generic_slots: tuple[str, ...] = field(default=())

    @classmethod
    def create(cls, info: TypeInfo) -> TypeDescriptor | None:
        """Describe info, or return None when it contributes nothing.

        An enumeration without constants has nothing to mirror.
        """
        if info.kind is TypeKind.ENUM:
            if not info.constants:
                return None
            return cls(
                info=info,
                name=info.name,
                namespace=info.namespace,
                display_name=info.display_name,
                definition_name=info.definition_name,
                kind=TypeKind.ENUM,
                constants=tuple(ConstantDescriptor.from_info(c) for c in info.constants),
            )

        slots = _assign_generic_slots(info) if info.is_generic else ()
        properties = tuple(
            PropertyDescriptor.from_info(
                prop,
                slots.index(prop.type_parameter) if prop.type_parameter in slots else None,
            )
            for prop in info.properties
        )
        return cls(
            info=info,
            name=info.name,
            namespace=info.namespace,
            display_name=info.display_name,
            definition_name=info.definition_name,
            kind=info.kind,
            properties=properties,
            is_generic=info.is_generic,
            is_unbound_generic=info.is_unbound_generic,
            generic_slots=slots,
        )

    @property
    def is_enum(self) -> bool:
        return self.kind is TypeKind.ENUM

    @property
    def generic_arity(self) -> int:
        return len(self.generic_slots)

    @property
    def members(self) -> tuple[PropertyDescriptor, ...] | tuple[ConstantDescriptor, ...]:
        return self.constants if self.is_enum else self.properties

    @property
    def type_arguments(self) -> tuple[TypeRef, ...]:
        return self.info.type_arguments

    def slot_arguments(self) -> tuple[TypeRef, ...]:
        """Type arguments reordered so that index i closes synthesized T{i}."""
        by_parameter = dict(zip(self.info.type_parameters, self.info.type_arguments, strict=False))
        return tuple(by_parameter[p] for p in self.generic_slots if p in by_parameter)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeDescriptor):
            return NotImplemented
        if self is other:
            return True
        if self.name != other.name or self.namespace != other.namespace:
            return False
        return self.members == other.members

    def __hash__(self) -> int:
        return hash((self.name, self.namespace, self.members))
