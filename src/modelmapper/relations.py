"""Relation resolution: which property types are themselves mirrored.

A property is related in a target when its (None-stripped) type's display
name is exactly one of the target's listed types. Only exact matches count;
subclasses of a listed type are copied verbatim.
"""

from __future__ import annotations

from modelmapper.descriptors.target import TargetDescriptor
from modelmapper.descriptors.types import TypeDescriptor


def mark_related_properties(descriptor: TypeDescriptor, target: TargetDescriptor) -> int:
    """Mark descriptor's properties related in target; return how many matched."""
    marked = 0
    for prop in descriptor.properties:
        if target.is_related(prop.return_type_fully_qualified_name):
            prop.mark_related(target.target_namespace)
            marked += 1
    return marked


def resolve_relations(target: TargetDescriptor) -> int:
    """Mark every class of target. Must complete before synthesis starts."""
    return sum(
        mark_related_properties(descriptor, target)
        for descriptor in target.contained_types
        if not descriptor.is_enum
    )
