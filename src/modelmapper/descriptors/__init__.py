"""Descriptors: structural, comparable views of declarations and types."""

from modelmapper.descriptors.members import ConstantDescriptor, PropertyDescriptor
from modelmapper.descriptors.target import TargetDescriptor
from modelmapper.descriptors.types import TypeDescriptor

__all__ = [
    "ConstantDescriptor",
    "PropertyDescriptor",
    "TargetDescriptor",
    "TypeDescriptor",
]
