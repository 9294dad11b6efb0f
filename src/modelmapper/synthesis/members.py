"""Rendering shared by the class and generic synthesizers.

Covers model attribute annotations, the expressions a mapper uses to copy a
property in either direction, and the imports those need.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from modelmapper.descriptors.members import PropertyDescriptor
from modelmapper.descriptors.target import TargetDescriptor
from modelmapper.descriptors.types import TypeDescriptor
from modelmapper.symbols import TypeKind, TypeRef
from modelmapper.synthesis.naming import (
    DEFAULT_FILE_EXTENSION,
    generic_parameter,
    mapper_name,
    method_name,
    model_name,
)
from modelmapper.synthesis.source import SourceDocument


@dataclass(frozen=True, slots=True)
class SynthesisContext:
    """Everything a synthesizer needs beyond the type it renders.

    ``suffixes`` maps the display name of every generic instantiation in the
    target to its mapper method suffix.
    """

    target: TargetDescriptor
    suffixes: dict[str, str] = field(default_factory=dict)
    file_extension: str = DEFAULT_FILE_EXTENSION

    @property
    def namespace(self) -> str:
        return self.target.target_namespace

    def suffix_for(self, descriptor: TypeDescriptor) -> str | None:
        return self.suffixes.get(descriptor.display_name)


# =============================================================================
# Annotations
# =============================================================================


def related_model_type(ref: TypeRef, context: SynthesisContext) -> str:
    """Model type mirroring ref; closed over model arguments for generics."""
    descriptor = context.target.find(ref.display_name)
    if descriptor is None:
        return model_name(ref.name)
    if not descriptor.is_generic or not descriptor.generic_arity:
        return model_name(descriptor.name)
    arguments = ", ".join(closing_argument(a, context) for a in descriptor.slot_arguments())
    return f"{model_name(descriptor.name)}[{arguments}]"


def closing_argument(argument: TypeRef, context: SynthesisContext) -> str:
    if context.target.is_related(argument.display_name):
        return related_model_type(argument, context)
    return argument.display_name


def model_annotation(prop: PropertyDescriptor, context: SynthesisContext) -> str:
    if prop.is_parameter_positional:
        annotation = generic_parameter(prop.generic_position)
    elif prop.is_related_in(context.namespace):
        annotation = related_model_type(prop.return_type, context)
    else:
        annotation = prop.return_type_fully_qualified_name
    if prop.is_nullable:
        annotation += " | None"
    return annotation


def domain_annotation(descriptor: TypeDescriptor) -> str:
    """Domain type as written in a mapper signature, e.g. ``Registration[a.Person]``."""
    if not descriptor.type_arguments:
        return descriptor.name
    arguments = ", ".join(a.display_name for a in descriptor.type_arguments)
    return f"{descriptor.name}[{arguments}]"


def add_annotation_imports(
    document: SourceDocument, prop: PropertyDescriptor, context: SynthesisContext
) -> None:
    """Import the modules a verbatim (not mirrored) annotation refers to."""
    if prop.is_parameter_positional or prop.is_related_in(context.namespace):
        return
    for module in prop.return_type.namespaces():
        document.import_module(module)


def add_closing_imports(document: SourceDocument, descriptor: TypeDescriptor) -> None:
    for argument in descriptor.type_arguments:
        for module in argument.namespaces():
            document.import_module(module)


# =============================================================================
# Mapper assignments
# =============================================================================


def convert_expression(
    prop: PropertyDescriptor, direction: str, context: SynthesisContext
) -> str:
    """Right-hand side copying prop out of ``value`` in the given direction."""
    source = f"value.{prop.name}"
    if not prop.is_related_in(context.namespace):
        return source

    descriptor = context.target.find(prop.return_type_fully_qualified_name)
    if descriptor is None:
        return source
    method = method_name(direction, context.suffix_for(descriptor))
    call = f"{mapper_name(descriptor.name)}.{method}({source})"
    if prop.is_nullable or prop.return_type_kind is TypeKind.CLASS:
        return f"{call} if {source} is not None else None"
    return call


def model_properties(descriptor: TypeDescriptor) -> list[PropertyDescriptor]:
    return [p for p in descriptor.properties if p.has_public_getter]


def domain_properties(descriptor: TypeDescriptor) -> list[PropertyDescriptor]:
    return [p for p in descriptor.properties if p.has_public_getter and p.has_public_setter]


def write_model_body(
    document: SourceDocument, descriptor: TypeDescriptor, context: SynthesisContext
) -> None:
    properties = model_properties(descriptor)
    if not properties:
        document.line("pass")
        return
    for prop in properties:
        add_annotation_imports(document, prop, context)
        document.line(f"{prop.name}: {model_annotation(prop, context)}")


def write_conversion(
    document: SourceDocument,
    *,
    name: str,
    parameter: str,
    returns: str,
    variable: str,
    properties: list[PropertyDescriptor],
    direction: str,
    context: SynthesisContext,
) -> None:
    """Write one static conversion method.

    The result is built with a no-argument constructor, then each property
    is assigned.
    """
    document.line("@staticmethod")
    with document.block(f"def {name}(value: {parameter}) -> {returns}:"):
        document.line(f"{variable} = {_constructor(returns)}()")
        for prop in properties:
            document.line(f"{variable}.{prop.name} = {convert_expression(prop, direction, context)}")
        document.line(f"return {variable}")


def _constructor(annotation: str) -> str:
    # Registration[a.Person] -> Registration
    return annotation.split("[", 1)[0]
