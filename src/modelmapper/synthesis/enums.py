"""Model and mapper synthesis for enumerations.

The model is an ``enum.Enum`` with the same member names. The mapper
converts by exhaustive ``match``; a value outside the known members raises
``ValueError`` at run time.
"""

from __future__ import annotations

from modelmapper.descriptors.types import TypeDescriptor
from modelmapper.synthesis.members import SynthesisContext
from modelmapper.synthesis.naming import (
    TO_DOMAIN,
    TO_MODEL,
    build_file_name,
    mapper_name,
    model_name,
)
from modelmapper.synthesis.source import ArtifactKind, GeneratedSource, SourceDocument

UNKNOWN_VALUE_MESSAGE = "Unknown enum value"


def build_enum_model(descriptor: TypeDescriptor) -> SourceDocument:
    document = SourceDocument().future_annotations().import_module("enum")
    with document.block(f"class {model_name(descriptor.name)}(enum.Enum):"):
        for constant in descriptor.constants:
            value = "enum.auto()" if constant.value is None else repr(constant.value)
            document.line(f"{constant.name} = {value}")
    return document


def _write_match(
    document: SourceDocument, *, name: str, source: str, destination: str, descriptor: TypeDescriptor
) -> None:
    document.line("@staticmethod")
    with document.block(f"def {name}(value: {source}) -> {destination}:"):
        with document.block("match value:"):
            for constant in descriptor.constants:
                with document.block(f"case {source}.{constant.name}:"):
                    document.line(f"return {destination}.{constant.name}")
            with document.block("case _:"):
                document.line(f'raise ValueError("{UNKNOWN_VALUE_MESSAGE}")')


def build_enum_mapper(descriptor: TypeDescriptor) -> SourceDocument:
    model = model_name(descriptor.name)
    document = SourceDocument().future_annotations()
    document.import_from(descriptor.namespace, descriptor.name)
    with document.block(f"class {mapper_name(descriptor.name)}:"):
        _write_match(
            document, name=TO_MODEL, source=descriptor.name, destination=model, descriptor=descriptor
        )
        document.blank()
        _write_match(
            document, name=TO_DOMAIN, source=model, destination=descriptor.name, descriptor=descriptor
        )
    return document


def synthesize_enum(descriptor: TypeDescriptor, context: SynthesisContext) -> list[GeneratedSource]:
    model = model_name(descriptor.name)
    mapper = mapper_name(descriptor.name)
    return [
        GeneratedSource(
            hint_name=build_file_name(model, descriptor.namespace, context.namespace, context.file_extension),
            kind=ArtifactKind.MODEL,
            target_namespace=context.namespace,
            document=build_enum_model(descriptor),
        ),
        GeneratedSource(
            hint_name=build_file_name(mapper, descriptor.namespace, context.namespace, context.file_extension),
            kind=ArtifactKind.MAPPER,
            target_namespace=context.namespace,
            document=build_enum_mapper(descriptor),
        ),
    ]
