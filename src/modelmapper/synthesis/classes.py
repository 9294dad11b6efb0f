"""Model and mapper synthesis for plain (non-generic) classes."""

from __future__ import annotations

from modelmapper.descriptors.types import TypeDescriptor
from modelmapper.synthesis.members import (
    SynthesisContext,
    domain_properties,
    model_properties,
    write_conversion,
    write_model_body,
)
from modelmapper.synthesis.naming import (
    TO_DOMAIN,
    TO_MODEL,
    build_file_name,
    mapper_name,
    model_name,
)
from modelmapper.synthesis.source import ArtifactKind, GeneratedSource, SourceDocument


def build_class_model(descriptor: TypeDescriptor, context: SynthesisContext) -> SourceDocument:
    document = SourceDocument().future_annotations()
    with document.block(f"class {model_name(descriptor.name)}:"):
        write_model_body(document, descriptor, context)
    return document


def build_class_mapper(descriptor: TypeDescriptor, context: SynthesisContext) -> SourceDocument:
    model = model_name(descriptor.name)
    document = SourceDocument().future_annotations()
    document.import_from(descriptor.namespace, descriptor.name)
    with document.block(f"class {mapper_name(descriptor.name)}:"):
        write_conversion(
            document,
            name=TO_MODEL,
            parameter=descriptor.name,
            returns=model,
            variable="model",
            properties=model_properties(descriptor),
            direction=TO_MODEL,
            context=context,
        )
        document.blank()
        write_conversion(
            document,
            name=TO_DOMAIN,
            parameter=model,
            returns=descriptor.name,
            variable="domain",
            properties=domain_properties(descriptor),
            direction=TO_DOMAIN,
            context=context,
        )
    return document


def synthesize_class(descriptor: TypeDescriptor, context: SynthesisContext) -> list[GeneratedSource]:
    """Model and mapper artifacts for one plain class."""
    return [
        GeneratedSource(
            hint_name=build_file_name(
                model_name(descriptor.name),
                descriptor.namespace,
                context.namespace,
                context.file_extension,
            ),
            kind=ArtifactKind.MODEL,
            target_namespace=context.namespace,
            document=build_class_model(descriptor, context),
        ),
        GeneratedSource(
            hint_name=build_file_name(
                mapper_name(descriptor.name),
                descriptor.namespace,
                context.namespace,
                context.file_extension,
            ),
            kind=ArtifactKind.MAPPER,
            target_namespace=context.namespace,
            document=build_class_mapper(descriptor, context),
        ),
    ]
