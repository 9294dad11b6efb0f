"""Model and mapper synthesis for groups of generic instantiations.

All closed instantiations of one generic definition share a single generic
model, rendered from the first instantiation, and a single mapper holding a
``to_model_<suffix>`` / ``to_domain_<suffix>`` pair per instantiation.
"""

from __future__ import annotations

from collections.abc import Sequence

from modelmapper.descriptors.types import TypeDescriptor
from modelmapper.synthesis.members import (
    SynthesisContext,
    add_closing_imports,
    domain_annotation,
    domain_properties,
    model_properties,
    related_model_type,
    write_conversion,
    write_model_body,
)
from modelmapper.synthesis.naming import (
    TO_DOMAIN,
    TO_MODEL,
    build_file_name,
    generic_parameter,
    mapper_name,
    method_name,
    model_name,
)
from modelmapper.synthesis.source import ArtifactKind, GeneratedSource, SourceDocument


def build_generic_model(first: TypeDescriptor, context: SynthesisContext) -> SourceDocument:
    name = model_name(first.name)
    parameters = ", ".join(generic_parameter(i) for i in range(first.generic_arity))
    header = f"class {name}[{parameters}]:" if parameters else f"class {name}:"
    document = SourceDocument().future_annotations()
    with document.block(header):
        write_model_body(document, first, context)
    return document


def build_generic_mapper(
    group: Sequence[TypeDescriptor], context: SynthesisContext
) -> SourceDocument:
    first = group[0]
    document = SourceDocument().future_annotations()
    document.import_from(first.namespace, first.name)
    with document.block(f"class {mapper_name(first.name)}:"):
        for index, instantiation in enumerate(group):
            if index:
                document.blank()
            add_closing_imports(document, instantiation)
            domain = domain_annotation(instantiation)
            model = related_model_type(instantiation.info.as_ref(), context)
            suffix = context.suffix_for(instantiation)
            write_conversion(
                document,
                name=method_name(TO_MODEL, suffix),
                parameter=domain,
                returns=model,
                variable="model",
                properties=model_properties(instantiation),
                direction=TO_MODEL,
                context=context,
            )
            document.blank()
            write_conversion(
                document,
                name=method_name(TO_DOMAIN, suffix),
                parameter=model,
                returns=domain,
                variable="domain",
                properties=domain_properties(instantiation),
                direction=TO_DOMAIN,
                context=context,
            )
    return document


def synthesize_generic(
    group: Sequence[TypeDescriptor], context: SynthesisContext
) -> list[GeneratedSource]:
    """Model and mapper artifacts for one generic definition."""
    if not group:
        return []
    first = group[0]
    model = model_name(first.name)
    mapper = mapper_name(first.name)
    return [
        GeneratedSource(
            hint_name=build_file_name(model, first.namespace, context.namespace, context.file_extension),
            kind=ArtifactKind.MODEL,
            target_namespace=context.namespace,
            document=build_generic_model(first, context),
        ),
        GeneratedSource(
            hint_name=build_file_name(mapper, first.namespace, context.namespace, context.file_extension),
            kind=ArtifactKind.MAPPER,
            target_namespace=context.namespace,
            document=build_generic_mapper(group, context),
        ),
    ]
