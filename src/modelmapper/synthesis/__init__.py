"""Source synthesis for models and mappers."""

from modelmapper.synthesis.classes import synthesize_class
from modelmapper.synthesis.enums import synthesize_enum
from modelmapper.synthesis.generics import synthesize_generic
from modelmapper.synthesis.members import SynthesisContext
from modelmapper.synthesis.source import (
    ArtifactKind,
    GeneratedSource,
    SourceDocument,
    bundle_documents,
)

__all__ = [
    "ArtifactKind",
    "GeneratedSource",
    "SourceDocument",
    "SynthesisContext",
    "bundle_documents",
    "synthesize_class",
    "synthesize_enum",
    "synthesize_generic",
]
