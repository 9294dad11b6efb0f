"""Generation orchestrator.

Turns declarations into target descriptors, applies the validators and the
destination-namespace barrier, then routes every listed type to its
synthesizer. Targets are independent of one another and may be processed
in parallel; results always come back in target order.
"""

from __future__ import annotations

import contextvars
import threading
from collections import Counter
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

import structlog

from modelmapper.core.errors import GenerationError
from modelmapper.descriptors.target import TargetDescriptor
from modelmapper.descriptors.types import TypeDescriptor
from modelmapper.relations import resolve_relations
from modelmapper.symbols import TargetDeclaration
from modelmapper.synthesis.classes import synthesize_class
from modelmapper.synthesis.enums import synthesize_enum
from modelmapper.synthesis.generics import synthesize_generic
from modelmapper.synthesis.members import SynthesisContext
from modelmapper.synthesis.naming import DEFAULT_FILE_EXTENSION, assign_suffixes
from modelmapper.synthesis.source import GeneratedSource
from modelmapper.validation.analyzers import run_analyzers, suppressed_declarations
from modelmapper.validation.rules import Diagnostic

log = structlog.get_logger(__name__)


@dataclass(slots=True)
class GenerationResult:
    """Outcome of one generation pass.

    ``aborted`` is set when destination namespaces collided; no sources are
    produced for any target in that case.
    """

    sources: list[GeneratedSource] = field(default_factory=list)
    aborted: bool = False
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return self.aborted or any(d.is_error for d in self.diagnostics)

    def texts(self) -> dict[str, str]:
        return {source.hint_name: source.text for source in self.sources}


def check_namespaces_unique(namespaces: Iterable[str]) -> bool:
    """True when no destination namespace is claimed twice."""
    counts = Counter(namespaces)
    duplicates = sorted(namespace for namespace, count in counts.items() if count > 1)
    if duplicates:
        error = GenerationError.namespace_collision(duplicates)
        log.error("namespace_collision", code=error.code.value, namespaces=duplicates)
        return False
    return True


def check_targets_valid(targets: Sequence[TargetDescriptor]) -> bool:
    """True when every target has its own destination namespace."""
    return check_namespaces_unique(target.target_namespace for target in targets)


def group_generic_instantiations(
    descriptors: Iterable[TypeDescriptor],
) -> dict[str, list[TypeDescriptor]]:
    """Closed generic instantiations grouped by their open definition.

    Groups and their members keep listing order.
    """
    groups: dict[str, list[TypeDescriptor]] = {}
    for descriptor in descriptors:
        if descriptor.is_enum or not descriptor.is_generic or descriptor.is_unbound_generic:
            continue
        groups.setdefault(descriptor.definition_name, []).append(descriptor)
    return groups


def build_targets(declarations: Iterable[TargetDeclaration]) -> list[TargetDescriptor]:
    return [TargetDescriptor.create(declaration) for declaration in declarations]


def synthesis_context(
    target: TargetDescriptor,
    groups: dict[str, list[TypeDescriptor]],
    file_extension: str = DEFAULT_FILE_EXTENSION,
) -> SynthesisContext:
    suffixes = assign_suffixes(
        (descriptor.display_name, descriptor.type_arguments)
        for group in groups.values()
        for descriptor in group
    )
    return SynthesisContext(target=target, suffixes=suffixes, file_extension=file_extension)


def generate_target(
    target: TargetDescriptor, *, file_extension: str = DEFAULT_FILE_EXTENSION
) -> list[GeneratedSource]:
    """All artifacts for one target, in listing order.

    A generic group is emitted where its first instantiation is listed.
    """
    resolve_relations(target)
    groups = group_generic_instantiations(target.contained_types)
    context = synthesis_context(target, groups, file_extension)

    sources: list[GeneratedSource] = []
    emitted: set[str] = set()
    for descriptor in target.contained_types:
        if descriptor.is_enum:
            sources.extend(synthesize_enum(descriptor, context))
        elif descriptor.is_unbound_generic:
            log.warning("type_skipped", type=descriptor.display_name, reason="open generic")
        elif descriptor.is_generic:
            if descriptor.definition_name not in emitted:
                emitted.add(descriptor.definition_name)
                sources.extend(synthesize_generic(groups[descriptor.definition_name], context))
        else:
            sources.extend(synthesize_class(descriptor, context))

    log.debug(
        "target_generated",
        namespace=target.target_namespace,
        types=len(target.contained_types),
        sources=len(sources),
    )
    return sources


def _cancelled(completed: int) -> GenerationError:
    log.info("generation_cancelled", completed_targets=completed)
    return GenerationError.cancelled(completed)


def _check_cancelled(cancel_event: threading.Event | None, completed: int) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise _cancelled(completed)


def generate_each(
    targets: Sequence[TargetDescriptor],
    *,
    cancel_event: threading.Event | None = None,
    max_workers: int = 1,
    file_extension: str = DEFAULT_FILE_EXTENSION,
) -> list[list[GeneratedSource]]:
    """Artifacts per target, in target order. No namespace check."""
    outputs: list[list[GeneratedSource]] = []
    if max_workers <= 1 or len(targets) <= 1:
        for target in targets:
            _check_cancelled(cancel_event, len(outputs))
            outputs.append(generate_target(target, file_extension=file_extension))
        return outputs

    def work(target: TargetDescriptor) -> list[GeneratedSource] | None:
        if cancel_event is not None and cancel_event.is_set():
            return None
        return generate_target(target, file_extension=file_extension)

    # Collected in target order, so len(outputs) counts completed targets
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = [pool.submit(contextvars.copy_context().run, work, t) for t in targets]
        try:
            for future in futures:
                if outputs:
                    _check_cancelled(cancel_event, len(outputs))
                sources = future.result()
                if sources is None:
                    raise _cancelled(len(outputs))
                outputs.append(sources)
        except GenerationError:
            for future in futures:
                future.cancel()
            raise
    return outputs


def generate_targets(
    targets: Sequence[TargetDescriptor],
    *,
    cancel_event: threading.Event | None = None,
    max_workers: int = 1,
    file_extension: str = DEFAULT_FILE_EXTENSION,
) -> GenerationResult:
    """Generate every target, or nothing at all if namespaces collide.

    Raises:
        GenerationError: cancel_event was set before the run or a target.
    """
    _check_cancelled(cancel_event, 0)
    result = GenerationResult()
    if not targets:
        return result
    if not check_targets_valid(targets):
        result.aborted = True
        return result

    outputs = generate_each(
        targets, cancel_event=cancel_event, max_workers=max_workers, file_extension=file_extension
    )
    for sources in outputs:
        result.sources.extend(sources)

    log.info("generation_complete", targets=len(outputs), sources=len(result.sources))
    return result


def filter_suppressed(
    declarations: Iterable[TargetDeclaration], diagnostics: Iterable[Diagnostic]
) -> list[TargetDeclaration]:
    """Drop every declaration a diagnostic points at."""
    suppressed = suppressed_declarations(diagnostics)
    accepted = []
    for declaration in declarations:
        if (declaration.location.module, declaration.location.qualname) in suppressed:
            log.warning(
                "target_skipped",
                target=f"{declaration.namespace}.{declaration.name}",
                reason="diagnostics reported",
            )
            continue
        accepted.append(declaration)
    return accepted


def generate(
    declarations: Sequence[TargetDeclaration],
    *,
    cancel_event: threading.Event | None = None,
    max_workers: int = 1,
    file_extension: str = DEFAULT_FILE_EXTENSION,
    validate: bool = True,
) -> GenerationResult:
    """Validate declarations, then generate the ones no diagnostic points at.

    The namespace barrier sees every declaration, flagged or not: a collision
    aborts the whole run even when validation would have dropped the
    colliding declarations.
    """
    diagnostics = run_analyzers(declarations) if validate else []
    if not check_namespaces_unique(d.namespace for d in declarations):
        return GenerationResult(aborted=True, diagnostics=diagnostics)
    result = generate_targets(
        build_targets(filter_suppressed(declarations, diagnostics)),
        cancel_event=cancel_event,
        max_workers=max_workers,
        file_extension=file_extension,
    )
    result.diagnostics = diagnostics
    return result
