"""Incremental generator driver.

Keeps the previous pass's target descriptors and their artifacts. A target
whose descriptor and render fingerprint match last time reuses its artifacts
instead of being synthesized again. Every pass records why each target was (or was
not) regenerated, which is what the incremental-caching tests look at.
"""

from __future__ import annotations

import threading
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import structlog

from modelmapper.descriptors.target import TargetDescriptor
from modelmapper.orchestrator import (
    GenerationResult,
    build_targets,
    check_namespaces_unique,
    filter_suppressed,
    generate_each,
)
from modelmapper.symbols import TargetDeclaration
from modelmapper.synthesis.naming import DEFAULT_FILE_EXTENSION
from modelmapper.synthesis.source import GeneratedSource
from modelmapper.validation.analyzers import run_analyzers

log = structlog.get_logger(__name__)

GET_TARGET_TYPES_STEP = "get_target_types"
COLLECT_TARGETS_STEP = "collect_target_descriptors"


class StepReason(str, Enum):
    NEW = "new"
    CACHED = "cached"
    MODIFIED = "modified"
    REMOVED = "removed"


@dataclass(frozen=True, slots=True)
class TrackedStep:
    name: str
    target_namespace: str
    reason: StepReason


@dataclass(slots=True)
class DriverRun:
    result: GenerationResult
    steps: list[TrackedStep] = field(default_factory=list)

    def reasons(self, step: str = GET_TARGET_TYPES_STEP) -> dict[str, StepReason]:
        """Reason per destination namespace for one tracked step."""
        return {s.target_namespace: s.reason for s in self.steps if s.name == step}


def render_fingerprint(target: TargetDescriptor) -> tuple[Any, ...]:
    """What the rendered text depends on beyond descriptor equality.

    Descriptor equality ignores nullability and the full member type, both of
    which change the generated annotations.
    """
    return tuple(
        (
            descriptor.display_name,
            tuple(
                (prop.name, prop.is_nullable, prop.return_type.display_name, prop.generic_position)
                for prop in descriptor.properties
            ),
        )
        for descriptor in target.contained_types
    )


@dataclass(slots=True)
class _CacheEntry:
    target: TargetDescriptor
    sources: list[GeneratedSource]
    fingerprint: tuple[Any, ...] = ()

    def matches(self, target: TargetDescriptor) -> bool:
        return self.target == target and self.fingerprint == render_fingerprint(target)


class GeneratorDriver:
    """Runs generation passes and reuses output for unchanged targets."""

    def __init__(
        self,
        *,
        max_workers: int = 1,
        file_extension: str = DEFAULT_FILE_EXTENSION,
        validate: bool = True,
    ) -> None:
        self.max_workers = max_workers
        self.file_extension = file_extension
        self.validate = validate
        self._cache: dict[str, _CacheEntry] = {}

    def run(
        self,
        declarations: Sequence[TargetDeclaration],
        *,
        cancel_event: threading.Event | None = None,
    ) -> DriverRun:
        diagnostics = run_analyzers(declarations) if self.validate else []
        run = DriverRun(result=GenerationResult(diagnostics=diagnostics))

        if not check_namespaces_unique(d.namespace for d in declarations):
            run.result.aborted = True
            self._forget(run, keep=set())
            return run

        targets = build_targets(filter_suppressed(declarations, diagnostics))
        changed: list[TargetDescriptor] = []
        reasons: dict[str, StepReason] = {}
        for target in targets:
            previous = self._cache.get(target.target_namespace)
            if previous is None:
                reasons[target.target_namespace] = StepReason.NEW
                changed.append(target)
            elif previous.matches(target):
                reasons[target.target_namespace] = StepReason.CACHED
            else:
                reasons[target.target_namespace] = StepReason.MODIFIED
                changed.append(target)

        outputs = generate_each(
            changed,
            cancel_event=cancel_event,
            max_workers=self.max_workers,
            file_extension=self.file_extension,
        )
        for target, sources in zip(changed, outputs, strict=True):
            self._cache[target.target_namespace] = _CacheEntry(
                target, sources, render_fingerprint(target)
            )

        self._forget(run, keep={t.target_namespace for t in targets})
        for target in targets:
            reason = reasons[target.target_namespace]
            run.steps.append(TrackedStep(GET_TARGET_TYPES_STEP, target.target_namespace, reason))
            run.result.sources.extend(self._cache[target.target_namespace].sources)

        removed = any(s.reason is StepReason.REMOVED for s in run.steps)
        unchanged = bool(targets) and not changed and not removed
        collected = StepReason.CACHED if unchanged else StepReason.MODIFIED
        run.steps.append(TrackedStep(COLLECT_TARGETS_STEP, "", collected))

        log.info(
            "driver_pass_complete",
            targets=len(targets),
            regenerated=len(changed),
            sources=len(run.result.sources),
        )
        return run

    def _forget(self, run: DriverRun, keep: set[str]) -> None:
        for namespace in [ns for ns in self._cache if ns not in keep]:
            del self._cache[namespace]
            run.steps.append(TrackedStep(GET_TARGET_TYPES_STEP, namespace, StepReason.REMOVED))
