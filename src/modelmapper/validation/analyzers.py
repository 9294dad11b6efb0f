"""Pre-generation analyzers.

Each analyzer looks at the discovered declarations and returns diagnostics.
Any diagnostic suppresses generation for the declaration it points at.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Iterable, Sequence

import structlog

from modelmapper.symbols import TargetDeclaration
from modelmapper.validation.rules import (
    OPEN_GENERICS_NOT_SUPPORTED,
    RECORDS_NOT_SUPPORTED,
    SAME_NAME_NOT_ALLOWED,
    SINGLE_TARGET_PER_MODULE,
    Diagnostic,
)

log = structlog.get_logger(__name__)

Analyzer = Callable[[Sequence[TargetDeclaration]], list[Diagnostic]]


def check_single_target_per_module(declarations: Sequence[TargetDeclaration]) -> list[Diagnostic]:
    """MMG1: every declaration in a module holding more than one."""
    by_module: dict[str, list[TargetDeclaration]] = defaultdict(list)
    for declaration in declarations:
        by_module[declaration.namespace].append(declaration)
    return [
        SINGLE_TARGET_PER_MODULE.create(declaration.location, module)
        for module, group in by_module.items()
        if len(group) > 1
        for declaration in group
    ]


def check_records_not_used(declarations: Sequence[TargetDeclaration]) -> list[Diagnostic]:
    """MMG2: every listed dataclass or named tuple."""
    return [
        RECORDS_NOT_SUPPORTED.create(declaration.location.with_argument(index), info.display_name)
        for declaration in declarations
        for index, info in enumerate(declaration.types)
        if info.is_record
    ]


def check_unique_type_names(declarations: Sequence[TargetDeclaration]) -> list[Diagnostic]:
    """MMG3: listed types sharing a short name within one declaration.

    Repeats of the same type and distinct classes with the same name both
    collide. Different instantiations of one generic class do not.
    """
    diagnostics: list[Diagnostic] = []
    for declaration in declarations:
        by_name: dict[str, list[int]] = defaultdict(list)
        for index, info in enumerate(declaration.types):
            by_name[info.name].append(index)

        for name, indexes in by_name.items():
            if len(indexes) < 2:
                continue
            infos = [declaration.types[i] for i in indexes]
            for index, info in zip(indexes, infos, strict=True):
                others = [o for o in infos if o is not info]
                if any(
                    o.definition_name != info.definition_name or o.display_name == info.display_name
                    for o in others
                ):
                    diagnostics.append(
                        SAME_NAME_NOT_ALLOWED.create(declaration.location.with_argument(index), name)
                    )
    return diagnostics


def check_closed_generics(declarations: Sequence[TargetDeclaration]) -> list[Diagnostic]:
    """MMG4: generic classes listed without (or with unbound) arguments."""
    return [
        OPEN_GENERICS_NOT_SUPPORTED.create(
            declaration.location.with_argument(index), info.display_name
        )
        for declaration in declarations
        for index, info in enumerate(declaration.types)
        if info.is_unbound_generic
    ]


ANALYZERS: tuple[Analyzer, ...] = (
    check_single_target_per_module,
    check_records_not_used,
    check_unique_type_names,
    check_closed_generics,
)


def run_analyzers(
    declarations: Sequence[TargetDeclaration], analyzers: Iterable[Analyzer] = ANALYZERS
) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for analyzer in analyzers:
        found = analyzer(declarations)
        for diagnostic in found:
            log.info(
                "diagnostic_reported",
                id=diagnostic.id,
                severity=diagnostic.severity.value,
                location=str(diagnostic.location),
            )
        diagnostics.extend(found)
    return diagnostics


def suppressed_declarations(diagnostics: Iterable[Diagnostic]) -> set[tuple[str, str]]:
    """(module, qualname) of every declaration a diagnostic points at."""
    return {diagnostic.declaration_key for diagnostic in diagnostics}
