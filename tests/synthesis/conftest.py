"""Fixtures for synthesizer tests: the sample contracts, resolved and ready."""

from __future__ import annotations

import pytest

from modelmapper.descriptors import TargetDescriptor, TypeDescriptor
from modelmapper.frontend.runtime import declaration_for
from modelmapper.orchestrator import group_generic_instantiations, synthesis_context
from modelmapper.relations import resolve_relations
from modelmapper.synthesis.members import SynthesisContext
from sample_domain.contracts import Contracts


@pytest.fixture
def contracts_target() -> TargetDescriptor:
    declaration = declaration_for(Contracts)
    assert declaration is not None
    target = TargetDescriptor.create(declaration)
    resolve_relations(target)
    return target


@pytest.fixture
def contracts_groups(contracts_target: TargetDescriptor) -> dict[str, list[TypeDescriptor]]:
    return group_generic_instantiations(contracts_target.contained_types)


@pytest.fixture
def context(
    contracts_target: TargetDescriptor, contracts_groups: dict[str, list[TypeDescriptor]]
) -> SynthesisContext:
    return synthesis_context(contracts_target, contracts_groups)


@pytest.fixture
def find(contracts_target: TargetDescriptor):
    """Look up a contained type by its short display name under sample_domain."""

    def lookup(display: str) -> TypeDescriptor:
        descriptor = contracts_target.find(f"sample_domain.{display}")
        assert descriptor is not None, display
        return descriptor

    return lookup
