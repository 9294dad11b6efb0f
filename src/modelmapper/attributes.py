"""Declaration API: mark a class as a model generation target.

Usage::

    from modelmapper import model_generation_target
    from myapp.domain import Address, Person

    @model_generation_target(Person, Address)
    class Contracts:
        pass

Everything generated for ``Contracts`` lands in the namespace of the module
that defines it. ``types=[...]`` and ``types=(...)`` are equivalent spellings
of the positional form. Listing order is generation order, so unordered
collections (``set``, ``frozenset``) are rejected.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, TypeVar

TARGET_ATTRIBUTE = "__model_generation_target__"

_C = TypeVar("_C", bound=type)


@dataclass(frozen=True, slots=True)
class TargetSpec:
    """What the decorator records on the marker class."""

    types: tuple[Any, ...]


def _unique(types: Iterable[Any]) -> tuple[Any, ...]:
    seen: list[Any] = []
    for t in types:
        if not any(t is s or t == s for s in seen):
            seen.append(t)
    return tuple(seen)


def model_generation_target(
    *args: Any, types: Iterable[Any] | None = None
) -> Callable[[_C], _C]:
    """Return a class decorator listing the types to generate models for."""
    if args and types is not None:
        raise TypeError("Pass the types positionally or as types=..., not both")
    if types is not None and isinstance(types, (str, bytes)):
        raise TypeError("types must be an iterable of types, not a string")
    if isinstance(types, (set, frozenset)):
        raise TypeError("types must be an ordered iterable, not a set")

    listed = _unique(args if types is None else types)

    def decorate(cls: _C) -> _C:
        if not isinstance(cls, type):
            raise TypeError("@model_generation_target can only decorate classes")
        # Own attribute only; subclasses of a marker are not targets
        setattr(cls, TARGET_ATTRIBUTE, TargetSpec(listed))
        return cls

    return decorate


def get_target_spec(cls: type) -> TargetSpec | None:
    """The TargetSpec declared directly on cls, ignoring inherited ones."""
    spec = cls.__dict__.get(TARGET_ATTRIBUTE)
    return spec if isinstance(spec, TargetSpec) else None
