"""Runtime front-end: builds the symbol model from imported Python modules.

Classes describe their properties through annotated attributes and
``property`` objects; enumerations are ``enum.Enum`` subclasses; generic
classes are ``typing.Generic`` subclasses (or PEP 695 classes) referenced as
``Registration[Person]``.
"""

from __future__ import annotations

import ast
import dataclasses
import enum
import importlib
import inspect
import types
import typing
from collections.abc import Iterable, Sequence
from typing import Any, ClassVar, TypeVar, Union, get_args, get_origin

import structlog

from modelmapper.attributes import get_target_spec
from modelmapper.core.errors import DiscoveryError
from modelmapper.symbols import (
    BUILTINS_NAMESPACE,
    ConstantInfo,
    PropertyInfo,
    SourceLocation,
    TargetDeclaration,
    TypeInfo,
    TypeKind,
    TypeRef,
)

log = structlog.get_logger(__name__)

_NONE_TYPE = type(None)


# =============================================================================
# Type references
# =============================================================================


def _is_union(tp: Any) -> bool:
    origin = get_origin(tp)
    return origin is Union or origin is types.UnionType


def display_name(tp: Any) -> str:
    """Fully-qualified display form of a type; builtins stay unqualified."""
    if tp is None or tp is _NONE_TYPE:
        return "None"
    if tp is Ellipsis:
        return "..."
    if isinstance(tp, TypeVar):
        return tp.__name__
    if isinstance(tp, list):
        return "[" + ", ".join(display_name(a) for a in tp) + "]"
    if _is_union(tp):
        return " | ".join(display_name(a) for a in get_args(tp))
    origin = get_origin(tp)
    if origin is not None:
        args = get_args(tp)
        if not args:
            return display_name(origin)
        return f"{display_name(origin)}[{', '.join(display_name(a) for a in args)}]"
    if isinstance(tp, type):
        if tp.__module__ == BUILTINS_NAMESPACE:
            return tp.__qualname__
        return f"{tp.__module__}.{tp.__qualname__}"
    return repr(tp)


def _kind_of(tp: Any) -> TypeKind:
    target = get_origin(tp) or tp
    if isinstance(target, type):
        if issubclass(target, enum.Enum):
            return TypeKind.ENUM
        return TypeKind.CLASS
    return TypeKind.OTHER


def type_ref(tp: Any) -> TypeRef:
    """Describe tp as a TypeRef (no None stripping, no substitution)."""
    if _is_union(tp):
        return TypeRef(
            name="Union",
            namespace="",
            display_name=display_name(tp),
            kind=TypeKind.OTHER,
            type_arguments=tuple(type_ref(a) for a in get_args(tp)),
        )

    origin = get_origin(tp)
    subject = origin if isinstance(origin, type) else tp
    if tp is None or tp is _NONE_TYPE:
        name, namespace = "None", BUILTINS_NAMESPACE
    elif isinstance(subject, (type, TypeVar)):
        name, namespace = subject.__name__, getattr(subject, "__module__", "")
    else:
        name = getattr(subject, "_name", None) or getattr(subject, "__name__", None) or repr(subject)
        namespace = getattr(subject, "__module__", "") or ""

    arguments: tuple[TypeRef, ...] = ()
    if origin is not None:
        arguments = tuple(
            type_ref(a) for a in get_args(tp) if not isinstance(a, list) and a is not Ellipsis
        )
    return TypeRef(
        name=name,
        namespace=namespace if isinstance(namespace, str) else "",
        display_name=display_name(tp),
        kind=_kind_of(tp),
        type_arguments=arguments,
    )


def _strip_none(tp: Any) -> tuple[Any, bool]:
    """Split ``X | None`` into (X, True); anything else into (tp, False)."""
    if not _is_union(tp):
        return tp, False
    args = get_args(tp)
    rest = tuple(a for a in args if a is not _NONE_TYPE)
    if len(rest) == len(args):
        return tp, False
    if len(rest) == 1:
        return rest[0], True
    return Union[rest], True  # noqa: UP007


def _substitute(tp: Any, mapping: dict[Any, Any]) -> Any:
    if not mapping:
        return tp
    if isinstance(tp, TypeVar):
        return mapping.get(tp, tp)
    parameters = getattr(tp, "__parameters__", ())
    if get_origin(tp) is not None and parameters:
        return tp[tuple(mapping.get(p, p) for p in parameters)]
    return tp


# =============================================================================
# Type info
# =============================================================================


def _is_record(cls: type) -> bool:
    if dataclasses.is_dataclass(cls):
        return True
    return issubclass(cls, tuple) and hasattr(cls, "_fields")


def _literal_value(value: Any) -> Any:
    try:
        return value if ast.literal_eval(repr(value)) == value else None
    except (ValueError, SyntaxError, TypeError):
        return None


def _constants(cls: type[enum.Enum]) -> tuple[ConstantInfo, ...]:
    return tuple(
        ConstantInfo(name=name, value=_literal_value(member.value))
        for name, member in cls.__members__.items()
    )


def _resolved_hints(obj: Any, owner: str, scope: type | None = None) -> dict[str, Any]:
    # PEP 695 parameters live in an annotation scope get_type_hints can't see
    # before 3.13, so string annotations naming them need them passed in.
    type_params = getattr(scope if scope is not None else obj, "__type_params__", ())
    localns = {p.__name__: p for p in type_params} or None
    try:
        return typing.get_type_hints(obj, localns=localns)
    except (NameError, TypeError) as e:
        raise DiscoveryError.unsupported_type(owner, f"unresolvable annotation: {e}") from e


def _property_type(prop: property, owner: str, scope: type) -> Any:
    if prop.fget is not None:
        hints = _resolved_hints(prop.fget, owner, scope)
        if "return" in hints:
            return hints["return"]
    if prop.fset is not None:
        hints = _resolved_hints(prop.fset, owner, scope)
        params = [n for n in inspect.signature(prop.fset).parameters if n != "self"]
        if params and params[0] in hints:
            return hints[params[0]]
    return Any


def _property_info(
    name: str,
    declared: Any,
    *,
    getter: bool,
    setter: bool,
    parameters: Sequence[TypeVar],
    mapping: dict[Any, Any],
) -> PropertyInfo:
    public = not name.startswith("_")
    inner, nullable = _strip_none(declared)
    type_parameter = inner.__name__ if isinstance(inner, TypeVar) and inner in parameters else None
    return PropertyInfo(
        name=name,
        type=type_ref(_substitute(inner, mapping)),
        nullable=nullable,
        has_public_getter=public and getter,
        has_public_setter=public and setter,
        type_parameter=type_parameter,
    )


def _properties(
    cls: type, parameters: Sequence[TypeVar], mapping: dict[Any, Any]
) -> tuple[PropertyInfo, ...]:
    owner = display_name(cls)
    own_annotations = inspect.get_annotations(cls)
    hints = _resolved_hints(cls, owner) if own_annotations else {}
    result: list[PropertyInfo] = []
    seen: set[str] = set()

    for name in own_annotations:
        declared = hints.get(name, Any)
        if declared is ClassVar or get_origin(declared) is ClassVar:
            continue
        seen.add(name)
        result.append(
            _property_info(
                name, declared, getter=True, setter=True, parameters=parameters, mapping=mapping
            )
        )

    for name, attr in vars(cls).items():
        if name in seen or not isinstance(attr, property):
            continue
        seen.add(name)
        result.append(
            _property_info(
                name,
                _property_type(attr, owner, cls),
                getter=attr.fget is not None,
                setter=attr.fset is not None,
                parameters=parameters,
                mapping=mapping,
            )
        )
    return tuple(result)


def type_info_for(tp: Any) -> TypeInfo:
    """Describe a class, enum or generic instantiation listed by a declaration."""
    origin = get_origin(tp)
    cls = origin if origin is not None else tp
    if not isinstance(cls, type):
        raise DiscoveryError.unsupported_type(display_name(tp), "not a class or enumeration")

    if issubclass(cls, enum.Enum):
        return TypeInfo(
            name=cls.__name__,
            namespace=cls.__module__,
            display_name=display_name(cls),
            kind=TypeKind.ENUM,
            constants=_constants(cls),
        )

    parameters: tuple[TypeVar, ...] = tuple(
        p for p in getattr(cls, "__parameters__", ()) if isinstance(p, TypeVar)
    )
    arguments: tuple[Any, ...] = get_args(tp) if origin is not None else ()
    mapping: dict[Any, Any] = dict(zip(parameters, arguments, strict=False))
    unbound = bool(parameters) and (
        not arguments or any(isinstance(a, TypeVar) or getattr(a, "__parameters__", ()) for a in arguments)
    )

    return TypeInfo(
        name=cls.__name__,
        namespace=cls.__module__,
        display_name=display_name(tp),
        definition_name=display_name(cls),
        kind=TypeKind.CLASS,
        is_record=_is_record(cls),
        is_generic=bool(parameters) or bool(arguments),
        is_unbound_generic=unbound,
        type_parameters=tuple(p.__name__ for p in parameters),
        type_arguments=tuple(type_ref(a) for a in arguments),
        properties=_properties(cls, parameters, mapping),
    )


# =============================================================================
# Declarations
# =============================================================================


def declaration_for(cls: type) -> TargetDeclaration | None:
    """Build the declaration carried by cls, or None if cls is not a target."""
    spec = get_target_spec(cls)
    if spec is None:
        return None
    location = SourceLocation(cls.__module__, cls.__qualname__)
    infos = []
    for index, tp in enumerate(spec.types):
        try:
            infos.append(type_info_for(tp))
        except DiscoveryError as e:
            raise DiscoveryError.invalid_declaration(
                str(location.with_argument(index)), e.message
            ) from e
    return TargetDeclaration(
        namespace=cls.__module__,
        name=cls.__qualname__,
        types=tuple(infos),
        location=location,
    )


def discover_declarations(modules: Iterable[types.ModuleType]) -> list[TargetDeclaration]:
    """Collect declarations from the top-level classes of each module, in order."""
    declarations: list[TargetDeclaration] = []
    for module in modules:
        found = 0
        for obj in list(vars(module).values()):
            if not isinstance(obj, type) or obj.__module__ != module.__name__:
                continue
            declaration = declaration_for(obj)
            if declaration is not None:
                declarations.append(declaration)
                found += 1
        log.debug("module_scanned", module=module.__name__, declarations=found)
    return declarations


def import_modules(names: Iterable[str]) -> list[types.ModuleType]:
    """Import modules by dotted name, reporting failures as DiscoveryError."""
    modules = []
    for name in names:
        try:
            modules.append(importlib.import_module(name))
        except ImportError as e:
            raise DiscoveryError.import_failed(name, str(e)) from e
    return modules
