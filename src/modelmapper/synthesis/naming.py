"""Names of generated artifacts, types and mapper methods."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from modelmapper.symbols import TypeRef

MODEL_SUFFIX = "Model"
MAPPER_SUFFIX = "Mapper"
TO_MODEL = "to_model"
TO_DOMAIN = "to_domain"
GENERIC_PARAMETER_PREFIX = "T"
DEFAULT_FILE_EXTENSION = "g.py"

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_NON_IDENTIFIER = re.compile(r"\W+")


def model_name(type_name: str) -> str:
    return f"{type_name}{MODEL_SUFFIX}"


def mapper_name(type_name: str) -> str:
    return f"{type_name}{MAPPER_SUFFIX}"


def generic_parameter(position: int) -> str:
    return f"{GENERIC_PARAMETER_PREFIX}{position}"


def build_file_name(
    generated_name: str,
    source_namespace: str,
    target_namespace: str,
    extension: str = DEFAULT_FILE_EXTENSION,
) -> str:
    """Hint name of one artifact: ``<target ns>.<source ns>.<Name>.<ext>``.

    Unique across a run as long as destination namespaces are unique and no
    declaration lists two types with the same short name.
    """
    return f"{target_namespace}.{source_namespace}.{generated_name}.{extension.lstrip('.')}"


def snake_case(name: str) -> str:
    """``HTTPServer`` -> ``http_server``; non-identifier runs become ``_``."""
    words = _NON_IDENTIFIER.sub("_", _CAMEL_BOUNDARY.sub("_", name))
    return words.strip("_").lower() or "arg"


def _argument_words(argument: TypeRef) -> list[str]:
    words = [snake_case(argument.name)]
    for nested in argument.type_arguments:
        words.extend(_argument_words(nested))
    return words


def instantiation_suffix(arguments: Sequence[TypeRef]) -> str:
    """Method suffix for one closed instantiation, from its type arguments."""
    words: list[str] = []
    for argument in arguments:
        words.extend(_argument_words(argument))
    return "_".join(words) or "closed"


def assign_suffixes(instantiations: Iterable[tuple[str, Sequence[TypeRef]]]) -> dict[str, str]:
    """Map each instantiation display name to a unique method suffix.

    A repeated suffix gets ``_2``, ``_3``... in encounter order.
    """
    suffixes: dict[str, str] = {}
    used: dict[str, int] = {}
    for display, arguments in instantiations:
        if display in suffixes:
            continue
        base = instantiation_suffix(arguments)
        count = used.get(base, 0) + 1
        used[base] = count
        suffixes[display] = base if count == 1 else f"{base}_{count}"
    return suffixes


def method_name(direction: str, suffix: str | None = None) -> str:
    return f"{direction}_{suffix}" if suffix else direction
