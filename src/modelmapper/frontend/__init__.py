"""Front-ends that turn Python modules into the symbol model."""

from modelmapper.frontend.runtime import (
    declaration_for,
    discover_declarations,
    display_name,
    import_modules,
    type_info_for,
    type_ref,
)

__all__ = [
    "declaration_for",
    "discover_declarations",
    "display_name",
    "import_modules",
    "type_info_for",
    "type_ref",
]
