"""Tests for frontend/runtime.py module.

Covers:
- display_name() / type_ref()
- type_info_for() for classes, enumerations and generic instantiations
- declaration_for() / discover_declarations()
- import_modules()
"""

import enum
import uuid
from typing import ClassVar

import pytest

from modelmapper import model_generation_target
from modelmapper.core.errors import DiscoveryError, ErrorCode
from modelmapper.frontend.runtime import (
    declaration_for,
    discover_declarations,
    display_name,
    import_modules,
    type_info_for,
    type_ref,
)
from modelmapper.symbols import TypeKind
from sample_domain import invalid
from sample_domain.contracts import Contracts
from sample_domain.people import Address, AddressType, Person, Vehicle
from sample_domain.wrappers import Holder, Pair, Registration


class TestDisplayName:
    @pytest.mark.parametrize(
        ("tp", "expected"),
        [
            (int, "int"),
            (None, "None"),
            (Person, "sample_domain.people.Person"),
            (str | None, "str | None"),
            (list[uuid.UUID], "list[uuid.UUID]"),
            (
                Registration[Person],
                "sample_domain.wrappers.Registration[sample_domain.people.Person]",
            ),
        ],
    )
    def test_display_forms(self, tp, expected: str) -> None:
        assert display_name(tp) == expected


class TestTypeRef:
    def test_builtin(self) -> None:
        ref = type_ref(str)
        assert ref.name == "str"
        assert ref.is_builtin
        assert list(ref.namespaces()) == []

    def test_parameterized_builtin_lists_argument_namespaces(self) -> None:
        ref = type_ref(list[uuid.UUID])
        assert ref.name == "list"
        assert [a.display_name for a in ref.type_arguments] == ["uuid.UUID"]
        assert list(ref.namespaces()) == ["uuid"]

    def test_enum_kind(self) -> None:
        assert type_ref(AddressType).kind == TypeKind.ENUM


class TestTypeInfoForClass:
    def test_given_class_when_described_then_properties_in_declaration_order(self) -> None:
        # When
        info = type_info_for(Person)

        # Then
        assert info.kind == TypeKind.CLASS
        assert info.namespace == "sample_domain.people"
        assert [p.name for p in info.properties] == [
            "id",
            "name",
            "nickname",
            "address",
            "previous_address",
            "display_name",
        ]

    def test_given_optional_annotation_then_nullable_with_inner_type(self) -> None:
        props = {p.name: p for p in type_info_for(Person).properties}

        assert props["nickname"].nullable is True
        assert props["nickname"].type.display_name == "str"
        assert props["previous_address"].type.display_name == "sample_domain.people.Address"
        assert props["address"].nullable is False

    def test_given_getter_only_property_then_no_setter(self) -> None:
        prop = next(p for p in type_info_for(Person).properties if p.name == "display_name")

        assert prop.has_public_getter is True
        assert prop.has_public_setter is False
        assert prop.type.display_name == "str"

    def test_given_private_and_class_level_attributes(self) -> None:
        """Private names are not public; ClassVar entries are not properties."""

        class Account:
            count: ClassVar[int] = 0
            _secret: str
            owner: str

        props = {p.name: p for p in type_info_for(Account).properties}

        assert set(props) == {"_secret", "owner"}
        assert props["_secret"].has_public_getter is False
        assert props["owner"].has_public_getter is True

    def test_given_dataclass_then_record(self) -> None:
        assert type_info_for(invalid.Point).is_record is True
        assert type_info_for(Address).is_record is False

    def test_given_non_class_then_unsupported(self) -> None:
        with pytest.raises(DiscoveryError) as exc_info:
            type_info_for(42)
        assert exc_info.value.code == ErrorCode.DISCOVERY_UNSUPPORTED_TYPE


class TestTypeInfoForEnum:
    def test_constants_in_declaration_order(self) -> None:
        info = type_info_for(AddressType)

        assert info.kind == TypeKind.ENUM
        assert [(c.name, c.value) for c in info.constants] == [("Business", 0), ("Home", 1)]

    def test_non_literal_value_is_none(self) -> None:
        class Marker(enum.Enum):
            A = object()

        assert type_info_for(Marker).constants[0].value is None


class TestTypeInfoForGenerics:
    def test_given_closed_instantiation_then_arguments_substituted(self) -> None:
        # When
        info = type_info_for(Registration[Person])

        # Then
        assert info.is_generic is True
        assert info.is_unbound_generic is False
        assert info.definition_name == "sample_domain.wrappers.Registration"
        assert info.type_parameters == ("T",)
        assert [a.display_name for a in info.type_arguments] == ["sample_domain.people.Person"]
        registrant = next(p for p in info.properties if p.name == "registrant")
        assert registrant.type_parameter == "T"
        assert registrant.type.display_name == "sample_domain.people.Person"

    def test_given_definition_then_unbound(self) -> None:
        info = type_info_for(Registration)

        assert info.is_generic is True
        assert info.is_unbound_generic is True

    def test_given_two_parameters_then_each_property_tracks_its_own(self) -> None:
        info = type_info_for(Pair[str, Person])
        props = {p.name: p for p in info.properties}

        assert props["key"].type_parameter == "K"
        assert props["key"].type.display_name == "str"
        assert props["value"].type_parameter == "V"
        assert props["value"].type.display_name == "sample_domain.people.Person"


    def test_given_pep695_class_then_parameters_resolved(self) -> None:
        """String annotations naming PEP 695 parameters resolve like TypeVar ones."""
        # When
        info = type_info_for(Holder[Person])

        # Then
        assert info.is_generic is True
        assert info.is_unbound_generic is False
        assert info.type_parameters == ("H",)
        props = {p.name: p for p in info.properties}
        assert props["label"].nullable is True
        assert props["item"].type_parameter == "H"
        assert props["item"].type.display_name == "sample_domain.people.Person"
        assert props["first"].type_parameter == "H"
        assert props["first"].has_public_setter is False

    def test_given_unbound_pep695_class_then_unbound(self) -> None:
        assert type_info_for(Holder).is_unbound_generic is True


class TestDeclarations:
    def test_given_marker_class_then_declaration(self) -> None:
        declaration = declaration_for(Contracts)

        assert declaration is not None
        assert declaration.namespace == "sample_domain.contracts"
        assert declaration.name == "Contracts"
        assert len(declaration.types) == 10
        assert str(declaration.location) == "sample_domain.contracts:Contracts"

    def test_given_plain_class_then_none(self) -> None:
        assert declaration_for(Vehicle) is None

    def test_given_bad_argument_then_location_names_its_index(self) -> None:
        @model_generation_target(Person, 42)
        class Broken:
            pass

        with pytest.raises(DiscoveryError) as exc_info:
            declaration_for(Broken)
        assert exc_info.value.code == ErrorCode.DISCOVERY_INVALID_DECLARATION
        assert exc_info.value.details["location"].endswith("#1")

    def test_discover_in_module_order(self) -> None:
        declarations = discover_declarations([invalid])

        assert [d.name for d in declarations] == ["WithRecord", "WithOpenGeneric"]

    def test_imported_markers_are_not_rediscovered(self) -> None:
        """A marker imported into another module belongs to its defining module."""
        import sample_domain.catalog as catalog

        declarations = discover_declarations([catalog])

        assert [d.name for d in declarations] == ["Catalog"]


class TestImportModules:
    def test_imports_by_name(self) -> None:
        modules = import_modules(["sample_domain.contracts"])
        assert modules[0].__name__ == "sample_domain.contracts"

    def test_missing_module(self) -> None:
        with pytest.raises(DiscoveryError) as exc_info:
            import_modules(["sample_domain.does_not_exist"])
        assert exc_info.value.code == ErrorCode.DISCOVERY_IMPORT_FAILED
