"""Tests for synthesis/enums.py module."""

from __future__ import annotations

import enum

from modelmapper.descriptors import TypeDescriptor
from modelmapper.frontend.runtime import type_info_for
from modelmapper.synthesis.enums import build_enum_mapper, build_enum_model, synthesize_enum
from modelmapper.synthesis.members import SynthesisContext


class TestEnumModel:
    def test_integer_values(self, find) -> None:
        assert build_enum_model(find("people.AddressType")).render() == (
            "from __future__ import annotations\n"
            "\n"
            "import enum\n"
            "\n"
            "\n"
            "class AddressTypeModel(enum.Enum):\n"
            "    Business = 0\n"
            "    Home = 1\n"
        )

    def test_string_values(self, find) -> None:
        text = build_enum_model(find("people.BoxType")).render()

        assert "    Small = 'S'\n    Large = 'L'\n" in text

    def test_values_without_literal_form_use_auto(self) -> None:
        class Sentinel(enum.Enum):
            A = object()

        descriptor = TypeDescriptor.create(type_info_for(Sentinel))
        assert descriptor is not None

        assert "    A = enum.auto()\n" in build_enum_model(descriptor).render()


class TestEnumMapper:
    def test_exhaustive_match_both_directions(self, find) -> None:
        assert build_enum_mapper(find("people.AddressType")).render() == (
            "from __future__ import annotations\n"
            "\n"
            "from sample_domain.people import AddressType\n"
            "\n"
            "\n"
            "class AddressTypeMapper:\n"
            "    @staticmethod\n"
            "    def to_model(value: AddressType) -> AddressTypeModel:\n"
            "        match value:\n"
            "            case AddressType.Business:\n"
            "                return AddressTypeModel.Business\n"
            "            case AddressType.Home:\n"
            "                return AddressTypeModel.Home\n"
            "            case _:\n"
            '                raise ValueError("Unknown enum value")\n'
            "\n"
            "    @staticmethod\n"
            "    def to_domain(value: AddressTypeModel) -> AddressType:\n"
            "        match value:\n"
            "            case AddressTypeModel.Business:\n"
            "                return AddressType.Business\n"
            "            case AddressTypeModel.Home:\n"
            "                return AddressType.Home\n"
            "            case _:\n"
            '                raise ValueError("Unknown enum value")\n'
        )


def test_synthesize_enum_hint_names(find, context: SynthesisContext) -> None:
    sources = synthesize_enum(find("people.BoxType"), context)

    assert [s.hint_name for s in sources] == [
        "sample_domain.contracts.sample_domain.people.BoxTypeModel.g.py",
        "sample_domain.contracts.sample_domain.people.BoxTypeMapper.g.py",
    ]
