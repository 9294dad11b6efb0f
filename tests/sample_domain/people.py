"""Plain domain classes and enumerations."""

from __future__ import annotations

import enum
import uuid


class AddressType(enum.Enum):
    Business = 0
    Home = 1


class BoxType(enum.Enum):
    Small = "S"
    Large = "L"


class Unused(enum.Enum):
    pass


class Box:
    """Nothing to mirror."""


class Address:
    street: str
    city: str
    type: AddressType


class Person:
    id: uuid.UUID
    name: str
    nickname: str | None
    address: Address
    previous_address: Address | None

    @property
    def display_name(self) -> str:
        return self.name.title()


class Vehicle:
    plate: str
    box: BoxType | None
    owner_ids: list[uuid.UUID]
