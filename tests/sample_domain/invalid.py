"""A module whose targets trip the validators."""

from dataclasses import dataclass

from modelmapper import model_generation_target
from sample_domain.people import Person
from sample_domain.wrappers import Registration


@dataclass
class Point:
    x: int = 0
    y: int = 0


@model_generation_target(Person, Point)
class WithRecord:
    pass


@model_generation_target(Registration)
class WithOpenGeneric:
    pass
