"""ModelMapper - generate model types and mappers from domain classes."""

from modelmapper.attributes import model_generation_target

__version__ = "0.1.0"

__all__ = ["model_generation_target"]
