"""Mapping of generator names to generator classes."""

from typing import Dict, Type

from .android_generator import AndroidGenerator
from .generator import Generator
from .po_generator import PoGenerator


def generator_registry() -> Dict[str, Type[Generator]]:
    """Build a fresh name -> generator class mapping for the command line."""
    return {
        generator_type.name: generator_type
        for generator_type in (PoGenerator, AndroidGenerator)
    }
