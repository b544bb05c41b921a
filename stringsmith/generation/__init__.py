"""Catalog generators."""

from .generator import Generator
from .po_generator import PoGenerator
from .android_generator import AndroidGenerator
from .registry import generator_registry

__all__ = ["Generator", "PoGenerator", "AndroidGenerator", "generator_registry"]
