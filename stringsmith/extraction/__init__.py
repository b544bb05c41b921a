"""String extraction and file parsing modules."""

from .parser import Parser
from .po_parser import PoParser
from .android_parser import AndroidResourceParser
from .python_parser import PythonSourceParser
from .aggregate_parser import AggregateParser

__all__ = [
    "Parser",
    "PoParser",
    "AndroidResourceParser",
    "PythonSourceParser",
    "AggregateParser",
]
