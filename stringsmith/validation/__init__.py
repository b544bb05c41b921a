"""Advisory validation of extracted strings."""

from .placeholder_validator import PlaceholderValidator
from .string_analyzer import StringAnalyzer

__all__ = ["PlaceholderValidator", "StringAnalyzer"]
