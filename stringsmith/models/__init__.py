"""Data models for the string extraction pipeline."""

from .localized_string import StringKey, LocalizedString, ResourceString

__all__ = [
    "StringKey",
    "LocalizedString",
    "ResourceString",
]
