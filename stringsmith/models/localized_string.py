"""Data models for extracted, translatable strings."""

from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional


class StringKey(NamedTuple):
    """Identity of a localized string: its untranslated singular/plural pair."""

    singular: str
    plural: Optional[str] = None


@dataclass
class LocalizedString:
    """Represents one translatable string and its metadata."""

    untranslated_singular_value: str
    name: Optional[str] = None
    untranslated_plural_value: Optional[str] = None
    translated_values: Optional[List[str]] = None  # index 0 singular, then plural slots
    translator_comments: Optional[str] = None
    developer_comments: Optional[str] = None
    references: List[str] = field(default_factory=list)
    string_format_hint: Optional[str] = None

    def __post_init__(self):
        if self.untranslated_singular_value is None:
            raise ValueError("untranslated_singular_value is required")
        if (
            self.untranslated_plural_value is not None
            and self.translated_values is not None
            and len(self.translated_values) < 2
        ):
            raise ValueError(
                f"Plural string {self.untranslated_singular_value!r} needs at least "
                f"2 translated values, got {len(self.translated_values)}"
            )

    @property
    def key(self) -> StringKey:
        """Identity used for deduplication."""
        return StringKey(self.untranslated_singular_value, self.untranslated_plural_value)

    @property
    def has_translations(self) -> bool:
        """Check if this string carries translated values."""
        return self.translated_values is not None

    def effective_translated_values(self) -> List[str]:
        """Get translated values, falling back to the untranslated text."""
        if self.translated_values is not None:
            return list(self.translated_values)
        if self.untranslated_plural_value is None:
            return [self.untranslated_singular_value]
        return [self.untranslated_singular_value, self.untranslated_plural_value]

    def add_reference(self, reference: str) -> None:
        """Add a source reference unless it is already known."""
        if reference not in self.references:
            self.references.append(reference)

    def merge_references(self, other: "LocalizedString") -> None:
        """Union another sighting's references into this string."""
        for reference in other.references:
            self.add_reference(reference)


@dataclass
class ResourceString:
    """A single platform resource entry derived from a LocalizedString."""

    id: str
    untranslated: str
    translated: str
