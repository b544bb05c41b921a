"""Parser for gettext PO/POT catalogs."""

from pathlib import Path
from typing import Iterator, List, Optional

import polib

from ..errors import ParseError
from ..models.localized_string import LocalizedString
from .parser import Parser


class PoParser(Parser):
    """Parser for .po and .pot files."""

    supported_extensions = (".po", ".pot")

    def parse_path(self, path: Path) -> Iterator[LocalizedString]:
        self.log(1, f"Parsing PO catalog: {path}")
        yield from self.parse_string(self.read_text(path), path=str(path))

    def parse_string(self, content: str, path: str = "<string>") -> Iterator[LocalizedString]:
        """
        Parse PO content from a string.

        Args:
            content: PO catalog text
            path: Name used in error messages

        Returns:
            Iterator of LocalizedString records, header and obsolete entries excluded
        """
        try:
            catalog = polib.pofile(content)
        except (OSError, ValueError) as e:
            # polib reports syntax errors as IOError
            raise ParseError(path, str(e)) from e

        for entry in catalog:
            if entry.obsolete:
                continue
            if not entry.msgid:
                self.log(1, f"Skipping entry with empty msgid in {path}")
                continue

            localized = self._parse_entry(entry)
            self.log(2, f"Found string: {localized.untranslated_singular_value}")
            yield localized

    def _parse_entry(self, entry: polib.POEntry) -> LocalizedString:
        """Convert a polib entry into our model."""
        plural = entry.msgid_plural or None

        return LocalizedString(
            untranslated_singular_value=entry.msgid,
            untranslated_plural_value=plural,
            translated_values=self._translated_values(entry, plural),
            translator_comments=entry.tcomment.strip() or None,
            developer_comments=entry.comment.strip() or None,
            references=[f"{fil}:{line}" if line else fil for fil, line in entry.occurrences],
            string_format_hint=", ".join(entry.flags) or None,
        )

    def _translated_values(self, entry: polib.POEntry, plural: Optional[str]) -> Optional[List[str]]:
        """Get translated values, or None when the entry is untranslated."""
        if entry.msgstr_plural:
            values = [entry.msgstr_plural[i] for i in sorted(entry.msgstr_plural)]
        elif plural is None:
            values = [entry.msgstr]
        else:
            # A plural entry with a single msgstr carries only the source fallback
            return None

        if not any(values):
            return None
        if plural is not None and len(values) < 2:
            # Single plural form catalogs still fill the plural slot
            values = values + values[-1:]
        return values
