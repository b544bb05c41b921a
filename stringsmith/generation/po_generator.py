"""Writer for gettext PO catalogs."""

import re
from typing import List, Optional

from ..models.localized_string import LocalizedString
from .generator import Generator

LINE_PATTERN = re.compile(r"[^\n]*\n|[^\n]+")


def escape_po(value: str) -> str:
    """Escape a single line for use inside a quoted PO string."""
    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\t", "\\t")
        .replace("\r", "\\r")
    )


class PoGenerator(Generator):
    """
    Writes one PO stanza per buffered string.

    Stanza layout: translator comments, developer comments, references,
    format flags, msgid, msgid_plural, then msgstr or msgstr[N].
    Untranslated strings are written with their source text as msgstr.
    """

    name = "po"

    def render(self) -> str:
        lines: List[str] = []
        for localized in self.strings:
            self._write_stanza(lines, localized)
        return "".join(f"{line}\n" for line in lines)

    def _write_stanza(self, lines: List[str], localized: LocalizedString) -> None:
        self._write_comment(lines, "#", localized.translator_comments)
        self._write_comment(lines, "#.", localized.developer_comments)
        for reference in localized.references:
            self._write_comment(lines, "#:", reference)
        self._write_comment(lines, "#,", localized.string_format_hint)

        singular = localized.untranslated_singular_value
        plural = localized.untranslated_plural_value

        self._write_string(lines, "msgid", singular)
        if plural is not None:
            self._write_string(lines, "msgid_plural", plural)

        # Without translations only the singular source text is emitted
        translated = localized.translated_values or [singular]

        if len(translated) == 1:
            self._write_string(lines, "msgstr", translated[0])
        else:
            for index, value in enumerate(translated):
                self._write_string(lines, f"msgstr[{index}]", value)

        lines.append("")

    @staticmethod
    def _write_comment(lines: List[str], marker: str, value: Optional[str]) -> None:
        if not value or not value.strip():
            return

        for line in value.split("\n"):
            if line.strip():
                lines.append(f"{marker} {line.rstrip()}")

    @staticmethod
    def _write_string(lines: List[str], keyword: str, value: Optional[str]) -> None:
        if value is None:
            return

        if "\n" not in value:
            lines.append(f'{keyword} "{escape_po(value)}"')
            return

        lines.append(f'{keyword} ""')
        for chunk in LINE_PATTERN.findall(value):
            if chunk.endswith("\n"):
                lines.append(f'"{escape_po(chunk[:-1])}\\n"')
            else:
                lines.append(f'"{escape_po(chunk)}"')
