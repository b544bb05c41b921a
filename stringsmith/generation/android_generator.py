"""Writer for Android string resource XML."""

from typing import Dict, Set

from lxml import etree

from ..extraction.android_parser import AndroidResourceParser
from ..models.localized_string import LocalizedString
from .generator import Generator

INDENT = "  "


def escape_resource_text(value: str) -> str:
    """Escape single quotes the way Android resource compilation requires."""
    return value.replace("'", "\\'")


class AndroidGenerator(Generator):
    """
    Writes a <resources> document with one <string> per resource id.

    Plural strings fan out into one id per plural slot. An id reached
    twice within one document is only written the first time.
    """

    name = "android"

    def render(self) -> str:
        resources = etree.Element("resources")
        generated: Set[str] = set()

        for localized in self.strings:
            for resource_string in self.resource_strings(localized):
                if resource_string.id in generated:
                    continue
                self._append_string(resources, resource_string.id, resource_string.translated)
                generated.add(resource_string.id)

        return self._serialize(resources)

    def localize_manual_strings_xml(self, unlocalized_path: str, localized_path: str) -> None:
        """
        Translate a hand-maintained strings.xml using the buffered strings.

        Each hand-authored string is matched to a buffered string by its
        untranslated value and written under its hand-authored name with the
        first translated value. Strings without a match are left out of the
        localized file.

        Args:
            unlocalized_path: Hand-maintained, untranslated strings.xml
            localized_path: Path to write the localized strings.xml to
        """
        parser = AndroidResourceParser(log_level=self.log_level, console=self.console)
        parser.add(unlocalized_path)

        by_untranslated: Dict[str, LocalizedString] = {}
        for localized in self.strings:
            by_untranslated.setdefault(localized.untranslated_singular_value, localized)

        resources = etree.Element("resources")
        for manual in parser.parse():
            localized = by_untranslated.get(manual.untranslated_singular_value)
            if localized is None:
                self.log(2, f"No translation for manual string: {manual.name}")
                continue

            self._append_string(resources, manual.name, localized.effective_translated_values()[0])

        self.write_output(self._serialize(resources), localized_path)

    @staticmethod
    def _append_string(parent, name: str, value: str) -> None:
        """Add a <string> element, keeping inline markup when the value is well-formed XML."""
        escaped = escape_resource_text(value)
        try:
            element = etree.fromstring(f"<string>{escaped}</string>")
        except etree.XMLSyntaxError:
            element = etree.Element("string")
            element.text = escaped

        element.set("name", name)
        parent.append(element)

    @staticmethod
    def _serialize(resources) -> str:
        # Indent only the <string> level; string content is never reformatted
        children = list(resources)
        if children:
            resources.text = "\n" + INDENT
            for child in children:
                child.tail = "\n" + INDENT
            children[-1].tail = "\n"

        document = etree.tostring(resources, xml_declaration=True, encoding="utf-8")
        return document.decode("utf-8") + "\n"
