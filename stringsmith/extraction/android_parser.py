"""Parser for Android string resource XML (res/values/strings.xml)."""

import os
from pathlib import Path
from typing import Iterator, Optional
from xml.sax.saxutils import escape

from lxml import etree

from ..errors import ParseError
from ..models.localized_string import LocalizedString
from .parser import Parser


def unescape_resource_text(value: str) -> str:
    """Undo the quote escaping Android requires inside <string> text."""
    return value.replace("\\'", "'").replace('\\"', '"')


def inner_xml(element) -> str:
    """
    Get the content of an element including any inline markup children.

    Plain text comes back unescaped. Content with child nodes comes back as
    escaped XML so the markup can be written out again unchanged.
    """
    if len(element) == 0:
        return element.text or ""

    parts = [escape(element.text or "")]
    for child in element:
        parts.append(etree.tostring(child, encoding="unicode", with_tail=True))
    return "".join(parts)


class AndroidResourceParser(Parser):
    """
    Parser for Android <resources> files.

    Each <string name="..."> element becomes one LocalizedString whose
    untranslated value is the element content. Resources marked
    translatable="false" are skipped. An XML comment directly before a
    string is kept as its developer comment.
    """

    supported_extensions = (".xml",)

    def parse_path(self, path: Path) -> Iterator[LocalizedString]:
        self.log(1, f"Parsing Android resources: {path}")

        with open(path, "rb") as f:
            data = f.read()

        try:
            root = etree.fromstring(data, parser=etree.XMLParser(resolve_entities=False))
        except etree.XMLSyntaxError as e:
            raise ParseError(path, str(e)) from e

        if root.tag != "resources":
            raise ParseError(path, f"expected <resources> root element, got <{root.tag}>")

        comment: Optional[str] = None
        for elem in root:
            if elem.tag is etree.Comment:
                comment = (elem.text or "").strip() or None
                continue

            if elem.tag != "string":
                self.log(1, f"Skipping unsupported <{elem.tag}> resource in {path}")
                comment = None
                continue

            name = elem.get("name")
            if not name:
                self.log(1, f"Skipping <string> without a name in {path} (line {elem.sourceline})")
            elif elem.get("translatable", "true").lower() == "false":
                self.log(2, f"Skipping untranslatable string: {name}")
            else:
                localized = LocalizedString(
                    untranslated_singular_value=unescape_resource_text(inner_xml(elem)),
                    name=name,
                    developer_comments=comment,
                    references=[f"{os.path.abspath(path)}:{elem.sourceline}"],
                )
                self.log(2, f"Found string: {name}")
                yield localized

            comment = None
