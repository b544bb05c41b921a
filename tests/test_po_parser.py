"""Tests for the PO catalog parser."""

import pytest

from stringsmith.errors import ParseError
from stringsmith.extraction import PoParser

CATALOG = '''msgid ""
msgstr ""
"Content-Type: text/plain; charset=UTF-8\\n"

#. Main window title
#: app/window.py:20
msgid "Welcome"
msgstr "Bienvenue"

#: app/list.py:8
#, python-format
msgid "%d item"
msgid_plural "%d items"
msgstr[0] "%d élément"
msgstr[1] "%d éléments"

msgid "Untranslated"
msgstr ""

#~ msgid "Obsolete"
#~ msgstr "Obsolète"
'''


class TestPoParser:
    """Tests for reading PO catalogs."""

    def test_parse_catalog(self, write_file):
        parser = PoParser()
        parser.add(write_file("fr.po", CATALOG))

        strings = list(parser.parse())

        assert [s.untranslated_singular_value for s in strings] == ["Welcome", "%d item", "Untranslated"]

        welcome, items, untranslated = strings
        assert welcome.translated_values == ["Bienvenue"]
        assert welcome.developer_comments == "Main window title"
        assert welcome.references == ["app/window.py:20"]

        assert items.untranslated_plural_value == "%d items"
        assert items.translated_values == ["%d élément", "%d éléments"]
        assert items.string_format_hint == "python-format"

        assert untranslated.translated_values is None

    def test_parse_is_restartable(self, write_file):
        parser = PoParser()
        parser.add(write_file("fr.po", CATALOG))

        assert len(list(parser.parse())) == len(list(parser.parse())) == 3

    def test_missing_file_raises_os_error(self, tmp_path):
        parser = PoParser()
        parser.add(tmp_path / "missing.po")

        with pytest.raises(OSError):
            list(parser.parse())

    def test_syntax_error_raises_parse_error(self, write_file):
        path = write_file("broken.po", 'msgid "Hello"\nmsgstr "Bonjour\nthis is not po\n')
        parser = PoParser()
        parser.add(path)

        with pytest.raises(ParseError) as exc_info:
            list(parser.parse())

        assert str(path) in str(exc_info.value)

    def test_supports_po_and_pot(self):
        assert PoParser.supports("messages.pot")
        assert PoParser.supports("fr.PO")
        assert not PoParser.supports("strings.xml")
