"""Tests for the Android resource parser and generator."""

import hashlib

import pytest

from stringsmith.errors import ParseError
from stringsmith.extraction import AndroidResourceParser
from stringsmith.generation import AndroidGenerator
from stringsmith.models import LocalizedString

MANUAL_STRINGS = '''<?xml version="1.0" encoding="utf-8"?>
<resources>
    <!-- Settings screen title -->
    <string name="settings_title">Settings</string>
    <string name="about_title">About us</string>
    <string name="app_name" translatable="false">Notes</string>
    <string name="quote">Don\\'t panic</string>
</resources>
'''


def render(*strings):
    generator = AndroidGenerator()
    for localized in strings:
        generator.add(localized)
    return generator.render()


class TestAndroidResourceParser:
    """Tests for reading strings.xml files."""

    def test_parse_strings(self, write_file):
        parser = AndroidResourceParser()
        parser.add(write_file("values/strings.xml", MANUAL_STRINGS))

        strings = list(parser.parse())

        assert [s.name for s in strings] == ["settings_title", "about_title", "quote"]
        assert strings[0].untranslated_singular_value == "Settings"
        assert strings[0].developer_comments == "Settings screen title"
        assert strings[1].developer_comments is None
        assert strings[2].untranslated_singular_value == "Don't panic"

    def test_parse_keeps_inline_markup(self, write_file):
        path = write_file(
            "strings.xml",
            '<resources><string name="bold">Hello <b>you</b>!</string></resources>',
        )
        parser = AndroidResourceParser()
        parser.add(path)

        assert [s.untranslated_singular_value for s in parser.parse()] == ["Hello <b>you</b>!"]

    def test_parse_entity_with_inline_markup_stays_escaped(self, write_file):
        path = write_file(
            "strings.xml",
            '<resources><string name="x">A &amp; <b>B</b></string><string name="y">Fish &amp; Chips</string></resources>',
        )
        parser = AndroidResourceParser()
        parser.add(path)

        values = [s.untranslated_singular_value for s in parser.parse()]

        assert values == ["A &amp; <b>B</b>", "Fish & Chips"]

    def test_entity_and_markup_survive_regeneration(self, write_file):
        parser = AndroidResourceParser()
        parser.add(write_file("strings.xml", '<resources><string name="x">A &amp; <b>B</b></string></resources>'))

        output = render(*parser.parse())

        assert '<string name="x">A &amp; <b>B</b></string>' in output

    def test_internal_entities_are_not_expanded(self, write_file):
        path = write_file(
            "strings.xml",
            '<!DOCTYPE resources [<!ENTITY secret "Expanded">]>\n'
            '<resources><string name="a">Value &secret;</string></resources>',
        )
        parser = AndroidResourceParser()
        parser.add(path)

        (localized,) = parser.parse()

        assert "Expanded" not in localized.untranslated_singular_value

    def test_malformed_xml_raises_parse_error(self, write_file):
        parser = AndroidResourceParser()
        parser.add(write_file("strings.xml", "<resources><string name='a'>oops</resources>"))

        with pytest.raises(ParseError):
            list(parser.parse())

    def test_wrong_root_raises_parse_error(self, write_file):
        parser = AndroidResourceParser()
        parser.add(write_file("layout.xml", "<LinearLayout/>"))

        with pytest.raises(ParseError):
            list(parser.parse())


class TestAndroidGenerator:
    """Tests for writing strings.xml files."""

    def test_document_layout(self):
        output = render(LocalizedString("Hello", name="greeting", translated_values=["Bonjour"]))

        assert output.startswith("<?xml")
        assert output.splitlines()[1:] == [
            "<resources>",
            '  <string name="greeting">Bonjour</string>',
            "</resources>",
        ]

    def test_single_quotes_are_escaped(self):
        output = render(LocalizedString("Don't stop", name="dont_stop", translated_values=["N'arrête pas"]))

        assert '<string name="dont_stop">N\\\'arrête pas</string>' in output

    def test_single_quote_round_trip(self, tmp_path):
        generator = AndroidGenerator()
        generator.add(LocalizedString("Don't stop", name="dont_stop"))
        output = tmp_path / "strings.xml"
        generator.generate(str(output))

        parser = AndroidResourceParser()
        parser.add(output)

        assert [s.untranslated_singular_value for s in parser.parse()] == ["Don't stop"]

    def test_inline_markup_and_plain_text(self):
        output = render(
            LocalizedString("Hello <b>you</b>", name="bold"),
            LocalizedString("Fish & Chips", name="menu"),
        )

        assert '<string name="bold">Hello <b>you</b></string>' in output
        assert '<string name="menu">Fish &amp; Chips</string>' in output

    def test_markup_only_value_is_not_reindented(self):
        output = render(LocalizedString("<b>Bold</b>", name="only_markup"))

        assert '<string name="only_markup"><b>Bold</b></string>' in output

    def test_duplicate_ids_are_written_once(self):
        output = render(
            LocalizedString("Title", name="title", translated_values=["Titre"]),
            LocalizedString("Heading", name="title", translated_values=["En-tête"]),
        )

        assert output.count('name="title"') == 1
        assert "Titre" in output
        assert "En-tête" not in output

    def test_plural_slots_get_their_own_ids(self):
        output = render(
            LocalizedString(
                "%d file",
                name="files",
                untranslated_plural_value="%d files",
                translated_values=["%d fichier", "%d fichiers"],
            )
        )

        assert '<string name="files">%d fichier</string>' in output
        assert '<string name="files_P1">%d fichiers</string>' in output

    def test_unnamed_strings_get_derived_ids(self):
        generator = AndroidGenerator(resource_id_prefix="Str")
        generator.add(LocalizedString("Hello"))

        digest = hashlib.md5("Hello".encode("utf-8")).hexdigest()
        assert f'<string name="Str_P0_{digest}">Hello</string>' in generator.render()

    def test_generate_is_idempotent(self, tmp_path):
        generator = AndroidGenerator()
        generator.add(LocalizedString("Hello", name="greeting"))
        generator.add(LocalizedString("Hello again", name="greeting"))

        first = tmp_path / "first.xml"
        second = tmp_path / "second.xml"
        generator.generate(str(first))
        generator.generate(str(second))

        assert first.read_bytes() == second.read_bytes()
        assert first.read_text(encoding="utf-8").count('name="greeting"') == 1


class TestLocalizeManualStrings:
    """Tests for merging hand-maintained strings with translations."""

    def test_matched_strings_are_translated_and_unmatched_dropped(self, tmp_path, write_file, console):
        unlocalized = write_file("values/strings.xml", MANUAL_STRINGS)
        localized = tmp_path / "values-fr" / "strings.xml"

        generator = AndroidGenerator(log_level=2, console=console)
        generator.add(LocalizedString("Settings", translated_values=["Paramètres"]))
        generator.add(LocalizedString("Don't panic", translated_values=["Pas de panique"]))
        generator.add(LocalizedString("Log out", translated_values=["Déconnexion"]))

        generator.localize_manual_strings_xml(str(unlocalized), str(localized))

        output = localized.read_text(encoding="utf-8")
        assert '<string name="settings_title">Paramètres</string>' in output
        assert '<string name="quote">Pas de panique</string>' in output
        assert "about_title" not in output
        assert "Déconnexion" not in output
        assert "No translation for manual string: about_title" in console.file.getvalue()

    def test_untranslated_match_uses_source_text(self, tmp_path, write_file):
        unlocalized = write_file("strings.xml", MANUAL_STRINGS)
        localized = tmp_path / "out.xml"

        generator = AndroidGenerator()
        generator.add(LocalizedString("Settings"))
        generator.localize_manual_strings_xml(str(unlocalized), str(localized))

        assert '<string name="settings_title">Settings</string>' in localized.read_text(encoding="utf-8")

    def test_manual_markup_with_entity_is_kept(self, tmp_path, write_file):
        unlocalized = write_file(
            "strings.xml",
            '<resources><string name="terms">Terms &amp; <b>Conditions</b></string></resources>',
        )
        localized = tmp_path / "out.xml"

        generator = AndroidGenerator()
        generator.add(LocalizedString("Terms &amp; <b>Conditions</b>"))
        generator.localize_manual_strings_xml(str(unlocalized), str(localized))

        assert '<string name="terms">Terms &amp; <b>Conditions</b></string>' in localized.read_text(encoding="utf-8")

    def test_unmatched_strings_are_silent_below_verbose(self, tmp_path, write_file, console):
        unlocalized = write_file("strings.xml", MANUAL_STRINGS)

        generator = AndroidGenerator(log_level=1, console=console)
        generator.localize_manual_strings_xml(str(unlocalized), str(tmp_path / "out.xml"))

        assert "No translation" not in console.file.getvalue()
