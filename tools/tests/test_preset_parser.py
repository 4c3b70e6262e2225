import unittest
import os
import sys
import tempfile
from pathlib import Path

# Add parent dir to path so we can import the preset tools
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
sys.path.append(os.path.dirname(os.path.abspath(__file__)))
import preset_parser
from preset_errors import UnparseableInputError
from preset_fixtures import ALPHA, CBA, ACE, TFAR, preset_html, mod_row, workshop_row, workshop_mod

class TestPresetParser(unittest.TestCase):

    def test_parse_launcher_preset(self):
        p = preset_parser.parse_preset(ALPHA)
        self.assertEqual(p["preset_name"], "Alpha")
        self.assertEqual(p["mods"], [workshop_mod(*CBA), workshop_mod(*ACE), workshop_mod(*TFAR)])
        self.assertIs(p["original_html"], ALPHA)

    def test_missing_meta_defaults_to_unnamed(self):
        html = "<html><body><table>" + workshop_row(*CBA) + "</table></body></html>"
        p = preset_parser.parse_preset(html)
        self.assertEqual(p["preset_name"], "Unnamed")
        self.assertEqual([m["name"] for m in p["mods"]], ["CBA_A3"])

    def test_row_without_display_name_is_dropped(self):
        nameless = '        <tr data-type="ModContainer">\n          <td>No name cell</td>\n        </tr>\n'
        p = preset_parser.parse_preset(preset_html("Alpha", [workshop_row(*CBA), nameless, workshop_row(*ACE)]))
        self.assertEqual(len(p["mods"]), 2)
        self.assertEqual([m["name"] for m in p["mods"]], ["CBA_A3", "ace"])

    def test_blank_display_name_is_dropped(self):
        p = preset_parser.parse_preset(preset_html("Alpha", [mod_row("   \n  "), workshop_row(*CBA)]))
        self.assertEqual([m["name"] for m in p["mods"]], ["CBA_A3"])

    def test_rows_with_omitted_end_tags(self):
        html = ('<html><head><meta name="arma:PresetName" content="Loose"></head><body>'
                '<div class="mod-list"><table>'
                '<tr data-type="ModContainer"><td data-type="DisplayName">ace<td><span>Steam</span>'
                '<td><a href="https://example.com/u1" data-type="Link">u1</a>'
                '<tr data-type="ModContainer"><td data-type="DisplayName">cba<td><span>Local</span>'
                '</table></div></body></html>')
        p = preset_parser.parse_preset(html)
        self.assertEqual(p["mods"], [
            {"name": "ace", "source": "Steam", "link": "https://example.com/u1"},
            {"name": "cba", "source": "Local", "link": ""}
        ])

    def test_fields_are_trimmed(self):
        p = preset_parser.parse_preset(preset_html("Alpha", [mod_row("  @CUP Terrains  ", " Local ")]))
        self.assertEqual(p["mods"], [{"name": "@CUP Terrains", "source": "Local", "link": ""}])

    def test_missing_source_and_link_are_empty(self):
        p = preset_parser.parse_preset(preset_html("Alpha", [mod_row("@local_mod", source="")]))
        self.assertEqual(p["mods"], [{"name": "@local_mod", "source": "", "link": ""}])

    def test_duplicates_are_not_collapsed(self):
        p = preset_parser.parse_preset(preset_html("Alpha", [workshop_row(*CBA), workshop_row(*ACE), workshop_row(*CBA)]))
        self.assertEqual([m["name"] for m in p["mods"]], ["CBA_A3", "ace", "CBA_A3"])

    def test_entities_are_decoded(self):
        p = preset_parser.parse_preset(preset_html("A &amp; B", [mod_row("&lt;b&gt;Tom &amp; Jerry&lt;/b&gt;", source="")]))
        self.assertEqual(p["preset_name"], "A & B")
        self.assertEqual(p["mods"][0]["name"], "<b>Tom & Jerry</b>")

    def test_garbage_text_degrades_to_empty(self):
        for junk in ["", "not a preset at all", "<<<>>>&&&", '<tr data-type="ModContainer"><td data-type="DisplayName">']:
            p = preset_parser.parse_preset(junk)
            self.assertEqual(p["preset_name"], "Unnamed")
            self.assertEqual(p["mods"], [])

    def test_bytes_input_with_bom(self):
        p = preset_parser.parse_preset(b"\xef\xbb\xbf" + ALPHA.encode("utf-8"))
        self.assertEqual(p["preset_name"], "Alpha")
        self.assertEqual(len(p["mods"]), 3)
        self.assertEqual(p["original_html"], ALPHA)

    def test_invalid_utf8_is_unparseable(self):
        with self.assertRaises(UnparseableInputError):
            preset_parser.parse_preset(b"\xff\xfe\x00<html>\x80")

    def test_non_text_is_unparseable(self):
        for value in [None, 42, ["<html>"]]:
            with self.assertRaises(UnparseableInputError):
                preset_parser.parse_preset(value)

    def test_load_preset_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "alpha_preset.html"
            path.write_text(ALPHA, encoding="utf-8")
            p = preset_parser.load_preset_file(path)
        self.assertEqual(p["file_name"], "alpha_preset.html")
        self.assertEqual(p["preset_name"], "Alpha")
        self.assertEqual(len(p["mods"]), 3)

if __name__ == "__main__":
    unittest.main()
