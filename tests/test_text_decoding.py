import unittest

from gleamfinder.extraction.text_decoding import (
    decode_html_text,
    decode_script_text,
    resolve_numeric_references,
    strip_bracketed,
    truncate_dangling_escape,
)


BS = "\\"
LT = BS + "u003c"
GT = BS + "u003e"
AMP = BS + "u0026"
NBSP = "\N{NO-BREAK SPACE}"


class TestHtmlDecoding(unittest.TestCase):
    def test_strips_tags_keeps_text(self):
        self.assertEqual(decode_html_text("<h2>Win <b>$1000</b></h2>"), "Win $1000")

    def test_nbsp_becomes_newline(self):
        self.assertEqual(decode_html_text("<p>Hello</p>" + NBSP + "<p>World</p>"), "Hello\nWorld")

    def test_apostrophe_entity(self):
        self.assertEqual(decode_html_text("It&#39;s fun"), "It's fun")

    def test_unclosed_tag_is_left_alone(self):
        self.assertEqual(decode_html_text("a < b"), "a < b")


class TestScriptDecoding(unittest.TestCase):
    def test_strips_escaped_tags(self):
        raw = LT + "h2" + GT + "Win $1000" + LT + "/h2" + GT
        self.assertEqual(decode_script_text(raw), "Win $1000")

    def test_apostrophe_entity_forms(self):
        self.assertEqual(decode_script_text("It&#39;s fun"), "It's fun")
        self.assertEqual(decode_script_text("It" + AMP + "#39;s fun"), "It's fun")

    def test_numeric_reference(self):
        self.assertEqual(decode_script_text(AMP + "#128420;"), "\N{BLACK HEART}")
        self.assertEqual(decode_script_text("&#65;&#66;C"), "ABC")

    def test_invalid_numeric_reference_stops_resolution(self):
        self.assertEqual(decode_script_text("&#65; &#1114112; &#66;"), "A &#1114112; &#66;")
        self.assertEqual(decode_script_text("&#65; &#x42; &#67;"), "A &#x42; &#67;")
        self.assertEqual(decode_script_text("&#55296;"), "&#55296;")

    def test_overlong_numeric_reference_stops_resolution(self):
        tail = "&#" + "1" * 5000 + ";"
        self.assertEqual(decode_script_text("&#65;" + tail), "A" + tail)
        self.assertEqual(decode_script_text("&#00000000065;"), "&#00000000065;")

    def test_trailing_partial_escape_is_cut(self):
        self.assertEqual(decode_script_text("Prize: 100 USD " + BS + "u00"), "Prize: 100 USD ")
        self.assertEqual(decode_script_text("Prize " + BS), "Prize " + BS)

    def test_tags_removed_before_truncation(self):
        raw = LT + "p" + GT + "Win" + LT + "/p" + GT + " it&#39;s here" + BS + "u002"
        self.assertEqual(decode_script_text(raw), "Win it's here")


class TestDecodingHelpers(unittest.TestCase):
    def test_strip_bracketed_takes_shortest_leftmost_span(self):
        self.assertEqual(strip_bracketed("a[x]b[y]c", "[", "]"), "abc")
        self.assertEqual(strip_bracketed("[[x]]", "[", "]"), "]")

    def test_truncate_keeps_complete_escapes(self):
        raw = "ok " + AMP + " " + BS + "u12zz tail"
        self.assertEqual(truncate_dangling_escape(raw), "ok " + AMP + " ")
        self.assertEqual(truncate_dangling_escape("no escapes"), "no escapes")

    def test_resolve_without_terminator(self):
        self.assertEqual(resolve_numeric_references("&#65"), "&#65")


if __name__ == "__main__":
    unittest.main()
