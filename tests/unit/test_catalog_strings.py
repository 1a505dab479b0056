"""Unit tests for the string utilities."""

import pytest

from textamender.transforms.catalog.strings import (
    html_escape,
    html_unescape,
    literal_to_string,
    remove_duplicates,
    string_counter,
    string_to_literal,
    strip,
    strip_lines,
    strip_surrounding_quotes,
    to_lower,
    to_upper,
    url_decode,
    url_encode,
)

PRINTABLE_ASCII = "".join(chr(code) for code in range(32, 127))

INVERSE_SAMPLES = [
    "",
    "plain",
    "  leading and trailing  ",
    "Tom & Jerry's <b>\"quote\"</b>",
    "already &amp; escaped &nbsp; &#39;",
    "100% of a/b?c=d#frag",
    "two\nlines",
    PRINTABLE_ASCII,
    PRINTABLE_ASCII + "\n" + PRINTABLE_ASCII[::-1],
]


class TestCaseAndTrim:
    """Tests for case and whitespace helpers."""

    def test_upper_lower(self):
        assert to_upper.apply("abC") == "ABC"
        assert to_lower.apply("AbC") == "abc"

    def test_strip(self):
        assert strip.apply("  a b \n") == "a b"

    def test_strip_each_line(self):
        assert strip_lines.apply("  a \n\tb\t") == "a\nb"

    @pytest.mark.parametrize(
        "text,expected",
        [
            ('"C:\\Program Files"', "C:\\Program Files"),
            ("'it's'", "it's"),
            ("\"'nested'\"", "nested"),
            ("no quotes", "no quotes"),
        ],
    )
    def test_strip_surrounding_quotes(self, text, expected):
        assert strip_surrounding_quotes.apply(text) == expected


class TestLiterals:
    """Tests for string literal conversions."""

    def test_literal_to_string_resolves_escapes(self):
        assert literal_to_string.apply("a\\nb") == "a\nb"
        assert literal_to_string.apply("caf\\u00e9") == "café"

    def test_literal_to_string_keeps_quotes(self):
        assert literal_to_string.apply('say "hi"') == 'say "hi"'

    def test_literal_to_string_invalid(self):
        assert literal_to_string.apply("bad\\") == "Invalid string literal"

    def test_string_to_literal(self):
        assert string_to_literal.apply('a"b\n') == '"a\\"b\\n"'

    def test_literal_round_trip(self):
        text = 'tab\there "quoted" \\ back'
        literal = string_to_literal.apply(text)
        assert literal_to_string.apply(literal[1:-1].replace('\\"', '"')) == text


class TestListHelpers:
    """Tests for counters and duplicate removal."""

    def test_string_counter(self):
        assert string_counter.apply("ab") == '-2 | 0: "a"\n-1 | 1: "b"'

    def test_string_counter_empty(self):
        assert string_counter.apply("") == ""

    def test_remove_duplicates_preserves_order(self):
        assert remove_duplicates.apply("a\nb\na\nc\nb") == "a\nb\nc"


class TestHtmlEscaping:
    """Tests for HTML entity encoding."""

    def test_escape(self):
        assert html_escape.apply("<a href=\"x\">Tom & Jerry's</a>") == (
            "&lt;a&nbsp;href=&quot;x&quot;&gt;Tom&nbsp;&amp;&nbsp;Jerry&#39;s&lt;/a&gt;"
        )

    def test_unescape(self):
        assert html_unescape.apply("&lt;b&gt;&nbsp;&copy;&#65;&#x42;") == "<b> ©AB"

    def test_unknown_entity_left_alone(self):
        assert html_unescape.apply("&bogus; &") == "&bogus; &"

    @pytest.mark.parametrize("text", INVERSE_SAMPLES)
    def test_unescape_inverts_escape(self, text):
        assert html_unescape.apply(html_escape.apply(text)) == text


class TestUrlEncoding:
    """Tests for URI percent-encoding."""

    def test_encode_keeps_structure(self):
        assert url_encode.apply("https://example.com/a b?q=ü") == (
            "https://example.com/a%20b?q=%C3%BC"
        )

    def test_encode_percent(self):
        assert url_encode.apply("100%") == "100%25"

    def test_decode(self):
        assert url_decode.apply("a%20b%C3%BC") == "a bü"

    def test_decode_invalid_utf8_is_diagnosed(self):
        assert url_decode.apply("%E0%A4").startswith("Invalid URI")

    @pytest.mark.parametrize("text", INVERSE_SAMPLES)
    def test_decode_inverts_encode(self, text):
        assert url_decode.apply(url_encode.apply(text)) == text
