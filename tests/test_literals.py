"""Unit tests for value rendering, alias sanitization and metadata extraction."""

from __future__ import annotations

import pytest

from explorerql.compile.literals import (
    quote_string,
    render_match_value,
    render_value,
    sanitize_alias,
)
from explorerql.compile.metadata import get_regexp_for_metadata


class TestQuoteString:
    def test_plain(self):
        assert quote_string("iperf") == '"iperf"'

    def test_empty(self):
        assert quote_string("") == '""'

    def test_double_quote_and_backslash(self):
        assert quote_string('a"b\\c') == '"a\\"b\\\\c"'

    def test_single_quote_untouched(self):
        assert quote_string("it's") == '"it\'s"'

    @pytest.mark.parametrize(
        ("raw", "quoted"),
        [
            ("\n", '"\\n"'),
            ("\t", '"\\t"'),
            ("\r", '"\\r"'),
            ("\0", '"\\0"'),
            ("\x0b", '"\\x0B"'),
            ("<", '"\\u003C"'),
            ("\x01", '"\\x01"'),
            ("\x7f", '"\\x7F"'),
            ("é", '"\\xE9"'),
            ("€", '"\\u20AC"'),
            ("😀", '"\\uD83D\\uDE00"'),
        ],
    )
    def test_escapes(self, raw, quoted):
        assert quote_string(raw) == quoted


class TestRenderValue:
    @pytest.mark.parametrize(
        ("value", "text"),
        [
            (1, "1"),
            (-3, "-3"),
            (2.5, "2.5"),
            (2.0, "2"),
            (True, "true"),
            (False, "false"),
            ("raw", "raw"),
            (float("inf"), "Infinity"),
            (float("-inf"), "-Infinity"),
            (float("nan"), "NaN"),
        ],
    )
    def test_text_form(self, value, text):
        assert render_value(value) == text

    @pytest.mark.parametrize(
        ("value", "text"),
        [
            (0.0, "0"),
            (-0.0, "0"),
            (-2.5, "-2.5"),
            (0.1, "0.1"),
            (0.000001, "0.000001"),
            (1e-7, "1e-7"),
            (1.5e-7, "1.5e-7"),
            (1e16, "10000000000000000"),
            (1e20, "100000000000000000000"),
            (123456789012345680000.0, "123456789012345680000"),
            (1e21, "1e+21"),
            (-1.25e22, "-1.25e+22"),
        ],
    )
    def test_float_layout_follows_javascript(self, value, text):
        assert render_value(value) == text

    def test_strings_quoted_unless_function(self):
        assert render_match_value("x", is_function=False) == '"x"'
        assert render_match_value("NOW()", is_function=True) == "NOW()"

    def test_non_strings_never_quoted(self):
        assert render_match_value(7, is_function=False) == "7"
        assert render_match_value(True, is_function=False) == "true"


class TestSanitizeAlias:
    def test_dots_and_spaces(self):
        assert sanitize_alias("a.b c") == "a_b_c"

    def test_word_characters_kept(self):
        assert sanitize_alias("Run_42") == "Run_42"

    def test_every_non_word_character_replaced(self):
        assert sanitize_alias("cloud-zone (us)") == "cloud_zone__us_"

    def test_non_ascii_is_not_a_word_character(self):
        assert sanitize_alias("débit") == "d_bit"


class TestMetadataRegexp:
    def test_default_labels_column(self):
        assert get_regexp_for_metadata("os") == 'REGEXP_EXTRACT(labels, r"|os:(.*?)|")'

    def test_custom_labels_column(self):
        assert (
            get_regexp_for_metadata("zone", "sample_labels")
            == 'REGEXP_EXTRACT(sample_labels, r"|zone:(.*?)|")'
        )

    def test_pipes_are_not_escaped(self):
        expr = get_regexp_for_metadata("os")
        assert "\\" not in expr
        assert expr.count("|") == 2

    def test_name_is_not_escaped(self):
        assert "a.b" in get_regexp_for_metadata("a.b")
