"""Unit tests for html_utils: escaping, colour formatting, selectors."""

from __future__ import annotations

import pytest

from cuemarkup.export.html_utils import (
    css_all_class_descendants_selector,
    escape_html,
    escape_html_text,
    format_two_decimals,
    normalize_color,
    to_css_rgba,
)


class TestEscapeHtml:
    """escape_html follows the web view host's escaping rules."""

    @pytest.mark.parametrize(
        ("char", "expected"),
        [
            ("<", "&lt;"),
            (">", "&gt;"),
            ("&", "&amp;"),
            ("\n", "&#10;"),
            ("\r", "&#13;"),
            ("\t", "&#9;"),
            ("\x7f", "&#127;"),
            ("é", "&#233;"),
            ("\U0001f600", "&#128512;"),
        ],
        ids=[
            "lt",
            "gt",
            "amp",
            "newline",
            "carriage-return",
            "tab",
            "delete",
            "latin1",
            "astral",
        ],
    )
    def test_single_char(self, char: str, expected: str) -> None:
        assert escape_html(char) == expected

    def test_printable_ascii_passthrough(self) -> None:
        text = "Hello, world! ~{}[]()"
        assert escape_html(text) == text

    def test_quotes_not_escaped(self) -> None:
        assert escape_html("it's \"quoted\"") == "it's \"quoted\""

    def test_single_space_kept(self) -> None:
        assert escape_html("a b") == "a b"

    def test_space_run_uses_nbsp(self) -> None:
        """A run of n spaces keeps its width: n-1 nbsp then a plain space."""
        assert escape_html("a   b") == "a&nbsp;&nbsp; b"

    def test_trailing_space_run(self) -> None:
        assert escape_html("a  ") == "a&nbsp; "

    def test_lone_surrogate_dropped(self) -> None:
        assert escape_html("a\ud800b") == "ab"

    def test_empty(self) -> None:
        assert escape_html("") == ""


class TestEscapeHtmlText:
    """escape_html_text turns escaped line breaks into <br>."""

    def test_lf(self) -> None:
        assert escape_html_text("a\nb") == "a<br>b"

    def test_crlf_is_one_break(self) -> None:
        result = escape_html_text("a\r\nb")
        assert result == "a<br>b"
        assert result.count("<br>") == 1

    def test_lone_cr_not_a_break(self) -> None:
        assert escape_html_text("a\rb") == "a&#13;b"

    def test_mixed_breaks(self) -> None:
        assert escape_html_text("1\r\n2\n3\n\n4") == "1<br>2<br>3<br><br>4"

    def test_markup_in_text_is_escaped(self) -> None:
        assert escape_html_text("<b>\n") == "&lt;b&gt;<br>"


class TestColours:
    """Packed ARGB handling."""

    @pytest.mark.parametrize(
        ("color", "expected"),
        [
            (0xFF000000, -16777216),
            (-16777216, -16777216),
            (0x00FF0000, 0x00FF0000),
            (0xFFFFFFFF, -1),
            (0, 0),
        ],
    )
    def test_normalize_color(self, color: int, expected: int) -> None:
        assert normalize_color(color) == expected

    @pytest.mark.parametrize(
        ("color", "expected"),
        [
            (0xFFFF0000, "rgba(255,0,0,1.000)"),
            (-16777216, "rgba(0,0,0,1.000)"),
            (0x80FFFFFF, "rgba(255,255,255,0.502)"),
            (0x00000000, "rgba(0,0,0,0.000)"),
            (0xFF0A141E, "rgba(10,20,30,1.000)"),
        ],
    )
    def test_to_css_rgba(self, color: int, expected: str) -> None:
        assert to_css_rgba(color) == expected

    def test_signed_and_unsigned_format_identically(self) -> None:
        assert to_css_rgba(0xFF00FF00) == to_css_rgba(normalize_color(0xFF00FF00))


class TestFormatTwoDecimals:
    """Ties round away from zero on the float's exact value."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (3.125, "3.13"),
            (0.125, "0.13"),
            (-0.125, "-0.13"),
            (10 / 3, "3.33"),
            (20, "20.00"),
            (0.001, "0.00"),
        ],
    )
    def test_format(self, value: float, expected: str) -> None:
        assert format_two_decimals(value) == expected

    def test_large_value_is_not_in_exponent_form(self) -> None:
        assert format_two_decimals(1e30) == "1000000000000000019884624838656.00"


class TestSelector:
    def test_all_class_descendants(self) -> None:
        assert css_all_class_descendants_selector("bg_1") == ".bg_1,.bg_1 *"
