"""Style declaration parser tests."""

from __future__ import annotations

import pytest

from jsxtree.elements import Style
from jsxtree.errors import UnsupportedStyleDeclaration
from jsxtree.style import format_style, parse_style


class TestValidDeclarations:
    def test_font_size(self) -> None:
        assert parse_style("font-size: 12px") == Style(font_size="12px")

    def test_font_style(self) -> None:
        assert parse_style("font-style: italic") == Style(font_style="italic")

    def test_both(self) -> None:
        result = parse_style("font-size: 12px; font-style: italic")
        assert result == Style(font_size="12px", font_style="italic")

    def test_trailing_semicolon(self) -> None:
        assert parse_style("font-size: 12px;") == Style(font_size="12px")

    def test_blank_declarations_skipped(self) -> None:
        assert parse_style(" ; font-size:1em ;; ") == Style(font_size="1em")

    def test_whitespace_trimmed(self) -> None:
        assert parse_style("  font-size  :   2em  ") == Style(font_size="2em")

    def test_double_quotes_stripped(self) -> None:
        assert parse_style('font-style: "oblique"') == Style(font_style="oblique")

    def test_single_quotes_stripped(self) -> None:
        assert parse_style("font-style: 'normal'") == Style(font_style="normal")

    def test_last_value_wins(self) -> None:
        assert parse_style("font-size: 1px; font-size: 2px") == Style(font_size="2px")

    def test_empty_value_string(self) -> None:
        assert parse_style("") == Style()


class TestInvalidDeclarations:
    def test_missing_colon(self) -> None:
        with pytest.raises(UnsupportedStyleDeclaration, match="invalid key-val"):
            parse_style("font-size 12px")

    def test_two_colons(self) -> None:
        with pytest.raises(UnsupportedStyleDeclaration, match="invalid key-val"):
            parse_style("font-size: 12px: 14px")

    def test_unknown_property(self) -> None:
        with pytest.raises(UnsupportedStyleDeclaration, match="color"):
            parse_style("color: red")

    def test_unknown_property_fails_whole_value(self) -> None:
        with pytest.raises(UnsupportedStyleDeclaration) as exc_info:
            parse_style("font-size: 12px; color: red")
        assert exc_info.value.value == "font-size: 12px; color: red"

    def test_keys_are_case_sensitive(self) -> None:
        with pytest.raises(UnsupportedStyleDeclaration):
            parse_style("Font-Size: 12px")


class TestFormatStyle:
    def test_format_both(self) -> None:
        assert format_style(Style("12px", "italic")) == "font-size: 12px; font-style: italic"

    def test_format_skips_unset(self) -> None:
        assert format_style(Style(font_style="italic")) == "font-style: italic"

    def test_format_empty(self) -> None:
        assert format_style(Style()) == ""
