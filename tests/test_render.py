"""Renderer unit tests."""

from __future__ import annotations

from jsxtree import translate_html
from jsxtree.elements import BR, A, AProps, Div, DivProps, P, Span, SpanProps, Style, Text
from jsxtree.render import render


def _p(*children) -> P:
    return P(None, children)


class TestText:
    def test_plain(self) -> None:
        assert render([Text("hi")]) == "hi"

    def test_escaped(self) -> None:
        assert render([Text("a < b & c > d")]) == "a &lt; b &amp; c &gt; d"

    def test_quotes_not_escaped_in_text(self) -> None:
        assert render([Text('say "hi"')]) == 'say "hi"'


class TestElements:
    def test_paragraph(self) -> None:
        assert render([_p(Text("x"))]) == "<p>x</p>"

    def test_empty_paragraph(self) -> None:
        assert render([P()]) == "<p></p>"

    def test_br_is_void(self) -> None:
        assert render([_p(Text("a"), BR(), Text("b"))]) == "<p>a<br>b</p>"

    def test_siblings_concatenated(self) -> None:
        assert render([_p(Text("a")), Text("\n"), _p(Text("b"))]) == "<p>a</p>\n<p>b</p>"


class TestProps:
    def test_anchor(self) -> None:
        el = A(AProps(href="/x?a=1&b=2", target="_blank"), (Text("go"),))
        assert render([el]) == '<a href="/x?a=1&amp;b=2" target="_blank">go</a>'

    def test_anchor_unset_fields_omitted(self) -> None:
        assert render([A(AProps(href="/"), (Text("h"),))]) == '<a href="/">h</a>'

    def test_div_class(self) -> None:
        assert render([Div(DivProps(class_name="row"))]) == '<div classname="row"></div>'

    def test_span_style(self) -> None:
        el = Span(SpanProps(style=Style(font_size="12px")), (Text("x"),))
        assert render([el]) == '<span style="font-size: 12px">x</span>'

    def test_attribute_quotes_escaped(self) -> None:
        el = Div(DivProps(class_name='a"b'))
        assert render([el]) == '<div classname="a&quot;b"></div>'


class TestFromMarkup:
    def test_translated_markup_renders_back(self) -> None:
        source = '<p>a <span classname="x" style="font-size: 12px">b</span><br>c</p>'
        assert render(translate_html(source)) == source
