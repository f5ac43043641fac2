"""HTML renderer: serialises typed elements back to markup."""

from __future__ import annotations

from collections.abc import Iterable

from jsxtree.elements import AProps, DivProps, Element, SpanProps, Text
from jsxtree.style import format_style

VOID_TAGS = frozenset({"br"})


def render(elements: Iterable[Element]) -> str:
    """Render a sequence of elements to an HTML fragment."""
    return "".join(_render_node(el) for el in elements)


# ---------------------------------------------------------------------------
# HTML escaping
# ---------------------------------------------------------------------------


def _escape_html(text: str) -> str:
    """Escape text for HTML body content."""
    result: list[str] = []
    for ch in text:
        if ch == "&":
            result.append("&amp;")
        elif ch == "<":
            result.append("&lt;")
        elif ch == ">":
            result.append("&gt;")
        else:
            result.append(ch)
    return "".join(result)


def _escape_attr(text: str) -> str:
    """Escape text for double-quoted HTML attribute values."""
    return _escape_html(text).replace('"', "&quot;")


# ---------------------------------------------------------------------------
# Node rendering
# ---------------------------------------------------------------------------


def _render_node(el: Element) -> str:
    if isinstance(el, Text):
        return _escape_html(el.value)

    attrs = "".join(f' {name}="{_escape_attr(value)}"' for name, value in _props_attrs(el.props))
    if el.tag in VOID_TAGS:
        return f"<{el.tag}{attrs}>"

    body = "".join(_render_node(c) for c in el.children)
    return f"<{el.tag}{attrs}>{body}</{el.tag}>"


def _props_attrs(props: object) -> list[tuple[str, str]]:
    """Map a props record back to (attribute, value) pairs."""
    pairs: list[tuple[str, str]] = []
    match props:
        case AProps(href=href, target=target):
            if href is not None:
                pairs.append(("href", href))
            if target is not None:
                pairs.append(("target", target))
        case DivProps(class_name=class_name):
            if class_name is not None:
                pairs.append(("classname", class_name))
        case SpanProps(class_name=class_name, style=style):
            if class_name is not None:
                pairs.append(("classname", class_name))
            if style is not None:
                pairs.append(("style", format_style(style)))
    return pairs
