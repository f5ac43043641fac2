"""Typed element values produced by translation.

Every supported tag has one frozen dataclass. Element constructors take the
tag's props record (or ``None``) and a tuple of child elements, in that
order, so the classes themselves serve as the element factory.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


class Element:
    """Base of all typed element values."""

    __slots__ = ()

    tag: ClassVar[str] = ""


@dataclass(frozen=True, slots=True)
class Style:
    """Inline style properties understood by the renderer."""

    font_size: str | None = None
    font_style: str | None = None


@dataclass(frozen=True, slots=True)
class AProps:
    href: str | None = None
    target: str | None = None


@dataclass(frozen=True, slots=True)
class DivProps:
    class_name: str | None = None


@dataclass(frozen=True, slots=True)
class SpanProps:
    class_name: str | None = None
    style: Style | None = None


@dataclass(frozen=True, slots=True)
class Text(Element):
    """Text leaf."""

    value: str


@dataclass(frozen=True, slots=True)
class P(Element):
    tag: ClassVar[str] = "p"

    props: None = None
    children: tuple[Element, ...] = ()


@dataclass(frozen=True, slots=True)
class H1(Element):
    tag: ClassVar[str] = "h1"

    props: None = None
    children: tuple[Element, ...] = ()


@dataclass(frozen=True, slots=True)
class H3(Element):
    tag: ClassVar[str] = "h3"

    props: None = None
    children: tuple[Element, ...] = ()


@dataclass(frozen=True, slots=True)
class Code(Element):
    tag: ClassVar[str] = "code"

    props: None = None
    children: tuple[Element, ...] = ()


@dataclass(frozen=True, slots=True)
class Strong(Element):
    tag: ClassVar[str] = "strong"

    props: None = None
    children: tuple[Element, ...] = ()


@dataclass(frozen=True, slots=True)
class Em(Element):
    tag: ClassVar[str] = "em"

    props: None = None
    children: tuple[Element, ...] = ()


@dataclass(frozen=True, slots=True)
class A(Element):
    tag: ClassVar[str] = "a"

    props: AProps | None = None
    children: tuple[Element, ...] = ()


@dataclass(frozen=True, slots=True)
class Div(Element):
    tag: ClassVar[str] = "div"

    props: DivProps | None = None
    children: tuple[Element, ...] = ()


@dataclass(frozen=True, slots=True)
class Span(Element):
    tag: ClassVar[str] = "span"

    props: SpanProps | None = None
    children: tuple[Element, ...] = ()


@dataclass(frozen=True, slots=True)
class BR(Element):
    """Line break. Void: never has children."""

    tag: ClassVar[str] = "br"

    props: None = None
    children: tuple[Element, ...] = ()


# Tag name -> element class, for every tagged variant
TAGS: dict[str, type[Element]] = {
    cls.tag: cls for cls in (P, H1, H3, Code, Strong, Em, A, Div, Span, BR)
}
