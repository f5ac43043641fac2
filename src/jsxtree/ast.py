"""Generic document nodes produced by the markup parser."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """A 1-based line/column location in markup source."""

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class TextNode:
    """Character data, as the parser delivered it."""

    value: str
    position: Position | None = None


@dataclass(frozen=True, slots=True)
class TagNode:
    """An element with raw string attributes, in document order."""

    tag: str
    attrs: tuple[tuple[str, str], ...] = ()
    children: tuple[TextNode | TagNode, ...] = ()
    position: Position | None = None


GenericNode = TextNode | TagNode
