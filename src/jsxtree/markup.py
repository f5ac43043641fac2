"""Markup parser adapter: HTML fragment -> generic node tree."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, FeatureNotFound, ParserRejectedMarkup
from bs4.element import NavigableString, PreformattedString, Tag

from jsxtree.ast import GenericNode, Position, TagNode, TextNode
from jsxtree.errors import ParseFailure

log = logging.getLogger(__name__)

# A dummy container so fragments with several top-level siblings parse
_WRAPPER_OPEN = "<div>"
_WRAPPER_CLOSE = "</div>"


def parse_fragment(source: str, *, features: str = "html.parser") -> tuple[GenericNode, ...]:
    """Parse an HTML fragment into its top-level generic nodes."""
    log.debug("parsing %d chars with %s", len(source), features)
    try:
        soup = BeautifulSoup(
            f"{_WRAPPER_OPEN}{source}{_WRAPPER_CLOSE}",
            features,
            multi_valued_attributes=None,
        )
    except FeatureNotFound as exc:
        raise ParseFailure(f"no markup parser available for {features!r}") from exc
    except ParserRejectedMarkup as exc:
        raise ParseFailure(f"failed to parse HTML {source!r}: {exc}") from exc

    wrapper = soup.find("div")
    if wrapper is None or len(wrapper.parent.contents) != 1:
        # A stray closing tag ended the container early
        raise ParseFailure(f"failed to parse HTML {source!r}: unbalanced closing tag")

    return tuple(_convert(child, None) for child in wrapper.contents)


def _convert(node: object, parent_pos: Position | None) -> GenericNode:
    if isinstance(node, Tag):
        pos = _position(node)
        return TagNode(
            tag=node.name,
            attrs=tuple((key, _attr_value(val)) for key, val in node.attrs.items()),
            children=tuple(_convert(child, pos) for child in node.contents),
            position=pos,
        )
    if isinstance(node, PreformattedString):
        kind = type(node).__name__.lower()
        raise ParseFailure(f"cannot handle {kind} node {str(node)!r}", parent_pos)
    if isinstance(node, NavigableString):
        return TextNode(str(node), parent_pos)
    raise ParseFailure(f"cannot handle node type {type(node).__name__}", parent_pos)


def _attr_value(value: str | list[str] | None) -> str:
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(value)
    return value


def _position(tag: Tag) -> Position | None:
    line = tag.sourceline
    col = tag.sourcepos
    if line is None or col is None:
        return None
    # Undo the shift the wrapper adds to the first line
    if line == 1:
        col -= len(_WRAPPER_OPEN)
    return Position(line, col + 1)
