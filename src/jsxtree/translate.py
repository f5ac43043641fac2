"""Translation engine: generic node tree -> typed element tree."""

from __future__ import annotations

from collections.abc import Iterable

from jsxtree.ast import GenericNode, TagNode, TextNode
from jsxtree.elements import Element, Text
from jsxtree.errors import (
    UnsupportedAttributeError,
    UnsupportedStyleDeclaration,
    UnsupportedTagError,
)
from jsxtree.rules import RULES, TranslationRule


def translate_all(
    nodes: Iterable[GenericNode],
    rules: dict[str, TranslationRule] = RULES,
) -> tuple[Element, ...]:
    """Translate top-level siblings in document order. All or nothing."""
    return tuple(translate(node, rules) for node in nodes)


def translate(node: GenericNode, rules: dict[str, TranslationRule] = RULES) -> Element:
    """Translate one generic node and its subtree."""
    if isinstance(node, TextNode):
        return Text(node.value)
    if isinstance(node, TagNode):
        return _translate_tag(node, rules)
    raise TypeError(f"expected a generic node, got {type(node).__name__}")


def _translate_tag(node: TagNode, rules: dict[str, TranslationRule]) -> Element:
    rule = rules.get(node.tag)
    if rule is None:
        raise UnsupportedTagError(node.tag, node.position)

    props = None
    if node.attrs:
        fields: dict[str, object] = {}
        for key, value in node.attrs:
            attr = rule.attrs.get(key)
            if attr is None:
                raise UnsupportedAttributeError(node.tag, key, node.position)
            try:
                fields[attr.field] = attr.convert(value)
            except UnsupportedStyleDeclaration as exc:
                raise UnsupportedStyleDeclaration(
                    exc.message, exc.value, node.tag, node.position
                ) from None
        props = rule.props(**fields)

    children = tuple(translate(child, rules) for child in node.children)
    return rule.element(props, children)
