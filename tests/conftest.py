"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from jsxtree.ast import GenericNode
from jsxtree.cache import TranslationCache
from jsxtree.elements import Element, Text
from jsxtree.markup import parse_fragment


@pytest.fixture
def cache() -> TranslationCache:
    """A fresh, empty translation cache."""
    return TranslationCache()


@pytest.fixture
def counting_cache():
    """Return a cache whose parser records every source it is called with."""
    calls: list[str] = []

    def _parse(source: str) -> tuple[GenericNode, ...]:
        calls.append(source)
        return parse_fragment(source)

    return TranslationCache(parser=_parse), calls


def text_of(el: Element) -> str:
    """Concatenate all text leaves under an element."""
    if isinstance(el, Text):
        return el.value
    return "".join(text_of(c) for c in el.children)


def assert_element(el: Element, cls: type[Element], num_children: int | None = None) -> None:
    """Assert basic properties of an element."""
    assert isinstance(el, cls), f"Expected {cls.__name__}, got {type(el).__name__}"
    if num_children is not None:
        assert len(el.children) == num_children, (
            f"Expected {num_children} children, got {len(el.children)}"
        )
