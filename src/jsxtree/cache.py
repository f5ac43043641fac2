"""Memoised source -> element translation."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field

from jsxtree.ast import GenericNode
from jsxtree.elements import Element
from jsxtree.errors import CardinalityError
from jsxtree.markup import parse_fragment
from jsxtree.md import markdown_to_html, translate_markdown
from jsxtree.rules import RULES, TranslationRule
from jsxtree.translate import translate_all

log = logging.getLogger(__name__)


@dataclass(eq=False)
class TranslationCache:
    """Owns translated element tuples keyed by trimmed source.

    Entries are never evicted; call clear() to drop them. Only successful
    translations are stored.
    """

    parser: Callable[[str], tuple[GenericNode, ...]] = parse_fragment
    converter: Callable[[str], str] = markdown_to_html
    rules: dict[str, TranslationRule] = field(default_factory=lambda: RULES)
    _entries: dict[str, tuple[Element, ...]] = field(default_factory=dict, init=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def get_or_translate(self, source: str) -> tuple[Element, ...]:
        """Translate an HTML fragment, reusing a previous result if there is one."""
        key = source.strip()

        with self._lock:
            hit = self._entries.get(key)
        if hit is not None:
            log.debug("cache hit for %r", key)
            return hit

        log.debug("cache miss for %r", key)
        result = translate_all(self.parser(key), self.rules)

        with self._lock:
            self._entries[key] = result
        return result

    def get_or_translate_single(self, source: str) -> Element:
        """Like get_or_translate, but the fragment must have exactly one root."""
        result = self.get_or_translate(source)
        if len(result) != 1:
            raise CardinalityError(source.strip(), len(result))
        return result[0]

    def markdown(self, source: str) -> tuple[Element, ...]:
        return translate_markdown(source, self)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, source: object) -> bool:
        return isinstance(source, str) and source.strip() in self._entries
