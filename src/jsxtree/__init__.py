"""Runtime JSX-like translation of HTML and Markdown literals into typed elements."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jsxtree.cache import TranslationCache
    from jsxtree.elements import Element

__version__ = "0.1.0"

_default: TranslationCache | None = None
_default_lock = threading.Lock()


def default_cache() -> TranslationCache:
    """The process-wide cache used when a caller does not pass one.

    Created on first use and never evicted.
    """
    global _default
    with _default_lock:
        if _default is None:
            from jsxtree.cache import TranslationCache

            _default = TranslationCache()
        return _default


def translate_html(source: str, cache: TranslationCache | None = None) -> tuple[Element, ...]:
    """Translate an HTML fragment into its top-level elements.

    Results are memoised in *cache*, or in default_cache() when none is given.
    """
    return _cache(cache).get_or_translate(source)


def translate_html_single(source: str, cache: TranslationCache | None = None) -> Element:
    """Translate an HTML fragment that must have exactly one top-level node."""
    return _cache(cache).get_or_translate_single(source)


def translate_markdown(source: str, cache: TranslationCache | None = None) -> tuple[Element, ...]:
    """Convert Markdown to HTML, then translate it as translate_html does."""
    return _cache(cache).markdown(source)


def _cache(cache: TranslationCache | None) -> TranslationCache:
    return cache if cache is not None else default_cache()
