"""Markdown preprocessing: Markdown -> HTML -> elements."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

import markdown

from jsxtree.errors import MarkdownConversionFailure

if TYPE_CHECKING:
    from jsxtree.cache import TranslationCache
    from jsxtree.elements import Element

log = logging.getLogger(__name__)


def markdown_to_html(source: str, *, extensions: Sequence[str] = ()) -> str:
    """Convert Markdown to an HTML fragment with Python-Markdown."""
    log.debug("converting markdown, extensions=%s", list(extensions))
    try:
        return markdown.markdown(source, extensions=list(extensions))
    except Exception as exc:
        raise MarkdownConversionFailure(f"failed to convert markdown: {exc}") from exc


def translate_markdown(source: str, cache: TranslationCache) -> tuple[Element, ...]:
    """Convert Markdown and run the HTML through the cached HTML pipeline."""
    html = cache.converter(source)
    return cache.get_or_translate(html)
