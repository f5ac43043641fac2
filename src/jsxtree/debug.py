"""Human-readable element tree dumps for --debug and the tree emitter."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import fields
from typing import TextIO

from jsxtree.elements import Element, Style, Text


def dump_elements(elements: Iterable[Element], *, file: TextIO = sys.stderr) -> None:
    """Print a typed element tree to *file*."""
    for el in elements:
        _dump_element(el, 0, file)


def _indent(depth: int) -> str:
    return "  " * depth


def _dump_element(el: Element, depth: int, f: TextIO) -> None:
    if isinstance(el, Text):
        f.write(f"{_indent(depth)}Text({el.value!r})\n")
        return
    f.write(f"{_indent(depth)}{type(el).__name__}{_format_props(el.props)}\n")
    for child in el.children:
        _dump_element(child, depth + 1, f)


def _format_props(props: object) -> str:
    if props is None:
        return ""
    parts: list[str] = []
    for fld in fields(props):
        value = getattr(props, fld.name)
        if value is None:
            continue
        if isinstance(value, Style):
            parts.append(f"{fld.name}={_format_props(value).strip()}")
        else:
            parts.append(f"{fld.name}={value!r}")
    return f" ({', '.join(parts)})"
