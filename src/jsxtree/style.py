"""Inline ``style`` attribute parsing."""

from __future__ import annotations

from jsxtree.elements import Style
from jsxtree.errors import UnsupportedStyleDeclaration

# CSS property -> Style field
PROPERTIES: dict[str, str] = {
    "font-size": "font_size",
    "font-style": "font_style",
}


def parse_style(value: str) -> Style:
    """Parse a ``key: value; ...`` declaration list into a Style.

    All or nothing: one malformed declaration or unknown property fails the
    whole value.
    """
    fields: dict[str, str] = {}

    for decl in value.split(";"):
        if not decl.strip():
            continue

        parts = decl.split(":")
        if len(parts) != 2:
            raise UnsupportedStyleDeclaration(
                f"invalid key-val {decl!r} in {value!r}",
                value,
            )

        key = parts[0].strip()
        val = parts[1].strip().strip("\"'")

        field_name = PROPERTIES.get(key)
        if field_name is None:
            raise UnsupportedStyleDeclaration(
                f"unknown CSS key {key!r} in {value!r}",
                value,
            )
        fields[field_name] = val

    return Style(**fields)


def format_style(style: Style) -> str:
    """Inverse of parse_style, for rendering."""
    decls: list[str] = []
    for prop, field_name in PROPERTIES.items():
        val = getattr(style, field_name)
        if val is not None:
            decls.append(f"{prop}: {val}")
    return "; ".join(decls)
