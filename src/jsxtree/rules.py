"""Translation rule table: tag -> accepted attributes and element class."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from jsxtree.elements import (
    BR,
    H1,
    H3,
    TAGS,
    A,
    AProps,
    Code,
    Div,
    DivProps,
    Element,
    Em,
    P,
    Span,
    SpanProps,
    Strong,
)
from jsxtree.style import parse_style


@dataclass(frozen=True, slots=True)
class AttrRule:
    """How one attribute maps onto a props record field."""

    field: str
    convert: Callable[[str], object] = str


@dataclass(frozen=True, slots=True)
class TranslationRule:
    """Accepted attributes and constructor for a supported tag."""

    tag: str
    element: type[Element]
    props: type | None = None
    attrs: dict[str, AttrRule] = field(default_factory=dict)


def _make_rules() -> dict[str, TranslationRule]:
    rules: dict[str, TranslationRule] = {}

    def r(
        element: type[Element],
        props: type | None = None,
        attrs: dict[str, AttrRule] | None = None,
    ) -> None:
        rules[element.tag] = TranslationRule(element.tag, element, props, attrs or {})

    class_name = AttrRule("class_name")

    # Block
    r(P)
    r(H1)
    r(H3)
    r(Div, DivProps, {"classname": class_name, "class": class_name})

    # Inline
    r(Code)
    r(Strong)
    r(Em)
    r(A, AProps, {"href": AttrRule("href"), "target": AttrRule("target")})
    r(
        Span,
        SpanProps,
        {"classname": class_name, "class": class_name, "style": AttrRule("style", parse_style)},
    )
    r(BR)

    return rules


RULES: dict[str, TranslationRule] = _make_rules()


def check_rules(rules: dict[str, TranslationRule] = RULES) -> None:
    """Verify every tagged element class has a rule and vice versa."""
    missing = sorted(set(TAGS) - set(rules))
    extra = sorted(set(rules) - set(TAGS))
    if missing or extra:
        raise RuntimeError(f"rule table out of sync: missing={missing} extra={extra}")
    for tag, rule in rules.items():
        if rule.attrs and rule.props is None:
            raise RuntimeError(f"rule for <{tag}> accepts attributes but has no props record")


check_rules()
