from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .models import DomNode, Locator, LocatorStrategy
from .selector_rules import (
    css_attribute_term,
    escape_css_identifier,
    is_dynamic_id_value,
    join_xpath_predicates,
    usable_class_tokens,
    xpath_literal,
    xpath_predicate,
)

_VALUE_INPUT_TYPES = frozenset({"submit", "button"})
_TEXT_XPATH_TAGS = frozenset({"button", "a"})


@dataclass(slots=True)
class DomAnalyzer:
    node: DomNode

    @property
    def tag(self) -> str:
        return self.node.tag.lower()

    def attr(self, key: str) -> str | None:
        return self.node.stripped_attr(key)

    @property
    def input_type(self) -> str | None:
        if self.tag != "input":
            return None
        return self.attr("type")

    @property
    def is_button_like(self) -> bool:
        if self.tag == "button":
            return True
        return (self.input_type or "").lower() in _VALUE_INPUT_TYPES

    @property
    def is_text_addressable(self) -> bool:
        return self.tag in _TEXT_XPATH_TAGS or self.node.attr("role") == "button"

    @property
    def trimmed_text(self) -> str:
        return (self.node.text or "").strip()


class LocatorResolver:
    """Applies the locator rules in priority order; the first hit wins."""

    def __init__(self, analyzer: DomAnalyzer) -> None:
        self.analyzer = analyzer

    @property
    def rules(self) -> tuple[Callable[[], Locator | None], ...]:
        return (
            self._id_rule,
            self._name_rule,
            self._test_id_rule,
            self._composite_css_rule,
            self._xpath_rule,
        )

    def resolve(self) -> Locator | None:
        for rule in self.rules:
            locator = rule()
            if locator is not None:
                return locator
        return None

    def _id_rule(self) -> Locator | None:
        id_value = self.analyzer.attr("id")
        if not id_value or is_dynamic_id_value(id_value):
            return None
        return Locator(LocatorStrategy.ID, id_value)

    def _name_rule(self) -> Locator | None:
        name = self.analyzer.attr("name")
        if not name:
            return None
        return Locator(LocatorStrategy.NAME, name)

    def _test_id_rule(self) -> Locator | None:
        test_id = self.analyzer.attr("data-testid")
        if not test_id:
            return None
        return Locator(LocatorStrategy.CSS_SELECTOR, css_attribute_term("data-testid", test_id))

    def _composite_css_rule(self) -> Locator | None:
        selector = build_composite_css_selector(self.analyzer)
        if selector is None:
            return None
        return Locator(LocatorStrategy.CSS_SELECTOR, selector)

    def _xpath_rule(self) -> Locator | None:
        xpath = build_attribute_xpath(self.analyzer)
        if xpath is None:
            return None
        return Locator(LocatorStrategy.XPATH, xpath)


def resolve_locator(node: DomNode) -> Locator | None:
    return LocatorResolver(DomAnalyzer(node)).resolve()


def build_composite_css_selector(analyzer: DomAnalyzer) -> str | None:
    terms: list[str] = []

    input_type = analyzer.input_type
    if input_type:
        terms.append(css_attribute_term("type", input_type))

    for token in usable_class_tokens(analyzer.node.attr("class")):
        terms.append(f".{escape_css_identifier(token)}")

    for attr in ("placeholder", "title", "role"):
        value = analyzer.attr(attr)
        if value:
            terms.append(css_attribute_term(attr, value))

    if analyzer.is_button_like:
        value = analyzer.attr("value")
        if value:
            terms.append(css_attribute_term("value", value))

    # A bare tag name matches far too much to be useful.
    if not terms:
        return None
    return analyzer.tag + "".join(terms)


def build_attribute_xpath(analyzer: DomAnalyzer) -> str | None:
    predicates: list[str] = []

    for attr in ("id", "name"):
        value = analyzer.attr(attr)
        if value:
            predicates.append(xpath_predicate(attr, value))

    input_type = analyzer.input_type
    if input_type:
        predicates.append(xpath_predicate("type", input_type))

    text = analyzer.trimmed_text
    if text and analyzer.is_text_addressable:
        predicates.append(f"normalize-space(.)={xpath_literal(text)}")

    if not predicates:
        return None
    return f"//{analyzer.tag}[{join_xpath_predicates(predicates)}]"
