from __future__ import annotations

from .models import DomNode, ElementKind

FALLBACK_TEXT_LIMIT = 30

_PLACEHOLDER_TAGS = frozenset({"input", "textarea"})
_VALUE_INPUT_TYPES = frozenset({"submit", "button"})
_TEXT_TAGS = frozenset({"button", "a"})


def suggest_element_name(node: DomNode, kind: ElementKind) -> str:
    """Return the most stable human-meaningful name source for ``node``.

    Identifier-like attributes win over visible text. When nothing usable is
    found the kind label is returned verbatim, which the sanitizer treats as
    a generic name and always numbers.
    """
    tag = node.tag.lower()

    for key in ("id", "name"):
        value = node.stripped_attr(key)
        if value:
            return value

    if tag in _PLACEHOLDER_TAGS:
        value = node.stripped_attr("placeholder")
        if value:
            return value

    if tag == "input" and (node.attr("type") or "").lower() in _VALUE_INPUT_TYPES:
        value = node.stripped_attr("value")
        if value:
            return value

    text = (node.text or "").strip()
    if tag in _TEXT_TAGS and text:
        return text

    if text:
        return text[:FALLBACK_TEXT_LIMIT]

    return kind.label


def is_generic_suggestion(suggested_name: str, kind: ElementKind) -> bool:
    return suggested_name == kind.label
