from __future__ import annotations

from .models import DomNode, ElementKind

RELEVANT_TAGS = frozenset({"input", "button", "a", "select", "textarea"})
ROLE_BUTTON_TAGS = frozenset({"div", "span"})

_TAG_KINDS: dict[str, ElementKind] = {
    "button": ElementKind.BUTTON,
    "a": ElementKind.LINK,
    "select": ElementKind.SELECT,
    "textarea": ElementKind.TEXT_AREA,
}

_INPUT_TYPE_KINDS: dict[str, ElementKind] = {
    "submit": ElementKind.BUTTON,
    "reset": ElementKind.BUTTON,
    "button": ElementKind.BUTTON,
    "checkbox": ElementKind.CHECKBOX,
    "radio": ElementKind.RADIO_BUTTON,
}


def is_relevant_node(node: DomNode) -> bool:
    if not node.is_element:
        return False
    tag = node.tag.lower()
    if tag in RELEVANT_TAGS:
        return True
    return tag in ROLE_BUTTON_TAGS and node.attr("role") == "button"


def classify(node: DomNode) -> ElementKind | None:
    if not is_relevant_node(node):
        return None
    tag = node.tag.lower()
    if tag == "input":
        return input_kind(node.attr("type"))
    return _TAG_KINDS.get(tag, ElementKind.GENERIC)


def input_kind(input_type: str | None) -> ElementKind:
    normalized = (input_type if input_type is not None else "text").lower()
    return _INPUT_TYPE_KINDS.get(normalized, ElementKind.INPUT)
