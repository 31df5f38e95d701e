from __future__ import annotations

from typing import Iterator

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import CData, Comment, Declaration, Doctype, ProcessingInstruction

from .models import DomNode, NodeType

_NON_TEXT_STRINGS = (CData, Comment, Declaration, Doctype, ProcessingInstruction)


def parse_document(html: str) -> BeautifulSoup:
    # Keep "class" and friends as raw strings so selector rules see the source value.
    return BeautifulSoup(html or "", "html.parser", multi_valued_attributes=None)


def iter_dom_nodes(document: BeautifulSoup | Tag) -> Iterator[DomNode]:
    for item in document.descendants:
        if isinstance(item, Tag):
            yield node_from_tag(item)
            continue
        if isinstance(item, _NON_TEXT_STRINGS):
            yield DomNode(tag="#other", text=str(item), node_type=NodeType.OTHER)
            continue
        if isinstance(item, NavigableString):
            yield DomNode(tag="#text", text=str(item), node_type=NodeType.TEXT)


def node_from_tag(tag: Tag) -> DomNode:
    attributes: dict[str, str] = {}
    for key, value in tag.attrs.items():
        lowered = str(key).lower()
        if lowered in attributes:
            continue
        attributes[lowered] = _attribute_text(value)
    return DomNode(
        tag=(tag.name or "").lower(),
        attributes=attributes,
        text=tag.get_text(),
        node_type=NodeType.ELEMENT,
        outer_html=str(tag),
    )


def extract_dom_nodes(html: str) -> list[DomNode]:
    return list(iter_dom_nodes(parse_document(html)))


def _attribute_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value)
    return str(value)
