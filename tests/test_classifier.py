from pageobjectgen.classifier import classify, input_kind, is_relevant_node
from pageobjectgen.dom_extractor import extract_dom_nodes
from pageobjectgen.models import DomNode, ElementKind, NodeType


def _node(tag: str, text: str = "", **attributes: str) -> DomNode:
    return DomNode(tag=tag, attributes=attributes, text=text)


def test_input_types_map_to_kinds() -> None:
    assert classify(_node("input")) is ElementKind.INPUT
    assert classify(_node("input", type="email")) is ElementKind.INPUT
    assert classify(_node("input", type="submit")) is ElementKind.BUTTON
    assert classify(_node("input", type="RESET")) is ElementKind.BUTTON
    assert classify(_node("input", type="button")) is ElementKind.BUTTON
    assert classify(_node("input", type="checkbox")) is ElementKind.CHECKBOX
    assert classify(_node("input", type="Radio")) is ElementKind.RADIO_BUTTON


def test_missing_input_type_defaults_to_text() -> None:
    assert input_kind(None) is ElementKind.INPUT
    assert input_kind("") is ElementKind.INPUT


def test_tag_kinds() -> None:
    assert classify(_node("button", "Save")) is ElementKind.BUTTON
    assert classify(_node("a", "Home")) is ElementKind.LINK
    assert classify(_node("select")) is ElementKind.SELECT
    assert classify(_node("textarea")) is ElementKind.TEXT_AREA


def test_role_button_containers_are_generic() -> None:
    assert classify(_node("div", "Open", role="button")) is ElementKind.GENERIC
    assert classify(_node("span", "Open", role="button")) is ElementKind.GENERIC


def test_role_must_match_exactly() -> None:
    assert classify(_node("div", "Open")) is None
    assert classify(_node("div", "Open", role="Button")) is None
    assert classify(_node("div", "Open", role="link")) is None
    assert classify(_node("section", "Open", role="button")) is None


def test_non_element_nodes_are_ignored() -> None:
    text_node = DomNode(tag="#text", text="hello", node_type=NodeType.TEXT)
    comment_node = DomNode(tag="#other", text="comment", node_type=NodeType.OTHER)
    assert not is_relevant_node(text_node)
    assert classify(comment_node) is None


def test_nested_relevant_nodes_are_each_classified() -> None:
    nodes = extract_dom_nodes('<a href="#"><span role="button">Go</span></a>')
    kinds = [classify(node) for node in nodes if classify(node) is not None]
    assert kinds == [ElementKind.LINK, ElementKind.GENERIC]
