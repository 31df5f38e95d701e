from pageobjectgen.locator_generator import resolve_locator
from pageobjectgen.models import DomNode, Locator, LocatorStrategy


def test_dom_node_attribute_keys_are_case_insensitive() -> None:
    node = DomNode(tag="input", attributes={"ID": "login", "Data-TestId": "submit"})
    assert node.attr("id") == "login"
    assert node.attr("ID") == "login"
    assert node.attr("data-testid") == "submit"
    assert dict(node.attributes) == {"id": "login", "data-testid": "submit"}


def test_dom_node_keeps_first_spelling_of_duplicate_keys() -> None:
    node = DomNode(tag="input", attributes={"Name": "first", "NAME": "second"})
    assert node.attr("name") == "first"


def test_hand_built_nodes_resolve_like_parsed_ones() -> None:
    node = DomNode(tag="input", attributes={"ID": "x"})
    assert resolve_locator(node) == Locator(LocatorStrategy.ID, "x")
