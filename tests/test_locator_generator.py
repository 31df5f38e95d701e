from pageobjectgen.dom_extractor import extract_dom_nodes
from pageobjectgen.locator_generator import (
    DomAnalyzer,
    LocatorResolver,
    build_attribute_xpath,
    build_composite_css_selector,
    resolve_locator,
)
from pageobjectgen.models import DomNode, Locator, LocatorStrategy


def _first(html: str) -> DomNode:
    return next(node for node in extract_dom_nodes(html) if node.is_element)


def _locate(html: str) -> Locator | None:
    return resolve_locator(_first(html))


def test_id_beats_name() -> None:
    assert _locate('<input id="email" name="email_name">') == Locator(LocatorStrategy.ID, "email")


def test_dynamic_id_falls_through_to_name() -> None:
    assert _locate('<input id="field12345" name="fld">') == Locator(LocatorStrategy.NAME, "fld")


def test_short_digit_run_id_is_kept() -> None:
    assert _locate('<input id="field12">') == Locator(LocatorStrategy.ID, "field12")


def test_id_value_is_trimmed() -> None:
    assert _locate('<button id=" save-btn ">Save</button>') == Locator(LocatorStrategy.ID, "save-btn")


def test_test_id_selector() -> None:
    locator = _locate('<a href="#" data-testid="nav-home">Home</a>')
    assert locator == Locator(LocatorStrategy.CSS_SELECTOR, "[data-testid='nav-home']")


def test_test_id_selector_is_escaped() -> None:
    locator = _locate('<a href="#" data-testid="o\'brien">Profile</a>')
    assert locator == Locator(LocatorStrategy.CSS_SELECTOR, "[data-testid='o\\'brien']")


def test_composite_css_filters_unstable_classes() -> None:
    locator = _locate(
        '<input id="x-guid-1" type="email" class="form-control a1 input123 is-active" placeholder="Work email">'
    )
    assert locator == Locator(
        LocatorStrategy.CSS_SELECTOR,
        "input[type='email'].form-control[placeholder='Work email']",
    )


def test_composite_css_adds_value_for_buttons() -> None:
    locator = _locate('<button class="x" value="go" title="Go now">Go</button>')
    assert locator == Locator(LocatorStrategy.CSS_SELECTOR, "button[title='Go now'][value='go']")


def test_composite_css_ignores_value_for_text_inputs() -> None:
    assert build_composite_css_selector(DomAnalyzer(_first('<input value="prefilled">'))) is None


def test_role_button_div_never_gets_bare_tag_selector() -> None:
    locator = _locate('<div role="button" class="ab">Open</div>')
    assert locator == Locator(LocatorStrategy.CSS_SELECTOR, "div[role='button']")
    assert locator.value != "div"


def test_xpath_fallback_uses_text_for_buttons() -> None:
    assert _locate("<button>  Save  </button>") == Locator(LocatorStrategy.XPATH, "//button[normalize-space(.)='Save']")


def test_xpath_fallback_quotes_text() -> None:
    locator = _locate("<a>Don't go</a>")
    assert locator == Locator(LocatorStrategy.XPATH, "//a[normalize-space(.)=\"Don't go\"]")


def test_xpath_fallback_keeps_dynamic_id() -> None:
    assert _locate('<input id="x12345">') == Locator(LocatorStrategy.XPATH, "//input[@id='x12345']")


def test_xpath_combines_predicates() -> None:
    analyzer = DomAnalyzer(_first('<input id="row-guid" type="text">'))
    assert build_attribute_xpath(analyzer) == "//input[@id='row-guid' and @type='text']"


def test_select_text_is_not_used_in_xpath() -> None:
    assert _locate("<select><option>One</option></select>") is None


def test_nodes_without_any_rule_are_dropped() -> None:
    assert _locate("<button></button>") is None
    assert _locate("<textarea></textarea>") is None


def test_resolver_rule_order() -> None:
    resolver = LocatorResolver(DomAnalyzer(_first('<input name="q" data-testid="search">')))
    names = [rule.__name__ for rule in resolver.rules]
    assert names == ["_id_rule", "_name_rule", "_test_id_rule", "_composite_css_rule", "_xpath_rule"]
    assert resolver.resolve() == Locator(LocatorStrategy.NAME, "q")


def test_digit_leading_class_is_escaped() -> None:
    assert _locate('<button class="3col">x</button>') == Locator(LocatorStrategy.CSS_SELECTOR, "button.\\33 col")
    assert _locate('<button class="2xl:px-4">x</button>') == Locator(
        LocatorStrategy.CSS_SELECTOR, "button.\\32 xl\\3a px-4"
    )


def test_multiline_title_is_escaped() -> None:
    locator = _locate('<button title="a\nb"></button>')
    assert locator == Locator(LocatorStrategy.CSS_SELECTOR, "button[title='a\\a b']")
