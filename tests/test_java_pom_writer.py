from datetime import datetime, timezone

from pageobjectgen.generator import generate_from_html
from pageobjectgen.java_pom_writer import build_java_page_object, java_method_name, locator_constant_name

_GENERATED_AT = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def _render(html: str, **kwargs) -> str:
    return build_java_page_object(
        "LoginPage",
        generate_from_html(html, "java"),
        generated_at=_GENERATED_AT,
        **kwargs,
    )


def test_locator_constant_name() -> None:
    assert locator_constant_name("UserName") == "USER_NAME"
    assert locator_constant_name("Submit2") == "SUBMIT2"
    assert locator_constant_name("_123Go") == "_123_GO"
    assert locator_constant_name("") == "ELEMENT"


def test_java_method_name() -> None:
    assert java_method_name("EnterUserNameText") == "enterUserNameText"
    assert java_method_name("IsSubmitDisplayed") == "isSubmitDisplayed"


def test_package_imports_and_regions() -> None:
    content = _render('<input id="user-name">', package_name="com.acme.pages", source_url="https://example.com/")
    assert "// Timestamp: 2024-01-02 03:04:05 UTC" in content
    assert "// Source: https://example.com/" in content
    assert "package com.acme.pages;" in content
    assert "import org.openqa.selenium.By;" in content
    assert "import org.openqa.selenium.support.ui.Select;" not in content
    assert "// region AUTO_LOCATORS" in content
    assert "// endregion AUTO_ACTIONS" in content
    assert "public class LoginPage {" in content


def test_locators_and_fluent_actions() -> None:
    content = _render('<input id="user-name"><button class="primary">Save</button>')
    assert 'private final By USER_NAME = By.id("user-name");' in content
    assert 'private final By SAVE = By.cssSelector("button.primary");' in content
    assert "public LoginPage enterUserNameText(String text) {" in content
    assert "public String getUserNameValue() {" in content
    assert "public LoginPage clickSave() {" in content
    assert "public boolean isSaveDisplayed() {" in content
    assert "private WebElement findSaveElement() {" in content
    assert "        return this;" in content


def test_select_import_only_when_needed() -> None:
    content = _render('<select name="country"><option>DE</option></select>')
    assert "import org.openqa.selenium.support.ui.Select;" in content
    assert "public LoginPage selectCountryByText(String text) {" in content
    assert "new Select(element).selectByValue(value);" in content
    assert "public String getSelectedCountryText() {" in content


def test_xpath_locator_is_escaped() -> None:
    content = _render('<a>Say "hi"</a>')
    assert "By.xpath(\"//a[normalize-space(.)='Say \\\"hi\\\"']\")" in content


def test_custom_wait_timeout() -> None:
    content = _render('<input id="q">', wait_timeout_seconds=3)
    assert "Duration.ofSeconds(3)" in content
