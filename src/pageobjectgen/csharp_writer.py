from __future__ import annotations

from datetime import datetime, timezone

from .models import GeneratedElement, GenerationResult, LocatorStrategy, MemberDescriptor, OperationKind

INDENT = "    "

_BY_METHODS: dict[LocatorStrategy, str] = {
    LocatorStrategy.ID: "Id",
    LocatorStrategy.NAME: "Name",
    LocatorStrategy.CSS_SELECTOR: "CssSelector",
    LocatorStrategy.XPATH: "XPath",
}


def build_csharp_page_object(
    class_name: str,
    result: GenerationResult,
    *,
    namespace: str = "YourProject.PageObjects",
    wait_timeout_seconds: int = 10,
    source_url: str | None = None,
    generated_at: datetime | None = None,
) -> str:
    timestamp = (generated_at or datetime.now(timezone.utc)).strftime("%Y-%m-%d %H:%M:%S")
    lines: list[str] = [
        "// Generated by pageobjectgen",
        f"// Timestamp: {timestamp} UTC",
    ]
    if source_url:
        lines.append(f"// Source: {source_url}")
    lines.extend(
        [
            "",
            "using OpenQA.Selenium;",
            "using OpenQA.Selenium.Support.UI;",
            "using SeleniumExtras.WaitHelpers;",
            "using System;",
            "",
            f"namespace {namespace}",
            "{",
            f"{INDENT}/// <summary>",
            f"{INDENT}/// Represents the {class_name} page.",
            f"{INDENT}/// NOTE: This is auto-generated code. Review and refine locators and methods.",
            f"{INDENT}/// </summary>",
            f"{INDENT}public class {class_name}",
            f"{INDENT}{{",
            f"{INDENT * 2}private readonly IWebDriver _driver;",
            f"{INDENT * 2}private readonly WebDriverWait _wait;",
            f"{INDENT * 2}private readonly TimeSpan _defaultWaitTimeout = TimeSpan.FromSeconds({wait_timeout_seconds});",
            "",
            f"{INDENT * 2}public {class_name}(IWebDriver driver)",
            f"{INDENT * 2}{{",
            f"{INDENT * 3}_driver = driver ?? throw new ArgumentNullException(nameof(driver));",
            f"{INDENT * 3}_wait = new WebDriverWait(_driver, _defaultWaitTimeout);",
            f"{INDENT * 2}}}",
            "",
            f"{INDENT * 2}// --- Locators ---",
        ]
    )

    for element in result.elements:
        lines.append(f"{INDENT * 2}{_locator_declaration(element)}")
    lines.append("")
    lines.append(f"{INDENT * 2}// --- Interaction Methods ---")

    for element in result.elements:
        for member in element.members:
            if member.operation is OperationKind.LOCATOR_FIELD:
                continue
            lines.extend(_indent_block(_method_snippet(element, member), level=2))
            lines.append("")
        lines.append(f"{INDENT * 2}// --- END {element.identifier} ---")
        lines.append("")

    lines.append(f"{INDENT}}}")
    lines.append("}")
    return "\n".join(lines) + "\n"


def locator_field_name(identifier: str) -> str:
    camel = _lower_camel(identifier)
    if camel.startswith("_"):
        return f"{camel}Locator"
    return f"_{camel}Locator"


def by_expression(element: GeneratedElement) -> str:
    method = _BY_METHODS[element.locator.strategy]
    return f'By.{method}("{escape_csharp_string(element.locator.value)}")'


def escape_csharp_string(value: str) -> str:
    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )


def _locator_declaration(element: GeneratedElement) -> str:
    return f"private static readonly By {locator_field_name(element.identifier)} = {by_expression(element)};"


def _lower_camel(value: str) -> str:
    if not value:
        return value
    if value.startswith("_"):
        return value
    return value[:1].lower() + value[1:]


def _doc_label(element: GeneratedElement) -> str:
    label = " ".join(element.suggested_name.split()) or element.identifier
    return label.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _method_snippet(element: GeneratedElement, member: MemberDescriptor) -> list[str]:
    field = locator_field_name(element.identifier)
    name = member.member_name
    label = _doc_label(element)
    kind = element.kind.value
    log_name = escape_csharp_string(element.identifier)

    if member.operation is OperationKind.FIND_ELEMENT:
        return [
            f"private IWebElement {name}()",
            "{",
            f"{INDENT}_wait.Until(ExpectedConditions.ElementExists({field}));",
            f"{INDENT}return _driver.FindElement({field});",
            "}",
        ]

    if member.operation is OperationKind.CLICK:
        return [
            "/// <summary>",
            f"/// Clicks the {label} {kind}.",
            "/// Waits for the element to be clickable.",
            "/// </summary>",
            f"public void {name}()",
            "{",
            f'{INDENT}Console.WriteLine("Clicking {log_name}...");',
            f"{INDENT}try",
            f"{INDENT}{{",
            f"{INDENT * 2}var element = _wait.Until(ExpectedConditions.ElementToBeClickable({field}));",
            f"{INDENT * 2}element.Click();",
            f"{INDENT}}}",
            f"{INDENT}catch (Exception ex)",
            f"{INDENT}{{",
            f'{INDENT * 2}Console.Error.WriteLine($"Error clicking {log_name}: {{ex.Message}}");',
            f"{INDENT * 2}throw;",
            f"{INDENT}}}",
            "}",
        ]

    if member.operation is OperationKind.ENTER_TEXT:
        return [
            "/// <summary>",
            f"/// Enters text into the {label} field.",
            "/// Waits for the element to be visible, clears it, then sends keys.",
            "/// </summary>",
            '/// <param name="text">The text to enter.</param>',
            f"public void {name}(string text)",
            "{",
            f'{INDENT}Console.WriteLine($"Entering text \'{{text}}\' into {log_name}...");',
            f"{INDENT}try",
            f"{INDENT}{{",
            f"{INDENT * 2}var element = _wait.Until(ExpectedConditions.ElementIsVisible({field}));",
            f"{INDENT * 2}element.Clear();",
            f"{INDENT * 2}element.SendKeys(text);",
            f"{INDENT}}}",
            f"{INDENT}catch (Exception ex)",
            f"{INDENT}{{",
            f'{INDENT * 2}Console.Error.WriteLine($"Error entering text into {log_name}: {{ex.Message}}");',
            f"{INDENT * 2}throw;",
            f"{INDENT}}}",
            "}",
        ]

    if member.operation is OperationKind.GET_VALUE:
        return [
            "/// <summary>",
            f"/// Gets the current value from the {label} field.",
            "/// </summary>",
            f"public string {name}()",
            "{",
            f"{INDENT}var element = _wait.Until(ExpectedConditions.ElementIsVisible({field}));",
            f'{INDENT}return element.GetAttribute("value");',
            "}",
        ]

    if member.operation is OperationKind.GET_TEXT:
        return [
            "/// <summary>",
            f"/// Gets the text content of the {label} {kind}.",
            "/// </summary>",
            f"public string {name}()",
            "{",
            f"{INDENT}var element = _wait.Until(ExpectedConditions.ElementIsVisible({field}));",
            f"{INDENT}return element.Text;",
            "}",
        ]

    if member.operation is OperationKind.IS_DISPLAYED:
        return [
            "/// <summary>",
            f"/// Checks if the {label} {kind} is displayed.",
            "/// Uses a short wait for presence before checking visibility.",
            "/// </summary>",
            f"public bool {name}()",
            "{",
            f"{INDENT}try",
            f"{INDENT}{{",
            f"{INDENT * 2}var shortWait = new WebDriverWait(_driver, TimeSpan.FromSeconds(2));",
            f"{INDENT * 2}shortWait.Until(ExpectedConditions.ElementExists({field}));",
            f"{INDENT * 2}return _driver.FindElement({field}).Displayed;",
            f"{INDENT}}}",
            f"{INDENT}catch (NoSuchElementException)",
            f"{INDENT}{{",
            f"{INDENT * 2}return false;",
            f"{INDENT}}}",
            f"{INDENT}catch (WebDriverTimeoutException)",
            f"{INDENT}{{",
            f"{INDENT * 2}return false;",
            f"{INDENT}}}",
            f"{INDENT}catch (StaleElementReferenceException)",
            f"{INDENT}{{",
            f"{INDENT * 2}try {{ return _driver.FindElement({field}).Displayed; }}",
            f"{INDENT * 2}catch (WebDriverException) {{ return false; }}",
            f"{INDENT}}}",
            "}",
        ]

    if member.operation in (OperationKind.SELECT_BY_VISIBLE_TEXT, OperationKind.SELECT_BY_VALUE):
        by_text = member.operation is OperationKind.SELECT_BY_VISIBLE_TEXT
        parameter = member.parameters[0] if member.parameters else ("text" if by_text else "value")
        select_call = "SelectByText" if by_text else "SelectByValue"
        description = "its visible text" if by_text else "its value attribute"
        return [
            "/// <summary>",
            f"/// Selects an option from the {label} dropdown by {description}.",
            "/// </summary>",
            f'/// <param name="{parameter}">The option to select.</param>',
            f"public void {name}(string {parameter})",
            "{",
            f'{INDENT}Console.WriteLine($"Selecting \'{{{parameter}}}\' in {log_name}...");',
            f"{INDENT}try",
            f"{INDENT}{{",
            f"{INDENT * 2}var element = _wait.Until(ExpectedConditions.ElementIsVisible({field}));",
            f"{INDENT * 2}new SelectElement(element).{select_call}({parameter});",
            f"{INDENT}}}",
            f"{INDENT}catch (Exception ex)",
            f"{INDENT}{{",
            f'{INDENT * 2}Console.Error.WriteLine($"Error selecting in {log_name}: {{ex.Message}}");',
            f"{INDENT * 2}throw;",
            f"{INDENT}}}",
            "}",
        ]

    if member.operation is OperationKind.GET_SELECTED_TEXT:
        return [
            "/// <summary>",
            f"/// Gets the selected option's text from the {label} dropdown.",
            "/// </summary>",
            f"public string {name}()",
            "{",
            f"{INDENT}var element = _wait.Until(ExpectedConditions.ElementIsVisible({field}));",
            f"{INDENT}return new SelectElement(element).SelectedOption.Text;",
            "}",
        ]

    return [f"// Unsupported operation {member.operation.value} for {element.identifier}"]


def _indent_block(lines: list[str], level: int) -> list[str]:
    prefix = INDENT * level
    return [f"{prefix}{line}" if line else "" for line in lines]
