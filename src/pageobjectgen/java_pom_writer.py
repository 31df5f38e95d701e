from __future__ import annotations

from datetime import datetime, timezone
import re

from .models import GeneratedElement, GenerationResult, LocatorStrategy, MemberDescriptor, OperationKind

INDENT = "    "
LOCATORS_REGION = "AUTO_LOCATORS"
ACTIONS_REGION = "AUTO_ACTIONS"

_BASE_IMPORTS: tuple[str, ...] = (
    "java.time.Duration",
    "org.openqa.selenium.By",
    "org.openqa.selenium.NoSuchElementException",
    "org.openqa.selenium.StaleElementReferenceException",
    "org.openqa.selenium.TimeoutException",
    "org.openqa.selenium.WebDriver",
    "org.openqa.selenium.WebElement",
    "org.openqa.selenium.support.ui.ExpectedConditions",
    "org.openqa.selenium.support.ui.WebDriverWait",
)
_SELECT_IMPORT = "org.openqa.selenium.support.ui.Select"


def build_java_page_object(
    class_name: str,
    result: GenerationResult,
    *,
    package_name: str = "com.example.pages",
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
    lines.append(f"package {package_name};")
    lines.append("")
    for import_name in _required_imports(result):
        lines.append(f"import {import_name};")
    lines.extend(
        [
            "",
            "/**",
            f" * Represents the {class_name} page.",
            " * NOTE: This is auto-generated code. Review and refine locators and methods.",
            " */",
            f"public class {class_name} {{",
            "",
            f"{INDENT}private final WebDriver driver;",
            f"{INDENT}private final WebDriverWait wait;",
            "",
            f"{INDENT}// region {LOCATORS_REGION}",
        ]
    )
    for element in result.elements:
        lines.append(f"{INDENT}private final By {locator_constant_name(element.identifier)} = {_selector_to_by_expression(element)};")
    lines.extend(
        [
            f"{INDENT}// endregion {LOCATORS_REGION}",
            "",
            f"{INDENT}public {class_name}(WebDriver driver) {{",
            f"{INDENT * 2}this.driver = driver;",
            f"{INDENT * 2}this.wait = new WebDriverWait(driver, Duration.ofSeconds({wait_timeout_seconds}));",
            f"{INDENT}}}",
            "",
            f"{INDENT}// region {ACTIONS_REGION}",
        ]
    )

    for element in result.elements:
        for member in element.members:
            if member.operation is OperationKind.LOCATOR_FIELD:
                continue
            snippet = _build_method_snippet(class_name, element, member)
            lines.extend(f"{INDENT}{line}" if line else "" for line in snippet.splitlines())
            lines.append("")

    lines.append(f"{INDENT}// endregion {ACTIONS_REGION}")
    lines.append("}")
    return "\n".join(lines) + "\n"


def locator_constant_name(identifier: str) -> str:
    spaced = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", identifier)
    collapsed = re.sub(r"_+", "_", spaced).upper()
    return collapsed or "ELEMENT"


def java_method_name(member_name: str) -> str:
    return member_name[:1].lower() + member_name[1:]


def _required_imports(result: GenerationResult) -> list[str]:
    imports = list(_BASE_IMPORTS)
    needs_select = any(
        member.operation
        in (
            OperationKind.SELECT_BY_VISIBLE_TEXT,
            OperationKind.SELECT_BY_VALUE,
            OperationKind.GET_SELECTED_TEXT,
        )
        for element in result.elements
        for member in element.members
    )
    if needs_select:
        imports.append(_SELECT_IMPORT)
    return sorted(imports)


def _selector_to_by_expression(element: GeneratedElement) -> str:
    escaped = _escape_java_string(element.locator.value)
    strategy = element.locator.strategy
    if strategy is LocatorStrategy.ID:
        return f'By.id("{escaped}")'
    if strategy is LocatorStrategy.NAME:
        return f'By.name("{escaped}")'
    if strategy is LocatorStrategy.CSS_SELECTOR:
        return f'By.cssSelector("{escaped}")'
    return f'By.xpath("{escaped}")'


def _escape_java_string(value: str) -> str:
    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )


def _locator_human_label(element: GeneratedElement) -> str:
    label = " ".join(element.suggested_name.split()) or element.identifier
    return label.replace("*/", "* /")


def _build_method_snippet(page_class_name: str, element: GeneratedElement, member: MemberDescriptor) -> str:
    constant = locator_constant_name(element.identifier)
    method_name = java_method_name(member.member_name)
    label = _locator_human_label(element)
    kind = element.kind.value

    if member.operation is OperationKind.FIND_ELEMENT:
        return (
            f"private WebElement {method_name}() {{\n"
            f"    wait.until(ExpectedConditions.presenceOfElementLocated({constant}));\n"
            f"    return driver.findElement({constant});\n"
            "}"
        )

    if member.operation is OperationKind.CLICK:
        return (
            "/**\n"
            f" * Clicks {label} {kind}.\n"
            " *\n"
            " * @return this\n"
            " */\n"
            f"public {page_class_name} {method_name}() {{\n"
            f"    wait.until(ExpectedConditions.elementToBeClickable({constant})).click();\n"
            "    return this;\n"
            "}"
        )

    if member.operation is OperationKind.ENTER_TEXT:
        return (
            "/**\n"
            f" * Clears {label} field and types the given text.\n"
            " *\n"
            " * @param text text to enter\n"
            " * @return this\n"
            " */\n"
            f"public {page_class_name} {method_name}(String text) {{\n"
            f"    WebElement element = wait.until(ExpectedConditions.visibilityOfElementLocated({constant}));\n"
            "    element.clear();\n"
            "    element.sendKeys(text);\n"
            "    return this;\n"
            "}"
        )

    if member.operation is OperationKind.GET_VALUE:
        return (
            "/**\n"
            f" * Returns current value of {label} field.\n"
            " */\n"
            f"public String {method_name}() {{\n"
            f"    return wait.until(ExpectedConditions.visibilityOfElementLocated({constant})).getAttribute(\"value\");\n"
            "}"
        )

    if member.operation is OperationKind.GET_TEXT:
        return (
            "/**\n"
            f" * Returns text of {label} {kind}.\n"
            " */\n"
            f"public String {method_name}() {{\n"
            f"    return wait.until(ExpectedConditions.visibilityOfElementLocated({constant})).getText();\n"
            "}"
        )

    if member.operation is OperationKind.IS_DISPLAYED:
        return (
            "/**\n"
            f" * Checks whether {label} {kind} is displayed.\n"
            " */\n"
            f"public boolean {method_name}() {{\n"
            "    try {\n"
            "        new WebDriverWait(driver, Duration.ofSeconds(2))\n"
            f"            .until(ExpectedConditions.presenceOfElementLocated({constant}));\n"
            f"        return driver.findElement({constant}).isDisplayed();\n"
            "    } catch (NoSuchElementException | TimeoutException | StaleElementReferenceException e) {\n"
            "        return false;\n"
            "    }\n"
            "}"
        )

    if member.operation in (OperationKind.SELECT_BY_VISIBLE_TEXT, OperationKind.SELECT_BY_VALUE):
        by_text = member.operation is OperationKind.SELECT_BY_VISIBLE_TEXT
        parameter = member.parameters[0] if member.parameters else ("text" if by_text else "value")
        select_call = "selectByVisibleText" if by_text else "selectByValue"
        description = "visible text" if by_text else "value attribute"
        return (
            "/**\n"
            f" * Selects an option of {label} dropdown by {description}.\n"
            " *\n"
            f" * @param {parameter} option to select\n"
            " * @return this\n"
            " */\n"
            f"public {page_class_name} {method_name}(String {parameter}) {{\n"
            f"    WebElement element = wait.until(ExpectedConditions.visibilityOfElementLocated({constant}));\n"
            f"    new Select(element).{select_call}({parameter});\n"
            "    return this;\n"
            "}"
        )

    if member.operation is OperationKind.GET_SELECTED_TEXT:
        return (
            "/**\n"
            f" * Returns selected option text of {label} dropdown.\n"
            " */\n"
            f"public String {method_name}() {{\n"
            f"    WebElement element = wait.until(ExpectedConditions.visibilityOfElementLocated({constant}));\n"
            "    return new Select(element).getFirstSelectedOption().getText();\n"
            "}"
        )

    return f"// Unsupported operation {member.operation.value} for {element.identifier}"
