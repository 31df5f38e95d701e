from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping


class NodeType(str, Enum):
    ELEMENT = "element"
    TEXT = "text"
    OTHER = "other"


class ElementKind(str, Enum):
    INPUT = "Input"
    BUTTON = "Button"
    CHECKBOX = "Checkbox"
    RADIO_BUTTON = "RadioButton"
    LINK = "Link"
    SELECT = "Select"
    TEXT_AREA = "TextArea"
    GENERIC = "Generic"

    @property
    def label(self) -> str:
        return self.value


class LocatorStrategy(str, Enum):
    ID = "Id"
    NAME = "Name"
    CSS_SELECTOR = "CssSelector"
    XPATH = "XPath"


class OperationKind(str, Enum):
    LOCATOR_FIELD = "LocatorField"
    FIND_ELEMENT = "FindElement"
    CLICK = "Click"
    ENTER_TEXT = "EnterText"
    GET_VALUE = "GetValue"
    GET_TEXT = "GetText"
    IS_DISPLAYED = "IsDisplayed"
    SELECT_BY_VISIBLE_TEXT = "SelectByVisibleText"
    SELECT_BY_VALUE = "SelectByValue"
    GET_SELECTED_TEXT = "GetSelectedText"


@dataclass(frozen=True, slots=True)
class DomNode:
    tag: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    text: str = ""
    node_type: NodeType = NodeType.ELEMENT
    outer_html: str = ""

    def __post_init__(self) -> None:
        # Attribute names are case-insensitive; the first spelling wins.
        normalized: dict[str, str] = {}
        for key, value in self.attributes.items():
            normalized.setdefault(key.lower(), value)
        object.__setattr__(self, "attributes", normalized)

    def attr(self, key: str) -> str | None:
        return self.attributes.get(key.lower())

    def stripped_attr(self, key: str) -> str | None:
        raw = self.attr(key)
        if raw is None:
            return None
        value = raw.strip()
        return value or None

    @property
    def is_element(self) -> bool:
        return self.node_type is NodeType.ELEMENT


@dataclass(frozen=True, slots=True)
class Locator:
    strategy: LocatorStrategy
    value: str


@dataclass(slots=True)
class CandidateElement:
    node: DomNode
    kind: ElementKind
    suggested_name: str
    locator: Locator | None = None
    resolved_name: str | None = None

    @property
    def is_complete(self) -> bool:
        return self.locator is not None and bool(self.resolved_name)


@dataclass(frozen=True, slots=True)
class MemberDescriptor:
    operation: OperationKind
    element_name: str
    locator: Locator
    member_name: str
    parameters: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class GeneratedElement:
    identifier: str
    kind: ElementKind
    locator: Locator
    suggested_name: str
    members: tuple[MemberDescriptor, ...]

    @property
    def locator_strategy(self) -> LocatorStrategy:
        return self.locator.strategy

    @property
    def locator_value(self) -> str:
        return self.locator.value


@dataclass(frozen=True, slots=True)
class GenerationResult:
    elements: tuple[GeneratedElement, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def identifiers(self) -> list[str]:
        return [element.identifier for element in self.elements]
