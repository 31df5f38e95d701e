from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .models import CandidateElement, ElementKind, Locator, MemberDescriptor, OperationKind

ActionReturnKind = Literal["void", "string", "boolean", "element", "locator"]


@dataclass(frozen=True, slots=True)
class OperationSpec:
    operation: OperationKind
    name_template: str
    description: str
    return_kind: ActionReturnKind
    parameter_keys: tuple[str, ...] = ()

    def member_name(self, element_name: str) -> str:
        return self.name_template.format(name=element_name)


OPERATION_CATALOG: dict[OperationKind, OperationSpec] = {
    OperationKind.LOCATOR_FIELD: OperationSpec(
        operation=OperationKind.LOCATOR_FIELD,
        name_template="{name}Locator",
        description="Locator field declaration.",
        return_kind="locator",
    ),
    OperationKind.FIND_ELEMENT: OperationSpec(
        operation=OperationKind.FIND_ELEMENT,
        name_template="Find{name}Element",
        description="Waits for presence and returns the element.",
        return_kind="element",
    ),
    OperationKind.CLICK: OperationSpec(
        operation=OperationKind.CLICK,
        name_template="Click{name}",
        description="Waits until clickable, then clicks.",
        return_kind="void",
    ),
    OperationKind.ENTER_TEXT: OperationSpec(
        operation=OperationKind.ENTER_TEXT,
        name_template="Enter{name}Text",
        description="Clears the field and types text.",
        return_kind="void",
        parameter_keys=("text",),
    ),
    OperationKind.GET_VALUE: OperationSpec(
        operation=OperationKind.GET_VALUE,
        name_template="Get{name}Value",
        description="Reads the value attribute.",
        return_kind="string",
    ),
    OperationKind.GET_TEXT: OperationSpec(
        operation=OperationKind.GET_TEXT,
        name_template="Get{name}Text",
        description="Reads the displayed text.",
        return_kind="string",
    ),
    OperationKind.IS_DISPLAYED: OperationSpec(
        operation=OperationKind.IS_DISPLAYED,
        name_template="Is{name}Displayed",
        description="Probes presence, then visibility.",
        return_kind="boolean",
    ),
    OperationKind.SELECT_BY_VISIBLE_TEXT: OperationSpec(
        operation=OperationKind.SELECT_BY_VISIBLE_TEXT,
        name_template="Select{name}ByText",
        description="Selects an option by its visible text.",
        return_kind="void",
        parameter_keys=("text",),
    ),
    OperationKind.SELECT_BY_VALUE: OperationSpec(
        operation=OperationKind.SELECT_BY_VALUE,
        name_template="Select{name}ByValue",
        description="Selects an option by its value attribute.",
        return_kind="void",
        parameter_keys=("value",),
    ),
    OperationKind.GET_SELECTED_TEXT: OperationSpec(
        operation=OperationKind.GET_SELECTED_TEXT,
        name_template="GetSelected{name}Text",
        description="Reads the selected option text.",
        return_kind="string",
    ),
}

_CLICKABLE_KINDS = frozenset(
    {
        ElementKind.BUTTON,
        ElementKind.LINK,
        ElementKind.CHECKBOX,
        ElementKind.RADIO_BUTTON,
        ElementKind.GENERIC,
    }
)
_TEXT_ENTRY_KINDS = frozenset({ElementKind.INPUT, ElementKind.TEXT_AREA})


def operations_for_kind(kind: ElementKind) -> tuple[OperationKind, ...]:
    operations: list[OperationKind] = [OperationKind.LOCATOR_FIELD, OperationKind.FIND_ELEMENT]
    if kind in _CLICKABLE_KINDS:
        operations.append(OperationKind.CLICK)
    if kind in _TEXT_ENTRY_KINDS:
        operations.extend((OperationKind.ENTER_TEXT, OperationKind.GET_VALUE))
    elif kind is not ElementKind.SELECT:
        operations.append(OperationKind.GET_TEXT)
    operations.append(OperationKind.IS_DISPLAYED)
    if kind is ElementKind.SELECT:
        operations.extend(
            (
                OperationKind.SELECT_BY_VISIBLE_TEXT,
                OperationKind.SELECT_BY_VALUE,
                OperationKind.GET_SELECTED_TEXT,
            )
        )
    return tuple(operations)


KIND_OPERATIONS: dict[ElementKind, tuple[OperationKind, ...]] = {
    kind: operations_for_kind(kind) for kind in ElementKind
}


def member_names_for(kind: ElementKind, element_name: str) -> list[str]:
    return [OPERATION_CATALOG[operation].member_name(element_name) for operation in KIND_OPERATIONS[kind]]


def build_member(operation: OperationKind, element_name: str, locator: Locator) -> MemberDescriptor:
    spec = OPERATION_CATALOG[operation]
    return MemberDescriptor(
        operation=operation,
        element_name=element_name,
        locator=locator,
        member_name=spec.member_name(element_name),
        parameters=spec.parameter_keys,
    )


def emit_members(element: CandidateElement) -> list[MemberDescriptor]:
    if element.locator is None or not element.resolved_name:
        return []
    return [
        build_member(operation, element.resolved_name, element.locator)
        for operation in KIND_OPERATIONS[element.kind]
    ]
