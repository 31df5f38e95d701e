from __future__ import annotations

import re
from typing import AbstractSet, Sequence

from .action_catalog import member_names_for
from .models import CandidateElement, ElementKind
from .name_suggester import is_generic_suggestion

KEYWORD_SUFFIX = "Element"

_INVALID_CHARS = re.compile(r"[^A-Za-z0-9_]")


class NameRegistry:
    """Per-run counters keyed by case-insensitive base identifier."""

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def next_count(self, base_name: str) -> int:
        key = base_name.lower()
        count = self._counts.get(key, 0) + 1
        self._counts[key] = count
        return count

    def count_for(self, base_name: str) -> int:
        return self._counts.get(base_name.lower(), 0)

    def reset(self) -> None:
        self._counts.clear()


def to_pascal_case(value: str) -> str:
    parts = [part for part in value.split("_") if part]
    return "".join(part[:1].upper() + part[1:].lower() for part in parts)


def to_base_identifier(suggested_name: str, kind: ElementKind, reserved_words: AbstractSet[str]) -> str:
    source = suggested_name if suggested_name and suggested_name.strip() else kind.label

    sanitized = source.replace("-", "_").replace(" ", "_")
    sanitized = _INVALID_CHARS.sub("", sanitized)
    if not sanitized or sanitized[0].isdigit():
        sanitized = f"_{sanitized}"

    sanitized = to_pascal_case(sanitized)
    if not sanitized:
        sanitized = kind.label
    # Casing drops the guard underscore added above.
    if sanitized[0].isdigit():
        sanitized = f"_{sanitized}"

    if sanitized.lower() in reserved_words:
        sanitized = f"{sanitized}{KEYWORD_SUFFIX}"
    return sanitized


def sanitize_name(
    suggested_name: str,
    kind: ElementKind,
    registry: NameRegistry,
    reserved_words: AbstractSet[str],
) -> str:
    source = suggested_name if suggested_name and suggested_name.strip() else kind.label
    base_name = to_base_identifier(source, kind, reserved_words)
    count = registry.next_count(base_name)
    if count > 1 or is_generic_suggestion(source, kind):
        return f"{base_name}{count}"
    return base_name


def ensure_unique_names(elements: Sequence[CandidateElement]) -> None:
    """Renumber residual case-insensitive duplicates in place.

    The first element of each duplicate group keeps its name; the others get
    counters 2..n, assigned from the last duplicate backwards. A counter that
    would hit a name already present is bumped until it is free.
    """
    groups: dict[str, list[CandidateElement]] = {}
    for element in elements:
        if not element.resolved_name:
            continue
        groups.setdefault(element.resolved_name.lower(), []).append(element)

    taken = set(groups)
    for members in groups.values():
        if len(members) < 2:
            continue
        counter = len(members)
        for element in reversed(members[1:]):
            base_name = element.resolved_name or ""
            suffix = counter
            candidate = f"{base_name}{suffix}"
            while candidate.lower() in taken:
                suffix += 1
                candidate = f"{base_name}{suffix}"
            taken.add(candidate.lower())
            element.resolved_name = candidate
            counter -= 1


def ensure_unique_members(elements: Sequence[CandidateElement]) -> list[tuple[str, str]]:
    """Renumber elements whose generated member names clash with an earlier element.

    Different identifiers can still produce the same member, e.g. a button
    ``SelectedFoo`` (``GetSelectedFooText``) and a select ``Foo``
    (``GetSelectedFooText``). The later element gets the first free counter.
    Returns the ``(old, new)`` renames.
    """
    taken_names = {element.resolved_name.lower() for element in elements if element.resolved_name}
    taken_members: set[str] = set()
    renames: list[tuple[str, str]] = []
    for element in elements:
        if not element.resolved_name:
            continue
        name = element.resolved_name
        members = _member_keys(element.kind, name)
        if members & taken_members:
            suffix = 2
            while True:
                name = f"{element.resolved_name}{suffix}"
                members = _member_keys(element.kind, name)
                if name.lower() not in taken_names and not members & taken_members:
                    break
                suffix += 1
            renames.append((element.resolved_name, name))
            taken_names.add(name.lower())
            element.resolved_name = name
        taken_members |= members
    return renames


def _member_keys(kind: ElementKind, name: str) -> set[str]:
    return {member.lower() for member in member_names_for(kind, name)}


def find_duplicate_names(names: Sequence[str]) -> list[str]:
    seen: set[str] = set()
    duplicates: list[str] = []
    for name in names:
        key = name.lower()
        if key in seen and key not in duplicates:
            duplicates.append(key)
        seen.add(key)
    return duplicates
