from __future__ import annotations

import logging
from typing import AbstractSet, Iterable

from .action_catalog import emit_members
from .classifier import classify
from .dom_extractor import extract_dom_nodes
from .keywords import reserved_words_for
from .locator_generator import resolve_locator
from .models import CandidateElement, DomNode, GeneratedElement, GenerationResult
from .name_sanitizer import (
    NameRegistry,
    ensure_unique_members,
    ensure_unique_names,
    find_duplicate_names,
    sanitize_name,
)
from .name_suggester import suggest_element_name

WARNING_SNIPPET_LIMIT = 100

logger = logging.getLogger("pageobjectgen.generator")


def discover_candidates(nodes: Iterable[DomNode]) -> tuple[list[CandidateElement], list[str]]:
    candidates: list[CandidateElement] = []
    warnings: list[str] = []
    for node in nodes:
        kind = classify(node)
        if kind is None:
            continue
        candidate = CandidateElement(node=node, kind=kind, suggested_name=suggest_element_name(node, kind))
        candidate.locator = resolve_locator(node)
        if candidate.locator is None:
            message = f"Could not generate a reliable locator for element: {_snippet(node)}"
            warnings.append(message)
            logger.warning(message)
            continue
        candidates.append(candidate)
    return candidates, warnings


def assign_names(candidates: list[CandidateElement], reserved_words: AbstractSet[str]) -> None:
    registry = NameRegistry()
    for candidate in candidates:
        candidate.resolved_name = sanitize_name(candidate.suggested_name, candidate.kind, registry, reserved_words)

    duplicates = find_duplicate_names([candidate.resolved_name or "" for candidate in candidates])
    if duplicates:
        logger.info("Renumbering duplicate names: %s", ", ".join(duplicates))
    ensure_unique_names(candidates)
    for old_name, new_name in ensure_unique_members(candidates):
        logger.info("Renamed %s to %s to avoid a member name clash", old_name, new_name)


def generate_page_elements(nodes: Iterable[DomNode], reserved_words: AbstractSet[str]) -> GenerationResult:
    candidates, warnings = discover_candidates(nodes)
    assign_names(candidates, reserved_words)

    elements: list[GeneratedElement] = []
    for candidate in candidates:
        if not candidate.is_complete or candidate.locator is None or candidate.resolved_name is None:
            continue
        elements.append(
            GeneratedElement(
                identifier=candidate.resolved_name,
                kind=candidate.kind,
                locator=candidate.locator,
                suggested_name=candidate.suggested_name,
                members=tuple(emit_members(candidate)),
            )
        )

    logger.info("Generated %d element(s), %d warning(s).", len(elements), len(warnings))
    return GenerationResult(elements=tuple(elements), warnings=tuple(warnings))


def generate_from_html(html: str, language: str = "csharp") -> GenerationResult:
    return generate_page_elements(extract_dom_nodes(html), reserved_words_for(language))


def _snippet(node: DomNode) -> str:
    source = node.outer_html or f"<{node.tag}>"
    return f"{source[:WARNING_SNIPPET_LIMIT]}..."
