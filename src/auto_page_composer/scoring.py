from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, Sequence

from .dictionaries import PAGE_TYPE_KEYWORDS
from .models.component import (
    ComponentDefinition,
    ContentRequirements,
    PageType,
    PersonaFitScore,
    PositionHints,
    PreferredPosition,
)
from .models.selection import ComponentScore, ScoreBreakdown, SelectionContext

SCORE_WEIGHTS: Mapping[str, float] = MappingProxyType({
    "content_match": 0.30,
    "use_case_match": 0.25,
    "persona_fit": 0.20,
    "position_match": 0.15,
    "narrative_fit": 0.10,
})

NEUTRAL_SCORE = 0.5


def score_component(component: ComponentDefinition, context: SelectionContext) -> ComponentScore:
    """Rank one component for the slot described by ``context``.

    The result depends only on its arguments, so identical inputs always give
    identical scores.
    """
    metadata = component.ai_metadata
    breakdown = ScoreBreakdown(
        content_match=content_match(metadata.content_requirements, context.available_content),
        use_case_match=use_case_match(metadata.use_cases, context.page_type),
        persona_fit=persona_fit(metadata.persona_fit, context.target_persona),
        position_match=position_match(metadata.position_hints, context),
        narrative_fit=1.0 if metadata.narrative_role == context.narrative_stage else 0.3,
    )
    weighted = sum(getattr(breakdown, name) * weight for name, weight in SCORE_WEIGHTS.items())
    return ComponentScore(
        component_id=component.id,
        total_score=min(max(weighted, 0.0), 1.0),
        breakdown=breakdown,
    )


def content_match(requirements: ContentRequirements, available_content: Mapping[str, Any]) -> float:
    required = requirements.required
    optional = requirements.optional
    required_coverage = (
        sum(1 for slot in required if _present(available_content, slot)) / len(required)
        if required
        else 1.0
    )
    optional_coverage = (
        sum(1 for slot in optional if _present(available_content, slot)) / len(optional)
        if optional
        else 0.0
    )
    return 0.8 * required_coverage + 0.2 * optional_coverage


def use_case_match(
    use_cases: Sequence[str],
    page_type: PageType,
    *,
    keywords_by_page: Mapping[PageType, Sequence[str]] = PAGE_TYPE_KEYWORDS,
) -> float:
    keywords = [keyword.lower() for keyword in keywords_by_page.get(page_type, ())]
    if not keywords:
        return NEUTRAL_SCORE
    matches = sum(
        1 for use_case in use_cases if any(keyword in use_case.lower() for keyword in keywords)
    )
    return min(matches / 2, 1.0)


def persona_fit(fits: Sequence[PersonaFitScore], target_persona: str | None) -> float:
    if not target_persona:
        return NEUTRAL_SCORE
    target = target_persona.lower()
    for fit in fits:
        if fit.persona.lower() == target:
            return fit.score
    return NEUTRAL_SCORE


def position_match(hints: PositionHints, context: SelectionContext) -> float:
    relative = context.current_position / context.total_sections if context.total_sections else 0.0

    preferred = hints.preferred_position
    if preferred is PreferredPosition.top:
        score = 1.0 if relative < 0.3 else 0.3
    elif preferred is PreferredPosition.middle:
        score = 1.0 if 0.2 <= relative <= 0.8 else 0.4
    elif preferred is PreferredPosition.bottom:
        score = 1.0 if relative > 0.7 else 0.3
    else:
        score = 0.8

    if context.previous_components:
        last = context.previous_components[-1]
        if last in hints.avoid_after:
            score *= 0.3
        if last in hints.prefer_after:
            score *= 1.3

    return min(score, 1.0)


def _present(content: Mapping[str, Any], slot: str) -> bool:
    return content.get(slot) is not None


__all__ = [
    "NEUTRAL_SCORE",
    "SCORE_WEIGHTS",
    "content_match",
    "persona_fit",
    "position_match",
    "score_component",
    "use_case_match",
]
