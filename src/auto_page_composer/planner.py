from __future__ import annotations

from typing import Mapping

from .catalog import COMPONENT_DEFINITIONS
from .models.component import ComponentDefinition
from .models.selection import ComponentScore, SelectionContext
from .scoring import score_component

# Candidates must score strictly above this to be offered for a slot.
ACCEPTANCE_THRESHOLD = 0.5


def find_best_match(
    context: SelectionContext,
    limit: int = 5,
    *,
    catalog: Mapping[str, ComponentDefinition] = COMPONENT_DEFINITIONS,
) -> list[ComponentScore]:
    excluded = set(context.previous_components) | set(context.excluded_components)
    scores = [
        score
        for component_id, component in catalog.items()
        if component_id not in excluded
        if (score := score_component(component, context)).total_score > ACCEPTANCE_THRESHOLD
    ]
    # sorted() is stable, so equal scores keep catalog order.
    scores = sorted(scores, key=lambda score: score.total_score, reverse=True)
    return scores[:limit]


__all__ = ["ACCEPTANCE_THRESHOLD", "find_best_match"]
