from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from pydantic import BaseModel, Field

from .component import NarrativeRole, PageType


@dataclass(frozen=True)
class SelectionContext:
    """Everything the scorer needs to rank components for one slot."""

    page_type: PageType
    available_content: Mapping[str, Any]
    narrative_stage: NarrativeRole
    current_position: int
    total_sections: int
    previous_components: Sequence[str] = ()
    target_persona: str | None = None
    # Removed by request constraints; excluded but never used for adjacency.
    excluded_components: Sequence[str] = ()


class ScoreBreakdown(BaseModel):
    content_match: float
    use_case_match: float
    persona_fit: float
    position_match: float
    narrative_fit: float


class ComponentScore(BaseModel):
    component_id: str
    total_score: float = Field(ge=0.0, le=1.0)
    breakdown: ScoreBreakdown


class ComponentSelection(BaseModel):
    selected: str
    score: ComponentScore
    alternates: Sequence[ComponentScore] = Field(default_factory=list)
    content_mapping: Mapping[str, str] = Field(default_factory=dict)
    reasoning: str | None = None


__all__ = ["ComponentScore", "ComponentSelection", "ScoreBreakdown", "SelectionContext"]
