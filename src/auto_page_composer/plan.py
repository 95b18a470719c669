from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal, Mapping, Sequence

from pydantic import BaseModel, Field

from .models.layout import PageMetadata


class PlannedSection(BaseModel):
    component_id: str = Field(alias="componentId")
    narrative_role: str | None = Field(default=None, alias="narrativeRole")
    content_mapping: Mapping[str, str] = Field(default_factory=dict, alias="contentMapping")
    reasoning: str | None = None

    class Config:
        populate_by_name = True


class LLMLayoutPayload(BaseModel):
    """Shape of the JSON body the model is asked to return."""

    sections: Sequence[PlannedSection] = Field(default_factory=list)
    metadata: PageMetadata | None = None


class LayoutPlan(BaseModel):
    sections: Sequence[PlannedSection] = Field(default_factory=list)
    metadata: PageMetadata
    generated_by: Literal["llm", "rule-based"]
    model_used: str
    tokens_used: int = 0


@dataclass(frozen=True)
class GenerationFailure:
    reason: str
    detail: str = ""


@dataclass(frozen=True)
class PlanResult:
    plan: LayoutPlan | None = None
    failure: GenerationFailure | None = None

    @classmethod
    def success(cls, plan: LayoutPlan) -> "PlanResult":
        return cls(plan=plan)

    @classmethod
    def failed(cls, reason: str, detail: str = "") -> "PlanResult":
        return cls(failure=GenerationFailure(reason=reason, detail=detail))

    @property
    def ok(self) -> bool:
        return self.plan is not None

    def or_else(self, fallback: Callable[[GenerationFailure], LayoutPlan]) -> LayoutPlan:
        if self.plan is not None:
            return self.plan
        return fallback(self.failure or GenerationFailure(reason="unknown"))


__all__ = [
    "GenerationFailure",
    "LLMLayoutPayload",
    "LayoutPlan",
    "PlanResult",
    "PlannedSection",
]
