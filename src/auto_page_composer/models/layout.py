from __future__ import annotations

from typing import Any, Literal, Mapping, Sequence

from pydantic import BaseModel, Field

from .component import NarrativeRole, PageType
from .selection import ComponentSelection


class AnimationConfig(BaseModel):
    preset: str = "fadeIn"
    duration: float | None = None
    delay: float | None = None


class SectionPadding(BaseModel):
    top: str
    bottom: str


class SectionStyling(BaseModel):
    background_color: str | None = None
    text_color: str | None = None
    padding: SectionPadding | None = None
    max_width: str | None = None


class Section(BaseModel):
    id: str
    component_id: str
    content: Mapping[str, Any] = Field(default_factory=dict)
    narrative_role: NarrativeRole
    order: int = Field(ge=0)
    animations: AnimationConfig | None = None
    styling: SectionStyling | None = None


class PageMetadata(BaseModel):
    title: str
    description: str
    keywords: Sequence[str] = Field(default_factory=list)
    og_image: str | None = None
    canonical: str | None = None
    no_index: bool | None = None


class PersonaPageVariant(BaseModel):
    persona_id: str
    section_overrides: Mapping[str, Mapping[str, Any]] = Field(default_factory=dict)
    metadata_overrides: Mapping[str, Any] = Field(default_factory=dict)


class PageLayout(BaseModel):
    page_id: str
    website_id: str
    slug: str
    type: PageType
    sections: Sequence[Section] = Field(default_factory=list)
    metadata: PageMetadata
    persona_variants: Sequence[PersonaPageVariant] | None = None


class LayoutConstraints(BaseModel):
    max_sections: int | None = Field(default=None, ge=0)
    min_sections: int | None = Field(default=None, ge=0)
    excluded_components: Sequence[str] = Field(default_factory=list)


class LayoutGenerationRequest(BaseModel):
    website_id: str
    workspace_id: str
    page_type: PageType
    knowledge_base_id: str | None = None
    personas: Sequence[str] | None = None
    brand_config_id: str | None = None
    target_persona: str | None = None
    content_hints: Mapping[str, Any] | None = None
    constraints: LayoutConstraints | None = None

    class Config:
        json_schema_extra = {
            "example": {
                "website_id": "site-001",
                "workspace_id": "ws-demo",
                "page_type": "pricing",
                "knowledge_base_id": "kb-demo",
                "personas": ["persona-cto"],
                "brand_config_id": "brand-demo",
                "constraints": {"max_sections": 6},
            }
        }


class GenerationMetadata(BaseModel):
    processing_time_ms: int
    tokens_used: int = 0
    model_used: str
    generated_by: Literal["llm", "rule-based"]
    confidence_score: float
    warnings: Sequence[str] = Field(default_factory=list)


class LayoutGenerationResult(BaseModel):
    layout: PageLayout
    component_selections: Sequence[ComponentSelection] = Field(default_factory=list)
    generation_metadata: GenerationMetadata


__all__ = [
    "AnimationConfig",
    "GenerationMetadata",
    "LayoutConstraints",
    "LayoutGenerationRequest",
    "LayoutGenerationResult",
    "PageLayout",
    "PageMetadata",
    "PersonaPageVariant",
    "Section",
    "SectionPadding",
    "SectionStyling",
]
