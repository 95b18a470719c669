from __future__ import annotations

from typing import Any, Mapping, Sequence

from pydantic import BaseModel, Field


class KnowledgeBaseItem(BaseModel):
    id: str
    entity_type: str
    content: str = ""
    metadata: Mapping[str, Any] = Field(default_factory=dict)


class Persona(BaseModel):
    id: str
    name: str
    title: str | None = None
    communication_style: str | None = None
    goals: Sequence[str] = Field(default_factory=list)
    pain_points: Sequence[str] = Field(default_factory=list)


class BrandVoice(BaseModel):
    tone: str | None = None
    formality: str | None = None
    personality: Sequence[str] = Field(default_factory=list)


class BrandConfig(BaseModel):
    id: str
    name: str
    colors: Mapping[str, Any] = Field(default_factory=dict)
    typography: Mapping[str, Any] = Field(default_factory=dict)
    voice: BrandVoice = Field(default_factory=BrandVoice)


__all__ = ["BrandConfig", "BrandVoice", "KnowledgeBaseItem", "Persona"]
