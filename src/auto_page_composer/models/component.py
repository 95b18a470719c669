from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Sequence


class ComponentCategory(str, Enum):
    hero = "hero"
    features = "features"
    social_proof = "social-proof"
    pricing = "pricing"
    cta = "cta"
    content = "content"
    interactive = "interactive"
    forms = "forms"
    navigation = "navigation"
    footer = "footer"


class NarrativeRole(str, Enum):
    # Declaration order is the canonical story order.
    hook = "hook"
    problem = "problem"
    solution = "solution"
    proof = "proof"
    action = "action"


class PreferredPosition(str, Enum):
    top = "top"
    middle = "middle"
    bottom = "bottom"
    any = "any"


class PageType(str, Enum):
    home = "home"
    landing = "landing"
    product = "product"
    pricing = "pricing"
    about = "about"
    contact = "contact"
    blog = "blog"
    blog_post = "blog-post"
    case_study = "case-study"
    features = "features"
    solutions = "solutions"
    resources = "resources"
    careers = "careers"
    legal = "legal"
    custom = "custom"


@dataclass(frozen=True)
class ContentRequirements:
    required: Sequence[str] = ()
    optional: Sequence[str] = ()
    min_length: Mapping[str, int] = field(default_factory=dict)
    max_length: Mapping[str, int] = field(default_factory=dict)
    min_count: Mapping[str, int] = field(default_factory=dict)
    max_count: Mapping[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class PersonaFitScore:
    persona: str
    score: float


@dataclass(frozen=True)
class PositionHints:
    preferred_position: PreferredPosition = PreferredPosition.any
    avoid_after: Sequence[str] = ()
    prefer_after: Sequence[str] = ()


@dataclass(frozen=True)
class AIMetadata:
    use_cases: Sequence[str]
    content_requirements: ContentRequirements
    persona_fit: Sequence[PersonaFitScore]
    position_hints: PositionHints
    narrative_role: NarrativeRole


@dataclass(frozen=True)
class ComponentDefinition:
    id: str
    name: str
    category: ComponentCategory
    description: str
    ai_metadata: AIMetadata
    animation_preset: str = "fadeIn"


__all__ = [
    "AIMetadata",
    "ComponentCategory",
    "ComponentDefinition",
    "ContentRequirements",
    "NarrativeRole",
    "PageType",
    "PersonaFitScore",
    "PositionHints",
    "PreferredPosition",
]
