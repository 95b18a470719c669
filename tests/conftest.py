from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

import pytest

from auto_page_composer.events import GenerationEvent
from auto_page_composer.models.component import (
    AIMetadata,
    ComponentCategory,
    ComponentDefinition,
    ContentRequirements,
    NarrativeRole,
    PersonaFitScore,
    PositionHints,
    PreferredPosition,
)
from auto_page_composer.vertex_ai_adapter import LLMRequest, LLMResponse

WORKSPACE_DATA = Path(__file__).resolve().parent.parent / "data" / "workspaces"


class RecordingEventSink:
    def __init__(self) -> None:
        self.events: list[tuple[GenerationEvent, str, dict[str, Any]]] = []

    def emit(self, event: GenerationEvent, message: str, **fields: Any) -> None:
        self.events.append((event, message, fields))

    @property
    def names(self) -> list[GenerationEvent]:
        return [event for event, _, _ in self.events]

    def fields_for(self, event: GenerationEvent) -> list[dict[str, Any]]:
        return [fields for name, _, fields in self.events if name is event]


class FakeLLMClient:
    """Returns a canned payload, or raises the configured error."""

    def __init__(self, data: Any = None, *, error: Exception | None = None, tokens_used: int = 0) -> None:
        self.model_name = "fake-model"
        self.data = data
        self.error = error
        self.tokens_used = tokens_used
        self.requests: list[LLMRequest] = []

    def complete(self, request: LLMRequest) -> LLMResponse:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return LLMResponse(data=self.data, tokens_used=self.tokens_used, model=self.model_name)


def build_component(
    component_id: str,
    *,
    role: NarrativeRole,
    category: ComponentCategory = ComponentCategory.content,
    use_cases: Sequence[str] = (),
    required: Sequence[str] = (),
    optional: Sequence[str] = (),
    persona_fit: dict[str, float] | None = None,
    position: PreferredPosition = PreferredPosition.any,
    avoid_after: Sequence[str] = (),
    prefer_after: Sequence[str] = (),
) -> ComponentDefinition:
    return ComponentDefinition(
        id=component_id,
        name=component_id.replace("-", " ").title(),
        category=category,
        description=f"Test component {component_id}",
        ai_metadata=AIMetadata(
            use_cases=tuple(use_cases),
            content_requirements=ContentRequirements(required=tuple(required), optional=tuple(optional)),
            persona_fit=tuple(
                PersonaFitScore(persona=persona, score=score)
                for persona, score in (persona_fit or {}).items()
            ),
            position_hints=PositionHints(
                preferred_position=position,
                avoid_after=tuple(avoid_after),
                prefer_after=tuple(prefer_after),
            ),
            narrative_role=role,
        ),
    )


@pytest.fixture
def events() -> RecordingEventSink:
    return RecordingEventSink()


@pytest.fixture
def make_component():
    return build_component


@pytest.fixture
def workspace_path() -> Path:
    return WORKSPACE_DATA


@pytest.fixture
def fake_llm():
    return FakeLLMClient
