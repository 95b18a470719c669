from __future__ import annotations

import asyncio
import dataclasses
import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Sequence, TypeVar

from pydantic import ValidationError

from .assembler import assemble_layout, confidence_score
from .catalog import COMPONENT_DEFINITIONS
from .content import extract_content, extract_keywords, map_content_to_component
from .dictionaries import (
    DEFAULT_PAGE_CONTENT,
    DEFAULT_STORY_FLOW,
    DEFAULT_TARGET_PERSONA,
    PAGE_TYPE_CONFIGS,
    PageTypeConfig,
)
from .events import EventCollector, EventSink, GenerationEvent, LoggingEventSink
from .logging_config import set_generation_id
from .models.component import ComponentDefinition, NarrativeRole, PageType
from .models.layout import (
    GenerationMetadata,
    LayoutGenerationRequest,
    LayoutGenerationResult,
    PageMetadata,
)
from .models.selection import ComponentSelection, SelectionContext
from .models.workspace import BrandConfig, KnowledgeBaseItem, Persona
from .plan import LayoutPlan, LLMLayoutPayload, PlannedSection, PlanResult
from .planner import ACCEPTANCE_THRESHOLD, find_best_match
from .prompts import SYSTEM_PROMPT, build_layout_prompt
from .scoring import score_component
from .vertex_ai_adapter import LLMClient, LLMError, LLMRequest
from .workspace_repository import WorkspaceSource

logger = logging.getLogger(__name__)

T = TypeVar("T")

RULE_BASED_MODEL = "rule-based"
FALLBACK_LIMIT = 3
ALTERNATES_LIMIT = 5


@dataclass
class GenerationInputs:
    knowledge_base: list[KnowledgeBaseItem] | None = None
    personas: list[Persona] = field(default_factory=list)
    brand_config: BrandConfig | None = None


class LayoutGenerator:
    """Builds one page layout: LLM plan first, deterministic plan when that fails."""

    def __init__(
        self,
        *,
        workspace_source: WorkspaceSource | None = None,
        llm_client: LLMClient | None = None,
        events: EventSink | None = None,
        catalog: Mapping[str, ComponentDefinition] = COMPONENT_DEFINITIONS,
        page_configs: Mapping[PageType, PageTypeConfig] = PAGE_TYPE_CONFIGS,
        default_content: Mapping[PageType, Mapping[str, Any]] = DEFAULT_PAGE_CONTENT,
        temperature: float = 0.7,
        max_tokens: int = 2000,
    ) -> None:
        self._workspace_source = workspace_source
        self._llm_client = llm_client
        self._events = events or LoggingEventSink()
        self._catalog = catalog
        self._page_configs = page_configs
        self._default_content = default_content
        self._temperature = temperature
        self._max_tokens = max_tokens

    async def generate(self, request: LayoutGenerationRequest) -> LayoutGenerationResult:
        started = time.perf_counter()
        set_generation_id(uuid.uuid4().hex[:12])
        events = EventCollector(self._events)

        inputs = await self.fetch_inputs(request, events=events)
        content = extract_content(
            request.page_type,
            inputs.knowledge_base,
            default_content=self._default_content,
        )
        if request.content_hints:
            content.update(request.content_hints)

        story_flow = self.determine_flow(request.page_type)
        target_persona = self._target_persona(request, inputs.personas)
        excluded = tuple(request.constraints.excluded_components) if request.constraints else ()

        attempt = await asyncio.to_thread(
            self.attempt_llm, request, content, story_flow, inputs, events=events
        )
        plan = attempt.or_else(
            lambda failure: self.plan_rule_based(
                request.page_type,
                content,
                story_flow,
                target_persona=target_persona,
                excluded=excluded,
                events=events,
            )
        )

        selections = self.validate_and_score(
            plan,
            request.page_type,
            content,
            target_persona=target_persona,
            excluded=excluded,
            events=events,
        )
        selections = self._apply_section_limits(request, selections, events)

        layout = assemble_layout(
            request.website_id,
            request.page_type,
            selections,
            plan.metadata,
            catalog=self._catalog,
        )
        confidence = confidence_score(selections)

        logger.info(
            "Generated page layout",
            extra={
                "website_id": request.website_id,
                "page_type": request.page_type.value,
                "generated_by": plan.generated_by,
                "sections_count": len(layout.sections),
                "confidence_score": confidence,
            },
        )

        return LayoutGenerationResult(
            layout=layout,
            component_selections=selections,
            generation_metadata=GenerationMetadata(
                processing_time_ms=int((time.perf_counter() - started) * 1000),
                tokens_used=plan.tokens_used,
                model_used=plan.model_used,
                generated_by=plan.generated_by,
                confidence_score=confidence,
                warnings=events.names,
            ),
        )

    async def fetch_inputs(
        self,
        request: LayoutGenerationRequest,
        *,
        events: EventSink | None = None,
    ) -> GenerationInputs:
        """Fetch knowledge base, personas and brand concurrently.

        Each source degrades on its own: a failure yields an empty result and
        an ``input_fetch_degraded`` event, never an exception.
        """
        events = events or self._events
        source = self._workspace_source
        if source is None:
            return GenerationInputs()

        knowledge_base, personas, brand_config = await asyncio.gather(
            self._guarded(
                "knowledge_base",
                source.fetch_knowledge_base,
                request.workspace_id,
                default=None,
                events=events,
            )
            if request.knowledge_base_id
            else _resolved(None),
            self._guarded(
                "personas",
                source.fetch_personas,
                request.workspace_id,
                list(request.personas or ()),
                default=[],
                events=events,
            )
            if request.personas
            else _resolved([]),
            self._guarded(
                "brand_config",
                source.fetch_brand_config,
                request.brand_config_id,
                default=None,
                events=events,
            )
            if request.brand_config_id
            else _resolved(None),
        )

        if knowledge_base is not None and not knowledge_base:
            events.emit(
                GenerationEvent.input_fetch_degraded,
                "Knowledge base is empty, using default content",
                source="knowledge_base",
                workspace_id=request.workspace_id,
            )
            knowledge_base = None

        return GenerationInputs(
            knowledge_base=list(knowledge_base) if knowledge_base is not None else None,
            personas=list(personas or ()),
            brand_config=brand_config,
        )

    def determine_flow(self, page_type: PageType) -> list[NarrativeRole]:
        config = self._page_configs.get(page_type)
        required = set(config.required_sections) if config else set()
        flow = [role for role in NarrativeRole if role in required]
        return flow or list(DEFAULT_STORY_FLOW)

    def attempt_llm(
        self,
        request: LayoutGenerationRequest,
        content: Mapping[str, Any],
        story_flow: Sequence[NarrativeRole],
        inputs: GenerationInputs,
        *,
        events: EventSink | None = None,
    ) -> PlanResult:
        events = events or self._events
        if self._llm_client is None:
            result = PlanResult.failed("llm_not_configured", "No LLM client configured")
        else:
            result = self._request_llm_plan(request, content, story_flow, inputs)

        if result.failure is not None:
            events.emit(
                GenerationEvent.llm_unavailable,
                "LLM layout generation failed, using rule-based generation",
                reason=result.failure.reason,
                detail=result.failure.detail,
                page_type=request.page_type.value,
            )
        return result

    def plan_rule_based(
        self,
        page_type: PageType,
        content: Mapping[str, Any],
        story_flow: Sequence[NarrativeRole],
        *,
        target_persona: str | None = DEFAULT_TARGET_PERSONA,
        excluded: Sequence[str] = (),
        events: EventSink | None = None,
    ) -> LayoutPlan:
        events = events or self._events
        sections: list[PlannedSection] = []
        used: list[str] = []

        for role in story_flow:
            context = SelectionContext(
                page_type=page_type,
                available_content=content,
                narrative_stage=role,
                current_position=len(sections),
                total_sections=len(story_flow),
                previous_components=tuple(used),
                target_persona=target_persona,
                excluded_components=tuple(excluded),
            )
            matches = find_best_match(context, FALLBACK_LIMIT, catalog=self._catalog)
            if not matches:
                events.emit(
                    GenerationEvent.stage_unfilled,
                    "No component cleared the acceptance threshold",
                    stage=role.value,
                    page_type=page_type.value,
                )
                continue

            best = matches[0]
            used.append(best.component_id)
            sections.append(
                PlannedSection(
                    component_id=best.component_id,
                    narrative_role=role.value,
                    content_mapping=map_content_to_component(
                        self._catalog.get(best.component_id), content
                    ),
                    reasoning=(
                        f"Selected based on {role.value} narrative role "
                        f"with score {best.total_score:.2f}"
                    ),
                )
            )

        return LayoutPlan(
            sections=sections,
            metadata=self._default_metadata(page_type, content),
            generated_by="rule-based",
            model_used=RULE_BASED_MODEL,
        )

    def validate_and_score(
        self,
        plan: LayoutPlan,
        page_type: PageType,
        content: Mapping[str, Any],
        *,
        target_persona: str | None = DEFAULT_TARGET_PERSONA,
        excluded: Sequence[str] = (),
        events: EventSink | None = None,
    ) -> list[ComponentSelection]:
        events = events or self._events
        accepted: list[tuple[PlannedSection, ComponentDefinition]] = []
        seen: set[str] = set()
        for section in plan.sections:
            component = self._catalog.get(section.component_id)
            if component is None or section.component_id in excluded:
                events.emit(
                    GenerationEvent.component_dropped,
                    f"Component {section.component_id} not available, skipping",
                    component_id=section.component_id,
                    excluded=component is not None,
                )
                continue
            if section.component_id in seen:
                events.emit(
                    GenerationEvent.duplicate_component_dropped,
                    f"Component {section.component_id} already placed, skipping",
                    component_id=section.component_id,
                )
                continue
            seen.add(section.component_id)
            accepted.append((section, component))

        selections: list[ComponentSelection] = []
        used: list[str] = []
        for position, (section, component) in enumerate(accepted):
            context = SelectionContext(
                page_type=page_type,
                available_content=content,
                narrative_stage=_stage_for(section, component),
                current_position=position,
                total_sections=len(accepted),
                previous_components=tuple(used),
                target_persona=target_persona,
                excluded_components=tuple(excluded),
            )
            score = score_component(component, context)
            if score.total_score <= ACCEPTANCE_THRESHOLD:
                events.emit(
                    GenerationEvent.low_confidence_section,
                    f"Component {component.id} scored below the acceptance threshold",
                    component_id=component.id,
                    total_score=round(score.total_score, 4),
                )
            alternates = find_best_match(
                dataclasses.replace(
                    context,
                    excluded_components=(*context.excluded_components, component.id),
                ),
                ALTERNATES_LIMIT,
                catalog=self._catalog,
            )
            selections.append(
                ComponentSelection(
                    selected=component.id,
                    score=score,
                    alternates=alternates,
                    content_mapping=dict(section.content_mapping),
                    reasoning=section.reasoning,
                )
            )
            used.append(component.id)

        return selections

    def page_config(self, page_type: PageType) -> PageTypeConfig:
        return self._page_configs.get(page_type) or self._page_configs[PageType.custom]

    def _request_llm_plan(
        self,
        request: LayoutGenerationRequest,
        content: Mapping[str, Any],
        story_flow: Sequence[NarrativeRole],
        inputs: GenerationInputs,
    ) -> PlanResult:
        prompt = build_layout_prompt(
            page_config=self.page_config(request.page_type),
            available_content=content,
            story_flow=story_flow,
            personas=inputs.personas,
            brand_config=inputs.brand_config,
            catalog=self._catalog,
            constraints=request.constraints,
        )
        llm_request = LLMRequest(
            system_prompt=SYSTEM_PROMPT,
            user_prompt=prompt,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
            json_mode=True,
        )

        try:
            response = self._llm_client.complete(llm_request)
            payload = LLMLayoutPayload.model_validate(response.data)
        except ValidationError as exc:
            return PlanResult.failed("malformed_response", str(exc))
        except LLMError as exc:
            return PlanResult.failed("llm_error", str(exc))
        except Exception as exc:
            logger.error("Unexpected LLM client failure", exc_info=True)
            return PlanResult.failed("llm_error", str(exc))

        excluded = set(request.constraints.excluded_components) if request.constraints else set()
        if not any(
            section.component_id in self._catalog and section.component_id not in excluded
            for section in payload.sections
        ):
            return PlanResult.failed("empty_plan", "LLM plan has no usable components")

        return PlanResult.success(
            LayoutPlan(
                sections=payload.sections,
                metadata=payload.metadata or self._default_metadata(request.page_type, content),
                generated_by="llm",
                model_used=response.model or self._llm_client.model_name,
                tokens_used=response.tokens_used,
            )
        )

    def _apply_section_limits(
        self,
        request: LayoutGenerationRequest,
        selections: list[ComponentSelection],
        events: EventSink,
    ) -> list[ComponentSelection]:
        constraints = request.constraints
        if constraints and constraints.max_sections is not None:
            selections = selections[: constraints.max_sections]

        minimum = self.page_config(request.page_type).min_sections
        if constraints and constraints.min_sections is not None:
            minimum = constraints.min_sections
        if len(selections) < minimum:
            events.emit(
                GenerationEvent.below_minimum_sections,
                "Generated layout has fewer sections than the page minimum",
                page_type=request.page_type.value,
                sections_count=len(selections),
                minimum=minimum,
            )
        return selections

    def _default_metadata(self, page_type: PageType, content: Mapping[str, Any]) -> PageMetadata:
        config = self.page_config(page_type)
        headline = content.get("headline")
        subheadline = content.get("subheadline")
        return PageMetadata(
            title=headline if isinstance(headline, str) and headline else f"{config.name} | Your Brand",
            description=(
                subheadline if isinstance(subheadline, str) and subheadline else config.description
            ),
            keywords=extract_keywords(content),
        )

    def _target_persona(self, request: LayoutGenerationRequest, personas: Sequence[Persona]) -> str:
        if request.target_persona:
            return request.target_persona
        if personas and personas[0].communication_style:
            return personas[0].communication_style
        return DEFAULT_TARGET_PERSONA

    async def _guarded(
        self,
        source_name: str,
        fetch: Callable[..., T],
        *args: Any,
        default: T,
        events: EventSink,
    ) -> T:
        try:
            return await asyncio.to_thread(fetch, *args)
        except Exception as exc:
            events.emit(
                GenerationEvent.input_fetch_degraded,
                f"Failed to fetch {source_name}, continuing without it",
                source=source_name,
                error=str(exc),
            )
            return default


def _stage_for(section: PlannedSection, component: ComponentDefinition) -> NarrativeRole:
    try:
        return NarrativeRole(section.narrative_role)
    except ValueError:
        return component.ai_metadata.narrative_role


async def _resolved(value: T) -> T:
    return value


__all__ = ["GenerationInputs", "LayoutGenerator"]
