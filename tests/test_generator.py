import time

import pytest

from auto_page_composer.catalog import COMPONENT_DEFINITIONS
from auto_page_composer.events import GenerationEvent
from auto_page_composer.generator import LayoutGenerator
from auto_page_composer.models.component import NarrativeRole, PageType
from auto_page_composer.models.layout import LayoutConstraints, LayoutGenerationRequest
from auto_page_composer.models.workspace import BrandConfig, Persona
from auto_page_composer.vertex_ai_adapter import LLMError
from auto_page_composer.workspace_repository import LocalWorkspaceRepository

PRICING_CONTENT = {"headline": "Simple Pricing", "plans": [{"name": "Pro"}, {"name": "Team"}]}

LLM_PAYLOAD = {
    "sections": [
        {"componentId": "hero-centered", "narrativeRole": "hook", "contentMapping": {"headline": "headline"}},
        {"componentId": "does-not-exist", "narrativeRole": "solution"},
        {"componentId": "hero-centered", "narrativeRole": "hook"},
        {
            "componentId": "pricing-cards",
            "narrativeRole": "action",
            "contentMapping": {"plans": "plans"},
            "reasoning": "Plans are the point of the page",
        },
    ],
    "metadata": {"title": "Pricing | Acme", "description": "Plans for every team", "keywords": ["pricing"]},
}


def _request(**overrides) -> LayoutGenerationRequest:
    values = dict(website_id="site-1", workspace_id="ws-demo", page_type=PageType.pricing)
    values.update(overrides)
    return LayoutGenerationRequest(**values)


class FailingSource:
    def fetch_knowledge_base(self, workspace_id):
        raise ConnectionError("knowledge base offline")

    def fetch_personas(self, workspace_id, persona_ids):
        raise ConnectionError("personas offline")

    def fetch_brand_config(self, brand_config_id):
        raise ConnectionError("brands offline")


FETCH_DELAY = 0.3


class SlowSource:
    """Each fetch blocks for FETCH_DELAY; the knowledge base then fails."""

    def fetch_knowledge_base(self, workspace_id):
        time.sleep(FETCH_DELAY)
        raise ConnectionError("knowledge base offline")

    def fetch_personas(self, workspace_id, persona_ids):
        time.sleep(FETCH_DELAY)
        return [Persona(id=persona_id, name="Buyer", communication_style="technical") for persona_id in persona_ids]

    def fetch_brand_config(self, brand_config_id):
        time.sleep(FETCH_DELAY)
        return BrandConfig(id=brand_config_id, name="Acme")


class EmptySource:
    def fetch_knowledge_base(self, workspace_id):
        return []

    def fetch_personas(self, workspace_id, persona_ids):
        return []

    def fetch_brand_config(self, brand_config_id):
        return None


def test_determine_flow_uses_canonical_order():
    generator = LayoutGenerator()
    assert generator.determine_flow(PageType.pricing) == [NarrativeRole.solution, NarrativeRole.action]
    assert generator.determine_flow(PageType.home) == [
        NarrativeRole.hook,
        NarrativeRole.solution,
        NarrativeRole.proof,
        NarrativeRole.action,
    ]
    assert LayoutGenerator(page_configs={}).determine_flow(PageType.home) == [
        NarrativeRole.hook,
        NarrativeRole.solution,
        NarrativeRole.action,
    ]


def test_rule_based_plan_picks_pricing_for_action_stage(events):
    generator = LayoutGenerator(events=events)

    plan = generator.plan_rule_based(
        PageType.pricing,
        PRICING_CONTENT,
        [NarrativeRole.solution, NarrativeRole.action],
        target_persona="business",
    )

    assert plan.generated_by == "rule-based"
    assert plan.model_used == "rule-based"
    component_ids = [section.component_id for section in plan.sections]
    assert len(component_ids) == len(set(component_ids))

    action = next(section for section in plan.sections if section.narrative_role == "action")
    component = COMPONENT_DEFINITIONS[action.component_id]
    assert component.category.value == "pricing"
    assert component.ai_metadata.narrative_role is NarrativeRole.action
    assert action.content_mapping["plans"] == "plans"
    assert plan.metadata.title == "Simple Pricing"


@pytest.mark.asyncio
async def test_rule_based_generation_without_llm(events):
    generator = LayoutGenerator(events=events)

    result = await generator.generate(_request(content_hints=PRICING_CONTENT))

    metadata = result.generation_metadata
    assert metadata.generated_by == "rule-based"
    assert metadata.model_used == "rule-based"
    assert metadata.tokens_used == 0
    assert metadata.processing_time_ms >= 0
    assert GenerationEvent.llm_unavailable in events.names
    assert events.fields_for(GenerationEvent.llm_unavailable)[0]["reason"] == "llm_not_configured"
    assert "llm_unavailable" in metadata.warnings

    layout = result.layout
    assert layout.slug == "/pricing"
    assert layout.page_id.startswith("site-1-pricing-")
    assert len(layout.sections) == len(result.component_selections)
    component_ids = [section.component_id for section in layout.sections]
    assert len(component_ids) == len(set(component_ids))
    assert all(selection.score.total_score > 0.5 for selection in result.component_selections)

    scores = [selection.score.total_score for selection in result.component_selections]
    assert metadata.confidence_score == pytest.approx(round(sum(scores) / len(scores), 2))


@pytest.mark.asyncio
async def test_llm_failure_matches_rule_based_shape(events, fake_llm):
    request = _request(content_hints=PRICING_CONTENT)
    failing = LayoutGenerator(llm_client=fake_llm(error=LLMError("invalid credentials")), events=events)
    offline = LayoutGenerator()

    failed = await failing.generate(request)
    baseline = await offline.generate(request)

    assert failed.generation_metadata.generated_by == "rule-based"
    assert [section.component_id for section in failed.layout.sections] == [
        section.component_id for section in baseline.layout.sections
    ]
    assert [section.narrative_role for section in failed.layout.sections] == [
        section.narrative_role for section in baseline.layout.sections
    ]
    assert failed.layout.metadata == baseline.layout.metadata
    assert failed.layout.slug == baseline.layout.slug
    assert events.fields_for(GenerationEvent.llm_unavailable)[0]["reason"] == "llm_error"


@pytest.mark.asyncio
async def test_llm_plan_is_validated_and_rescored(events, fake_llm):
    client = fake_llm(LLM_PAYLOAD, tokens_used=321)
    generator = LayoutGenerator(llm_client=client, events=events)

    result = await generator.generate(_request(content_hints=PRICING_CONTENT))

    assert [section.component_id for section in result.layout.sections] == ["hero-centered", "pricing-cards"]
    assert result.layout.metadata.title == "Pricing | Acme"

    metadata = result.generation_metadata
    assert metadata.generated_by == "llm"
    assert metadata.model_used == "fake-model"
    assert metadata.tokens_used == 321

    assert GenerationEvent.component_dropped in events.names
    assert GenerationEvent.duplicate_component_dropped in events.names
    assert GenerationEvent.llm_unavailable not in events.names
    assert events.fields_for(GenerationEvent.component_dropped)[0]["component_id"] == "does-not-exist"

    pricing = result.component_selections[1]
    assert pricing.reasoning == "Plans are the point of the page"
    assert pricing.content_mapping == {"plans": "plans"}
    assert all(alternate.component_id != "pricing-cards" for alternate in pricing.alternates)
    assert len(pricing.alternates) <= 5

    (request,) = client.requests
    assert request.json_mode is True
    assert "pricing" in request.user_prompt


@pytest.mark.asyncio
async def test_malformed_llm_response_falls_back(events, fake_llm):
    generator = LayoutGenerator(llm_client=fake_llm({"sections": "not a list"}), events=events)

    result = await generator.generate(_request(content_hints=PRICING_CONTENT))

    assert result.generation_metadata.generated_by == "rule-based"
    assert events.fields_for(GenerationEvent.llm_unavailable)[0]["reason"] == "malformed_response"


@pytest.mark.asyncio
async def test_excluded_components_are_removed(events, fake_llm):
    constraints = LayoutConstraints(excluded_components=["pricing-cards"])
    request = _request(content_hints=PRICING_CONTENT, constraints=constraints)

    rule_based = await LayoutGenerator(events=events).generate(request)
    from_llm = await LayoutGenerator(llm_client=fake_llm(LLM_PAYLOAD), events=events).generate(request)

    for result in (rule_based, from_llm):
        assert "pricing-cards" not in [section.component_id for section in result.layout.sections]
        for selection in result.component_selections:
            assert "pricing-cards" not in [alternate.component_id for alternate in selection.alternates]
    dropped = events.fields_for(GenerationEvent.component_dropped)
    assert {"component_id": "pricing-cards", "excluded": True} in dropped


@pytest.mark.asyncio
async def test_section_limits(events, fake_llm):
    generator = LayoutGenerator(llm_client=fake_llm(LLM_PAYLOAD), events=events)

    result = await generator.generate(
        _request(content_hints=PRICING_CONTENT, constraints=LayoutConstraints(max_sections=1))
    )

    assert [section.component_id for section in result.layout.sections] == ["hero-centered"]
    warning = events.fields_for(GenerationEvent.below_minimum_sections)[0]
    assert warning["sections_count"] == 1
    assert warning["minimum"] == 3
    assert "below_minimum_sections" in result.generation_metadata.warnings


@pytest.mark.asyncio
async def test_unfillable_stages_produce_a_shorter_layout(events, make_component):
    catalog = {
        component_id: make_component(component_id, role=NarrativeRole.action, required=("plans",))
        for component_id in ("pricing-a", "pricing-b")
    }
    generator = LayoutGenerator(catalog=catalog, events=events)

    result = await generator.generate(_request(content_hints={"plans": None}))

    assert result.layout.sections == []
    assert result.generation_metadata.confidence_score == 0.0
    unfilled = [fields["stage"] for fields in events.fields_for(GenerationEvent.stage_unfilled)]
    assert unfilled == ["solution", "action"]


@pytest.mark.asyncio
async def test_fetch_failures_degrade_to_defaults(events):
    generator = LayoutGenerator(workspace_source=FailingSource(), events=events)
    request = _request(knowledge_base_id="kb-demo", personas=["persona-cmo"], brand_config_id="brand-demo")

    result = await generator.generate(request)

    sources = {fields["source"] for fields in events.fields_for(GenerationEvent.input_fetch_degraded)}
    assert sources == {"knowledge_base", "personas", "brand_config"}
    assert result.layout.metadata.title == "Simple, Transparent Pricing"


@pytest.mark.asyncio
async def test_empty_knowledge_base_uses_default_content(events):
    generator = LayoutGenerator(workspace_source=EmptySource(), events=events)

    inputs = await generator.fetch_inputs(_request(knowledge_base_id="kb-demo"), events=events)

    assert inputs.knowledge_base is None
    assert events.fields_for(GenerationEvent.input_fetch_degraded)[0]["source"] == "knowledge_base"


@pytest.mark.asyncio
async def test_fetches_are_skipped_without_ids(events):
    generator = LayoutGenerator(workspace_source=FailingSource(), events=events)

    inputs = await generator.fetch_inputs(_request(), events=events)

    assert inputs.knowledge_base is None
    assert inputs.personas == []
    assert inputs.brand_config is None
    assert events.events == []


@pytest.mark.asyncio
async def test_workspace_persona_drives_persona_fit(events, workspace_path):
    generator = LayoutGenerator(
        workspace_source=LocalWorkspaceRepository(base_path=workspace_path),
        events=events,
    )
    request = _request(knowledge_base_id="kb-demo", personas=["persona-cto"])

    result = await generator.generate(request)

    assert result.component_selections
    for selection in result.component_selections:
        fits = {
            fit.persona: fit.score
            for fit in COMPONENT_DEFINITIONS[selection.selected].ai_metadata.persona_fit
        }
        assert selection.score.breakdown.persona_fit == pytest.approx(fits.get("technical", 0.5))


@pytest.mark.asyncio
async def test_explicit_target_persona_wins(events, workspace_path):
    generator = LayoutGenerator(
        workspace_source=LocalWorkspaceRepository(base_path=workspace_path),
        events=events,
    )
    request = _request(knowledge_base_id="kb-demo", personas=["persona-cto"], target_persona="executive")

    result = await generator.generate(request)

    for selection in result.component_selections:
        fits = {
            fit.persona: fit.score
            for fit in COMPONENT_DEFINITIONS[selection.selected].ai_metadata.persona_fit
        }
        assert selection.score.breakdown.persona_fit == pytest.approx(fits.get("executive", 0.5))


@pytest.mark.asyncio
async def test_one_failing_fetch_does_not_block_the_others(events):
    generator = LayoutGenerator(workspace_source=SlowSource(), events=events)
    request = _request(knowledge_base_id="kb-demo", personas=["persona-cto"], brand_config_id="brand-demo")

    started = time.perf_counter()
    inputs = await generator.fetch_inputs(request, events=events)
    elapsed = time.perf_counter() - started

    assert inputs.knowledge_base is None
    assert [persona.id for persona in inputs.personas] == ["persona-cto"]
    assert inputs.brand_config.name == "Acme"
    assert events.names == [GenerationEvent.input_fetch_degraded]
    assert events.fields_for(GenerationEvent.input_fetch_degraded)[0]["source"] == "knowledge_base"
    # Concurrent fetches take about one delay, not three.
    assert elapsed < FETCH_DELAY * 2


@pytest.mark.asyncio
async def test_llm_plan_without_usable_components_falls_back(events, fake_llm):
    payload = {
        "sections": [
            {"componentId": "does-not-exist", "narrativeRole": "hook"},
            {"componentId": "pricing-cards", "narrativeRole": "action"},
        ]
    }
    generator = LayoutGenerator(llm_client=fake_llm(payload), events=events)
    request = _request(
        content_hints=PRICING_CONTENT,
        constraints=LayoutConstraints(excluded_components=["pricing-cards"]),
    )

    result = await generator.generate(request)

    assert result.generation_metadata.generated_by == "rule-based"
    assert result.layout.sections
    assert events.fields_for(GenerationEvent.llm_unavailable)[0]["reason"] == "empty_plan"
