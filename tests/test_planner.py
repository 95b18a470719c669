from auto_page_composer.catalog import COMPONENT_DEFINITIONS
from auto_page_composer.models.component import NarrativeRole, PageType
from auto_page_composer.models.selection import SelectionContext
from auto_page_composer.planner import ACCEPTANCE_THRESHOLD, find_best_match

PRICING_CONTENT = {"headline": "Simple Pricing", "plans": [{"name": "Pro"}, {"name": "Team"}]}


def _pricing_action_context(**overrides) -> SelectionContext:
    values = dict(
        page_type=PageType.pricing,
        available_content=PRICING_CONTENT,
        narrative_stage=NarrativeRole.action,
        current_position=1,
        total_sections=2,
        target_persona="business",
    )
    values.update(overrides)
    return SelectionContext(**values)


def test_results_are_sorted_and_above_threshold():
    matches = find_best_match(_pricing_action_context(), limit=10)

    assert matches
    assert len(matches) <= 10
    scores = [match.total_score for match in matches]
    assert scores == sorted(scores, reverse=True)
    assert all(score > ACCEPTANCE_THRESHOLD for score in scores)


def test_pricing_component_wins_the_action_stage():
    best = find_best_match(_pricing_action_context(), limit=3)[0]

    component = COMPONENT_DEFINITIONS[best.component_id]
    assert component.category.value == "pricing"
    assert component.ai_metadata.narrative_role is NarrativeRole.action
    assert best.total_score >= 0.5


def test_previous_and_excluded_components_never_returned():
    baseline = find_best_match(_pricing_action_context(), limit=5)
    first, second = baseline[0].component_id, baseline[1].component_id

    matches = find_best_match(
        _pricing_action_context(previous_components=(first,), excluded_components=(second,)),
        limit=len(COMPONENT_DEFINITIONS),
    )

    returned = {match.component_id for match in matches}
    assert first not in returned
    assert second not in returned


def test_limit_caps_result_length():
    assert len(find_best_match(_pricing_action_context(), limit=1)) == 1
    assert find_best_match(_pricing_action_context(), limit=0) == []


def test_ties_keep_catalog_order(make_component):
    catalog = {
        component_id: make_component(component_id, role=NarrativeRole.action)
        for component_id in ("cta-b", "cta-a", "cta-c")
    }
    context = _pricing_action_context(page_type=PageType.custom, available_content={})

    matches = find_best_match(context, catalog=catalog)

    assert [match.component_id for match in matches] == ["cta-b", "cta-a", "cta-c"]


def test_missing_required_content_empties_the_slot(make_component):
    catalog = {
        component_id: make_component(component_id, role=NarrativeRole.action, required=("plans",))
        for component_id in ("pricing-a", "pricing-b")
    }
    context = _pricing_action_context(available_content={"headline": "Pricing"})

    assert find_best_match(context, catalog=catalog) == []
