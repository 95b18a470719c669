from auto_page_composer.catalog import (
    COMPONENT_DEFINITIONS,
    all_component_ids,
    components_by_category,
    components_by_narrative_role,
    get_component,
)
from auto_page_composer.dictionaries import PAGE_TYPE_CONFIGS
from auto_page_composer.models.component import ComponentCategory, NarrativeRole, PageType


def test_catalog_ids_are_unique_and_keyed_by_id():
    ids = all_component_ids()
    assert len(ids) == len(set(ids))
    assert all(COMPONENT_DEFINITIONS[component_id].id == component_id for component_id in ids)


def test_get_component_returns_definition_or_none():
    hero = get_component("hero-split")
    assert hero is not None
    assert hero.category is ComponentCategory.hero
    assert hero.ai_metadata.narrative_role is NarrativeRole.hook
    assert "headline" in hero.ai_metadata.content_requirements.required

    assert get_component("does-not-exist") is None


def test_lookup_by_category_accepts_wire_values():
    pricing = components_by_category("pricing")
    assert pricing
    assert all(component.category is ComponentCategory.pricing for component in pricing)
    assert {"pricing-cards", "pricing-table"} <= {component.id for component in pricing}

    social = components_by_category(ComponentCategory.social_proof)
    assert "testimonials-carousel" in {component.id for component in social}


def test_lookup_by_narrative_role():
    actions = components_by_narrative_role(NarrativeRole.action)
    assert "cta-banner" in {component.id for component in actions}
    assert all(component.ai_metadata.narrative_role is NarrativeRole.action for component in actions)


def test_persona_scores_stay_within_unit_interval():
    for component in COMPONENT_DEFINITIONS.values():
        for fit in component.ai_metadata.persona_fit:
            assert 0.0 <= fit.score <= 1.0, component.id


def test_recommended_components_exist_in_catalog():
    for page_type, config in PAGE_TYPE_CONFIGS.items():
        assert config.type is page_type
        assert config.min_sections <= config.max_sections
        for component_id in config.recommended_components:
            assert component_id in COMPONENT_DEFINITIONS, (page_type, component_id)


def test_every_page_type_is_configured():
    assert set(PAGE_TYPE_CONFIGS) == set(PageType)
