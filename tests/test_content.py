from auto_page_composer.catalog import COMPONENT_DEFINITIONS
from auto_page_composer.content import extract_content, extract_keywords, map_content_to_component
from auto_page_composer.dictionaries import DEFAULT_PAGE_CONTENT
from auto_page_composer.models.component import PageType
from auto_page_composer.models.workspace import KnowledgeBaseItem
from auto_page_composer.workspace_repository import LocalWorkspaceRepository


def _demo_knowledge_base(workspace_path) -> list[KnowledgeBaseItem]:
    return LocalWorkspaceRepository(base_path=workspace_path).fetch_knowledge_base("ws-demo")


def test_extracts_slots_from_knowledge_base(workspace_path):
    content = extract_content(PageType.home, _demo_knowledge_base(workspace_path))

    assert content["headline"] == "Launch marketing websites without waiting on engineering"
    assert content["subheadline"] == "Compose pages from a proven component library in minutes"
    assert [feature["title"] for feature in content["features"]] == [
        "Visual editor",
        "Conversion scoring",
        "Enterprise controls",
    ]
    assert content["features"][1]["description"] == "Pages are scored before they ship"
    assert [feature["icon"] for feature in content["features"]] == ["layout", "chart", "star"]
    assert content["testimonials"][0]["author"] == "Mika Tanaka"
    assert content["stats"] == [{"value": "6x", "label": "Faster time to launch"}]
    assert content["questions"][0]["question"] == "Is there a free trial?"
    assert [plan["name"] for plan in content["plans"]] == ["Starter", "Growth"]
    assert content["plans"][1]["features"] == ["Unlimited sites", "A/B testing"]
    assert content["companyDescription"].startswith("We build tools")
    assert content["primaryCTA"] == {"text": "Get Started", "href": "/signup"}
    assert content["secondaryCTA"] == {"text": "Learn More", "href": "/features"}


def test_single_headline_doubles_as_subheadline():
    content = extract_content(
        PageType.landing,
        [KnowledgeBaseItem(id="1", entity_type="tagline", content="Only one line")],
    )
    assert content["headline"] == content["subheadline"] == "Only one line"


def test_titles_fall_back_to_truncated_content():
    long_text = "x" * 120
    content = extract_content(
        PageType.features,
        [KnowledgeBaseItem(id="1", entity_type="feature", content=long_text)],
    )
    feature = content["features"][0]
    assert feature["title"] == "x" * 80
    assert feature["description"] == long_text
    assert feature["icon"] == "star"


def test_empty_knowledge_base_yields_only_ctas():
    content = extract_content(PageType.pricing, [])
    assert set(content) == {"primaryCTA", "secondaryCTA"}


def test_missing_knowledge_base_uses_defaults_copy():
    content = extract_content(PageType.pricing, None)
    assert content["headline"] == DEFAULT_PAGE_CONTENT[PageType.pricing]["headline"]

    content["headline"] = "changed"
    assert extract_content(PageType.pricing, None)["headline"] != "changed"


def test_injected_defaults_fall_back_to_custom_entry():
    defaults = {
        PageType.home: {"headline": "Home"},
        PageType.custom: {"headline": "Generic"},
    }
    assert extract_content(PageType.home, None, default_content=defaults) == {"headline": "Home"}
    assert extract_content(PageType.careers, None, default_content=defaults) == {"headline": "Generic"}


def test_map_content_to_component_uses_available_slots():
    component = COMPONENT_DEFINITIONS["hero-split"]
    mapping = map_content_to_component(component, {"headline": "Hi", "subheadline": None, "primaryCTA": {}})
    assert mapping == {"headline": "headline", "primaryCTA": "primaryCTA"}
    assert map_content_to_component(None, {"headline": "Hi"}) == {}


def test_extract_keywords(workspace_path):
    content = extract_content(PageType.home, _demo_knowledge_base(workspace_path))
    keywords = extract_keywords(content)

    assert keywords[:2] == ["launch", "marketing"]
    assert "on" not in keywords
    assert "visual editor" in keywords
    assert "enterprise controls" in keywords
    assert len(keywords) <= 10
    assert len(keywords) == len(set(keywords))
