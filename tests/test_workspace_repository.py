import pytest

from auto_page_composer.workspace_repository import LocalWorkspaceRepository


@pytest.fixture
def repository(workspace_path) -> LocalWorkspaceRepository:
    return LocalWorkspaceRepository(base_path=workspace_path)


def test_fetch_knowledge_base(repository):
    items = repository.fetch_knowledge_base("ws-demo")
    assert len(items) == 11
    assert items[0].entity_type == "tagline"
    assert items[2].metadata["name"] == "Visual editor"


def test_fetch_personas_filters_by_id(repository):
    personas = repository.fetch_personas("ws-demo", ["persona-cto", "persona-unknown"])
    assert [persona.id for persona in personas] == ["persona-cto"]
    assert personas[0].communication_style == "technical"


def test_fetch_brand_config(repository):
    brand = repository.fetch_brand_config("brand-demo")
    assert brand.name == "Acme Pages"
    assert brand.voice.personality == ["helpful", "direct"]
    assert repository.fetch_brand_config("missing") is None


def test_unknown_workspace_raises(repository):
    with pytest.raises(FileNotFoundError):
        repository.fetch_knowledge_base("ws-missing")
