import importlib

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client(monkeypatch, workspace_path):
    monkeypatch.setenv("ENVIRONMENT", "dev")
    monkeypatch.delenv("PROJECT_ID", raising=False)
    monkeypatch.setenv("WORKSPACE_DATA_PATH", str(workspace_path))
    main = importlib.reload(importlib.import_module("services.api.main"))
    return TestClient(main.app)


def test_healthcheck(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_generate_then_fetch_layout(client):
    response = client.post(
        "/v1/layouts:generate",
        json={
            "website_id": "site-1",
            "workspace_id": "ws-demo",
            "page_type": "pricing",
            "knowledge_base_id": "kb-demo",
            "personas": ["persona-cmo"],
            "brand_config_id": "brand-demo",
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert body["generation_metadata"]["generated_by"] == "rule-based"
    assert body["selections_count"] == len(body["layout"]["sections"])

    stored = client.get("/v1/websites/site-1/layouts", params={"slug": "/pricing"})
    assert stored.status_code == 200
    assert stored.json()["page_id"] == body["layout"]["page_id"]


def test_unsaved_layout_is_not_found(client):
    response = client.post(
        "/v1/layouts:generate",
        json={"website_id": "site-2", "workspace_id": "ws-demo", "page_type": "about", "save": False},
    )
    assert response.status_code == 200
    assert client.get("/v1/websites/site-2/layouts", params={"slug": "/about"}).status_code == 404


def test_invalid_page_type_is_rejected(client):
    response = client.post(
        "/v1/layouts:generate",
        json={"website_id": "site-1", "workspace_id": "ws-demo", "page_type": "unknown"},
    )
    assert response.status_code == 422


def test_generate_site(client):
    response = client.post(
        "/v1/sites:generate",
        json={"website_id": "site-3", "workspace_id": "ws-demo", "page_types": ["home", "pricing"]},
    )
    assert response.status_code == 200
    body = response.json()
    assert [page["slug"] for page in body["pages"]] == ["/", "/pricing"]
    assert [component["id"] for component in body["global_components"]] == ["global-header", "global-footer"]

    stored = client.get("/v1/websites/site-3/global-components")
    assert stored.status_code == 200
    assert [component["type"] for component in stored.json()] == ["header", "footer"]
    assert client.get("/v1/websites/site-4/global-components").json() == []


def test_service_runs_under_uvicorn(client):
    main = importlib.import_module("services.api.main")
    assert callable(main.uvicorn.run)
    assert client.app is main.app
