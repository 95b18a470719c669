from __future__ import annotations

import os
import uuid
from pathlib import Path
from typing import Sequence

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from auto_page_composer.dictionaries import DEFAULT_SITE_PAGES
from auto_page_composer.firestore_layout_store import FirestoreLayoutStore
from auto_page_composer.firestore_workspace_repository import FirestoreWorkspaceRepository
from auto_page_composer.generator import LayoutGenerator
from auto_page_composer.layout_store import InMemoryLayoutStore, LayoutStore
from auto_page_composer.logging_config import set_trace_id, setup_logging
from auto_page_composer.models.component import PageType
from auto_page_composer.models.layout import GenerationMetadata, LayoutGenerationRequest, PageLayout
from auto_page_composer.models.site import GlobalComponent, SiteArchitecture
from auto_page_composer.site_builder import SiteArchitectureBuilder
from auto_page_composer.vertex_ai_adapter import VertexAIAdapter
from auto_page_composer.workspace_repository import LocalWorkspaceRepository, WorkspaceSource


class GenerateLayoutRequest(LayoutGenerationRequest):
    save: bool = Field(default=True, description="Persist the generated layout")


class GenerateLayoutResponse(BaseModel):
    layout: PageLayout
    selections_count: int
    generation_metadata: GenerationMetadata


class GenerateSiteRequest(BaseModel):
    website_id: str
    workspace_id: str
    page_types: Sequence[PageType] = Field(default_factory=lambda: list(DEFAULT_SITE_PAGES))
    knowledge_base_id: str | None = None
    personas: Sequence[str] | None = None
    brand_config_id: str | None = None
    company_name: str = "Company"


# Environment configuration
ENVIRONMENT = os.getenv("ENVIRONMENT", "dev")
PROJECT_ID = os.getenv("PROJECT_ID")
VERTEX_LOCATION = os.getenv("VERTEX_LOCATION", "asia-northeast1")
VERTEX_MODEL = os.getenv("VERTEX_MODEL", "gemini-1.5-pro")
WORKSPACE_DATA_PATH = os.getenv("WORKSPACE_DATA_PATH", "data/workspaces")

setup_logging(environment=ENVIRONMENT, project_id=PROJECT_ID)

app = FastAPI(title="Auto Page Composer API", version="0.1.0")

# Use Firestore in production, in-memory store and local fixtures for dev
layout_store: LayoutStore
workspace_source: WorkspaceSource
if ENVIRONMENT == "dev":
    layout_store = InMemoryLayoutStore()
    workspace_source = LocalWorkspaceRepository(base_path=Path(WORKSPACE_DATA_PATH).resolve())
else:
    layout_store = FirestoreLayoutStore(project_id=PROJECT_ID)
    workspace_source = FirestoreWorkspaceRepository(project_id=PROJECT_ID)

llm_client = (
    VertexAIAdapter(project_id=PROJECT_ID, location=VERTEX_LOCATION, model_name=VERTEX_MODEL)
    if PROJECT_ID
    else None
)

layout_generator = LayoutGenerator(workspace_source=workspace_source, llm_client=llm_client)


@app.middleware("http")
async def trace_requests(request: Request, call_next):
    header = request.headers.get("X-Cloud-Trace-Context")
    trace_id = header.split("/", 1)[0] if header else uuid.uuid4().hex
    if PROJECT_ID:
        trace_id = f"projects/{PROJECT_ID}/traces/{trace_id}"
    set_trace_id(trace_id)
    return await call_next(request)


@app.post("/v1/layouts:generate", response_model=GenerateLayoutResponse)
async def generate_layout(request: GenerateLayoutRequest) -> GenerateLayoutResponse:
    result = await layout_generator.generate(request)
    if request.save:
        layout_store.save_page_layout(result.layout)
    return GenerateLayoutResponse(
        layout=result.layout,
        selections_count=len(result.component_selections),
        generation_metadata=result.generation_metadata,
    )


@app.post("/v1/sites:generate", response_model=SiteArchitecture)
async def generate_site(request: GenerateSiteRequest) -> SiteArchitecture:
    builder = SiteArchitectureBuilder(
        layout_generator,
        layout_store=layout_store,
        company_name=request.company_name,
    )
    return await builder.build(
        request.website_id,
        request.workspace_id,
        request.page_types,
        knowledge_base_id=request.knowledge_base_id,
        personas=request.personas,
        brand_config_id=request.brand_config_id,
    )


@app.get("/v1/websites/{website_id}/layouts", response_model=PageLayout)
async def get_layout(website_id: str, slug: str = "/") -> PageLayout:
    layout = layout_store.get_page_layout(website_id, slug)
    if not layout:
        raise HTTPException(status_code=404, detail="Layout not found")
    return layout


@app.get("/v1/websites/{website_id}/global-components", response_model=list[GlobalComponent])
async def get_global_components(website_id: str) -> list[GlobalComponent]:
    return layout_store.get_global_components(website_id)


@app.get("/health")
async def healthcheck() -> JSONResponse:
    return JSONResponse({"status": "ok"})


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8080")))
