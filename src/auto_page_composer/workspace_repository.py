from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Protocol, Sequence

from .models.workspace import BrandConfig, KnowledgeBaseItem, Persona


class WorkspaceSource(Protocol):
    def fetch_knowledge_base(self, workspace_id: str) -> list[KnowledgeBaseItem]:
        ...

    def fetch_personas(self, workspace_id: str, persona_ids: Sequence[str]) -> list[Persona]:
        ...

    def fetch_brand_config(self, brand_config_id: str) -> BrandConfig | None:
        ...


class LocalWorkspaceRepository:
    """Reads workspace fixtures from ``<base>/<workspace_id>.json`` and
    brand configs from ``<base>/brands/<brand_config_id>.json``."""

    def __init__(self, *, base_path: Path) -> None:
        self._base_path = base_path

    def fetch_knowledge_base(self, workspace_id: str) -> list[KnowledgeBaseItem]:
        data = self._load_workspace(workspace_id)
        return [KnowledgeBaseItem.model_validate(item) for item in data.get("knowledge_base", [])]

    def fetch_personas(self, workspace_id: str, persona_ids: Sequence[str]) -> list[Persona]:
        wanted = set(persona_ids)
        data = self._load_workspace(workspace_id)
        return [
            Persona.model_validate(item)
            for item in data.get("personas", [])
            if item.get("id") in wanted
        ]

    def fetch_brand_config(self, brand_config_id: str) -> BrandConfig | None:
        file_path = self._base_path / "brands" / f"{brand_config_id}.json"
        if not file_path.exists():
            return None
        with file_path.open("r", encoding="utf-8") as fp:
            return BrandConfig.model_validate(json.load(fp))

    def _load_workspace(self, workspace_id: str) -> dict[str, Any]:
        file_path = self._base_path / f"{workspace_id}.json"
        if not file_path.exists():
            raise FileNotFoundError(f"Workspace payload not found: {file_path}")
        with file_path.open("r", encoding="utf-8") as fp:
            return json.load(fp)


__all__ = ["LocalWorkspaceRepository", "WorkspaceSource"]
