from __future__ import annotations

import logging
from typing import Sequence

from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter

from .models.workspace import BrandConfig, KnowledgeBaseItem, Persona

logger = logging.getLogger(__name__)


class FirestoreWorkspaceRepository:
    """Firestore-backed knowledge base, persona and brand lookups."""

    KNOWLEDGE_BASE_COLLECTION = "knowledge_base_items"
    PERSONA_COLLECTION = "personas"
    BRAND_COLLECTION = "brand_configs"
    KNOWLEDGE_BASE_LIMIT = 100

    def __init__(self, project_id: str | None = None) -> None:
        self._db = firestore.Client(project=project_id)

    def fetch_knowledge_base(self, workspace_id: str) -> list[KnowledgeBaseItem]:
        query = (
            self._db.collection(self.KNOWLEDGE_BASE_COLLECTION)
            .where(filter=FieldFilter("workspace_id", "==", workspace_id))
            .limit(self.KNOWLEDGE_BASE_LIMIT)
        )
        items = [
            KnowledgeBaseItem.model_validate({**doc.to_dict(), "id": doc.id})
            for doc in query.stream()
        ]
        logger.info(
            "Fetched knowledge base",
            extra={"workspace_id": workspace_id, "items_count": len(items)},
        )
        return items

    def fetch_personas(self, workspace_id: str, persona_ids: Sequence[str]) -> list[Persona]:
        collection = self._db.collection(self.PERSONA_COLLECTION)
        refs = [collection.document(persona_id) for persona_id in dict.fromkeys(persona_ids)]
        personas: list[Persona] = []
        for doc in self._db.get_all(refs):
            if not doc.exists:
                continue
            data = doc.to_dict()
            # Persona ids are global; only return the ones owned by this workspace.
            if data.get("workspace_id") not in (None, workspace_id):
                continue
            personas.append(Persona.model_validate({**data, "id": doc.id}))
        return personas

    def fetch_brand_config(self, brand_config_id: str) -> BrandConfig | None:
        doc = self._db.collection(self.BRAND_COLLECTION).document(brand_config_id).get()
        if not doc.exists:
            return None
        return BrandConfig.model_validate({**doc.to_dict(), "id": doc.id})


__all__ = ["FirestoreWorkspaceRepository"]
