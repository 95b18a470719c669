from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Sequence

from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter

from .models.layout import PageLayout
from .models.site import GlobalComponent

logger = logging.getLogger(__name__)


class FirestoreLayoutStore:
    """Firestore-backed page layout store for production use."""

    COLLECTION_NAME = "page_layouts"
    GLOBAL_COMPONENTS_COLLECTION = "site_global_components"

    def __init__(self, project_id: str | None = None) -> None:
        self._db = firestore.Client(project=project_id)
        self._collection = self._db.collection(self.COLLECTION_NAME)
        self._globals = self._db.collection(self.GLOBAL_COMPONENTS_COLLECTION)

    def save_page_layout(self, layout: PageLayout) -> PageLayout:
        """Upsert a layout; one document per (website_id, slug)."""
        doc_ref = self._collection.document(self.document_id(layout.website_id, layout.slug))
        snapshot = doc_ref.get()
        now = datetime.utcnow()

        data = self._to_firestore_dict(layout)
        data["updated_at"] = now
        if not snapshot.exists:
            data["created_at"] = now
        doc_ref.set(data, merge=True)

        logger.info(
            "Saved page layout",
            extra={
                "website_id": layout.website_id,
                "slug": layout.slug,
                "page_id": layout.page_id,
                "sections_count": len(layout.sections),
                "created": not snapshot.exists,
            },
        )

        return layout

    def get_page_layout(self, website_id: str, slug: str) -> PageLayout | None:
        doc = self._collection.document(self.document_id(website_id, slug)).get()
        if not doc.exists:
            return None
        return self._from_firestore_dict(doc.to_dict())

    def list_page_layouts(self, website_id: str) -> list[PageLayout]:
        query = self._collection.where(filter=FieldFilter("website_id", "==", website_id))
        return [self._from_firestore_dict(doc.to_dict()) for doc in query.stream()]

    def save_global_components(
        self, website_id: str, components: Sequence[GlobalComponent]
    ) -> list[GlobalComponent]:
        """Upsert one document per (website_id, type)."""
        now = datetime.utcnow()
        batch = self._db.batch()
        for component in components:
            data = component.model_dump(mode="json")
            data.update(website_id=website_id, updated_at=now)
            batch.set(self._globals.document(f"{website_id}__{component.type}"), data)
        batch.commit()

        logger.info(
            "Saved global components",
            extra={"website_id": website_id, "components_count": len(components)},
        )
        return list(components)

    def get_global_components(self, website_id: str) -> list[GlobalComponent]:
        query = self._globals.where(filter=FieldFilter("website_id", "==", website_id))
        return [
            GlobalComponent.model_validate(_without_keys(doc.to_dict(), "website_id", "updated_at"))
            for doc in query.stream()
        ]

    @staticmethod
    def document_id(website_id: str, slug: str) -> str:
        path = slug.strip("/").replace("/", "__") or "index"
        return f"{website_id}__{path}"

    def _to_firestore_dict(self, layout: PageLayout) -> dict[str, Any]:
        return layout.model_dump(mode="json")

    def _from_firestore_dict(self, data: dict[str, Any]) -> PageLayout:
        return PageLayout.model_validate(_without_keys(data, "created_at", "updated_at"))


def _without_keys(data: dict[str, Any], *keys: str) -> dict[str, Any]:
    return {key: value for key, value in data.items() if key not in keys}


__all__ = ["FirestoreLayoutStore"]
