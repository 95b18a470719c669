from __future__ import annotations

import threading
from typing import Dict, Protocol, Sequence

from .models.layout import PageLayout
from .models.site import GlobalComponent


class LayoutStore(Protocol):
    def save_page_layout(self, layout: PageLayout) -> PageLayout:
        ...

    def get_page_layout(self, website_id: str, slug: str) -> PageLayout | None:
        ...

    def list_page_layouts(self, website_id: str) -> list[PageLayout]:
        ...

    def save_global_components(
        self, website_id: str, components: Sequence[GlobalComponent]
    ) -> list[GlobalComponent]:
        ...

    def get_global_components(self, website_id: str) -> list[GlobalComponent]:
        ...


class InMemoryLayoutStore:
    """Process-local layout store, keyed by (website_id, slug).

    Global components are keyed by (website_id, type): a site has one header
    and one footer.
    """

    def __init__(self) -> None:
        self._layouts: Dict[tuple[str, str], PageLayout] = {}
        self._globals: Dict[tuple[str, str], GlobalComponent] = {}
        self._lock = threading.Lock()

    def save_page_layout(self, layout: PageLayout) -> PageLayout:
        with self._lock:
            self._layouts[(layout.website_id, layout.slug)] = layout
            return layout

    def get_page_layout(self, website_id: str, slug: str) -> PageLayout | None:
        with self._lock:
            return self._layouts.get((website_id, slug))

    def list_page_layouts(self, website_id: str) -> list[PageLayout]:
        with self._lock:
            return [
                layout
                for (owner, _slug), layout in self._layouts.items()
                if owner == website_id
            ]

    def save_global_components(
        self, website_id: str, components: Sequence[GlobalComponent]
    ) -> list[GlobalComponent]:
        with self._lock:
            for component in components:
                self._globals[(website_id, component.type)] = component
            return list(components)

    def get_global_components(self, website_id: str) -> list[GlobalComponent]:
        with self._lock:
            return [
                component
                for (owner, _type), component in self._globals.items()
                if owner == website_id
            ]


__all__ = ["InMemoryLayoutStore", "LayoutStore"]
