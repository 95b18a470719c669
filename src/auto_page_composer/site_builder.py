from __future__ import annotations

import logging
from datetime import datetime
from typing import Mapping, Sequence

from .dictionaries import (
    DEFAULT_SITE_PAGES,
    FOOTER_NAV_PAGES,
    PAGE_TYPE_CONFIGS,
    PRIMARY_NAV_PAGES,
    SECONDARY_NAV_PAGES,
    PageTypeConfig,
)
from .generator import LayoutGenerator
from .layout_store import LayoutStore
from .models.component import PageType
from .models.layout import LayoutGenerationRequest, PageLayout
from .models.site import (
    GlobalComponent,
    NavigationCTA,
    NavigationItem,
    NavigationStructure,
    SiteArchitecture,
)

logger = logging.getLogger(__name__)

HEADER_NAV_LIMIT = 5


class SiteArchitectureBuilder:
    """Generates every page of a site, then derives navigation and globals."""

    def __init__(
        self,
        generator: LayoutGenerator,
        *,
        layout_store: LayoutStore | None = None,
        page_configs: Mapping[PageType, PageTypeConfig] = PAGE_TYPE_CONFIGS,
        company_name: str = "Company",
    ) -> None:
        self._generator = generator
        self._layout_store = layout_store
        self._page_configs = page_configs
        self._company_name = company_name

    async def build(
        self,
        website_id: str,
        workspace_id: str,
        page_types: Sequence[PageType] = DEFAULT_SITE_PAGES,
        *,
        knowledge_base_id: str | None = None,
        personas: Sequence[str] | None = None,
        brand_config_id: str | None = None,
    ) -> SiteArchitecture:
        pages: list[PageLayout] = []
        # One page at a time: navigation needs the finished set.
        for page_type in page_types:
            result = await self._generator.generate(
                LayoutGenerationRequest(
                    website_id=website_id,
                    workspace_id=workspace_id,
                    page_type=page_type,
                    knowledge_base_id=knowledge_base_id,
                    personas=personas,
                    brand_config_id=brand_config_id,
                )
            )
            if self._layout_store is not None:
                self._layout_store.save_page_layout(result.layout)
            pages.append(result.layout)

        navigation = self.build_navigation(pages)
        global_components = self.build_global_components(pages, navigation)
        if self._layout_store is not None:
            self._layout_store.save_global_components(website_id, global_components)

        logger.info(
            "Generated site architecture",
            extra={"website_id": website_id, "pages_count": len(pages)},
        )

        now = datetime.utcnow()
        return SiteArchitecture(
            website_id=website_id,
            pages=pages,
            navigation=navigation,
            global_components=global_components,
            created_at=now,
            updated_at=now,
        )

    def build_navigation(self, pages: Sequence[PageLayout]) -> NavigationStructure:
        return NavigationStructure(
            primary=self._nav_items(pages, PRIMARY_NAV_PAGES),
            secondary=self._nav_items(pages, SECONDARY_NAV_PAGES),
            footer=self._nav_items(pages, FOOTER_NAV_PAGES),
            cta=NavigationCTA(label="Get Started", href="/signup", variant="primary"),
        )

    def build_global_components(
        self,
        pages: Sequence[PageLayout],
        navigation: NavigationStructure,
    ) -> list[GlobalComponent]:
        header = GlobalComponent(
            id="global-header",
            type="header",
            component_id="nav-header",
            content={
                "logo": {"src": "/logo.svg", "alt": self._company_name},
                "navigation": [
                    {
                        "label": self._label(page.type),
                        "title": page.metadata.title,
                        "href": page.slug,
                    }
                    for page in pages[:HEADER_NAV_LIMIT]
                ],
                "cta": navigation.cta.model_dump() if navigation.cta else None,
            },
            visibility={"show_on": "all"},
        )

        columns = [
            {"title": title, "links": [{"label": item.label, "href": item.href} for item in items]}
            for title, items in (
                ("Product", navigation.primary),
                ("Resources", navigation.secondary),
                ("Company", navigation.footer),
            )
            if items
        ]
        footer = GlobalComponent(
            id="global-footer",
            type="footer",
            component_id="footer-standard",
            content={
                "columns": columns,
                "copyright": (
                    f"© {datetime.utcnow().year} {self._company_name}. All rights reserved."
                ),
            },
            visibility={"show_on": "all"},
        )
        return [header, footer]

    def _nav_items(
        self,
        pages: Sequence[PageLayout],
        page_types: frozenset[PageType],
    ) -> list[NavigationItem]:
        return [
            NavigationItem(id=page.page_id, label=self._label(page.type), href=page.slug)
            for page in pages
            if page.type in page_types
        ]

    def _label(self, page_type: PageType) -> str:
        config = self._page_configs.get(page_type)
        return config.name if config else page_type.value.replace("-", " ").title()


__all__ = ["SiteArchitectureBuilder"]
