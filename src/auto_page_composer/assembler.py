from __future__ import annotations

import uuid
from typing import Mapping, Sequence

from .catalog import COMPONENT_DEFINITIONS
from .dictionaries import PAGE_SLUGS
from .models.component import ComponentDefinition, NarrativeRole, PageType
from .models.layout import (
    AnimationConfig,
    PageLayout,
    PageMetadata,
    Section,
    SectionPadding,
    SectionStyling,
)
from .models.selection import ComponentSelection

SECTION_PADDING = SectionPadding(top="4rem", bottom="4rem")
ANIMATION_STAGGER_SECONDS = 0.1


def assemble_layout(
    website_id: str,
    page_type: PageType,
    selections: Sequence[ComponentSelection],
    metadata: PageMetadata,
    *,
    catalog: Mapping[str, ComponentDefinition] = COMPONENT_DEFINITIONS,
    page_id: str | None = None,
) -> PageLayout:
    sections = [
        build_section(index, selection, catalog.get(selection.selected))
        for index, selection in enumerate(selections)
    ]
    return PageLayout(
        page_id=page_id or generate_page_id(website_id, page_type),
        website_id=website_id,
        slug=generate_slug(page_type),
        type=page_type,
        sections=sections,
        metadata=metadata,
    )


def build_section(
    index: int,
    selection: ComponentSelection,
    component: ComponentDefinition | None,
) -> Section:
    # Mappings arrive as content key -> component prop; sections store prop -> content key.
    content = {prop: content_key for content_key, prop in selection.content_mapping.items()}
    return Section(
        id=f"section-{index}-{selection.selected}",
        component_id=selection.selected,
        content=content,
        narrative_role=component.ai_metadata.narrative_role if component else NarrativeRole.solution,
        order=index,
        animations=AnimationConfig(
            preset=component.animation_preset if component else "fadeIn",
            delay=round(index * ANIMATION_STAGGER_SECONDS, 2),
        ),
        styling=SectionStyling(padding=SECTION_PADDING),
    )


def generate_slug(page_type: PageType) -> str:
    return PAGE_SLUGS.get(page_type, "/page")


def generate_page_id(website_id: str, page_type: PageType) -> str:
    return f"{website_id}-{page_type.value}-{uuid.uuid4().hex[:8]}"


def confidence_score(selections: Sequence[ComponentSelection]) -> float:
    if not selections:
        return 0.0
    average = sum(selection.score.total_score for selection in selections) / len(selections)
    return round(average, 2)


__all__ = [
    "assemble_layout",
    "build_section",
    "confidence_score",
    "generate_page_id",
    "generate_slug",
]
