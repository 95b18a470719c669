from __future__ import annotations

import copy
import re
from typing import Any, Iterable, Mapping, Sequence

from .dictionaries import DEFAULT_PAGE_CONTENT, DEFAULT_PRIMARY_CTA, DEFAULT_SECONDARY_CTA
from .models.component import ComponentDefinition, PageType
from .models.workspace import KnowledgeBaseItem

HEADLINE_TYPES = frozenset({"tagline", "headline"})
FEATURE_TYPES = frozenset({"feature", "capability"})
TESTIMONIAL_TYPES = frozenset({"testimonial"})
STAT_TYPES = frozenset({"statistic", "metric"})
FAQ_TYPES = frozenset({"faq"})
PRICING_TYPES = frozenset({"pricing", "plan"})
COMPANY_TYPES = frozenset({"company", "about"})

MAX_KEYWORDS = 10


def extract_content(
    page_type: PageType,
    knowledge_base: Sequence[KnowledgeBaseItem] | None,
    *,
    default_content: Mapping[PageType, Mapping[str, Any]] = DEFAULT_PAGE_CONTENT,
) -> dict[str, Any]:
    """Flatten knowledge-base entities into a slot-name → value map.

    ``None`` means no knowledge base was supplied; the page type's entry in
    ``default_content`` is returned instead (falling back to ``custom``).
    """
    if knowledge_base is None:
        defaults = default_content.get(page_type) or default_content.get(PageType.custom) or {}
        return copy.deepcopy(dict(defaults))

    content: dict[str, Any] = {}

    headlines = [item.content for item in _of_type(knowledge_base, HEADLINE_TYPES)]
    if headlines:
        content["headline"] = headlines[0]
        content["subheadline"] = headlines[1] if len(headlines) > 1 else headlines[0]

    features = [
        {
            "title": _name(item),
            "description": _description(item),
            "icon": item.metadata.get("icon") or "star",
        }
        for item in _of_type(knowledge_base, FEATURE_TYPES)
    ]
    if features:
        content["features"] = features

    testimonials = [
        {
            "quote": item.content,
            "author": item.metadata.get("author") or "Customer",
            "role": item.metadata.get("role"),
            "company": item.metadata.get("company"),
        }
        for item in _of_type(knowledge_base, TESTIMONIAL_TYPES)
    ]
    if testimonials:
        content["testimonials"] = testimonials

    stats = [
        {"value": item.metadata.get("value") or _name(item), "label": _description(item)}
        for item in _of_type(knowledge_base, STAT_TYPES)
    ]
    if stats:
        content["stats"] = stats

    questions = [
        {"question": item.metadata.get("question") or _name(item), "answer": item.content}
        for item in _of_type(knowledge_base, FAQ_TYPES)
    ]
    if questions:
        content["questions"] = questions

    plans = [
        {
            "name": _name(item),
            "price": item.metadata.get("price"),
            "features": list(item.metadata.get("features") or []),
        }
        for item in _of_type(knowledge_base, PRICING_TYPES)
    ]
    if plans:
        content["plans"] = plans

    company = next(iter(_of_type(knowledge_base, COMPANY_TYPES)), None)
    if company is not None:
        content["companyDescription"] = company.content

    content["primaryCTA"] = dict(DEFAULT_PRIMARY_CTA)
    content["secondaryCTA"] = dict(DEFAULT_SECONDARY_CTA)
    return content


def map_content_to_component(
    component: ComponentDefinition | None,
    available_content: Mapping[str, Any],
) -> dict[str, str]:
    """Identity mapping for every required/optional slot the content can fill."""
    if component is None:
        return {}
    requirements = component.ai_metadata.content_requirements
    mapping: dict[str, str] = {}
    for slot in (*requirements.required, *requirements.optional):
        if available_content.get(slot) is not None:
            mapping[slot] = slot
    return mapping


def extract_keywords(content: Mapping[str, Any]) -> list[str]:
    keywords: list[str] = []
    headline = content.get("headline")
    if isinstance(headline, str):
        keywords.extend(word for word in re.split(r"\s+", headline.lower()) if len(word) > 4)

    features = content.get("features")
    if isinstance(features, list):
        for feature in features[:3]:
            if isinstance(feature, Mapping) and feature.get("title"):
                keywords.append(str(feature["title"]).lower())

    return list(dict.fromkeys(keywords))[:MAX_KEYWORDS]


def _of_type(items: Iterable[KnowledgeBaseItem], entity_types: frozenset[str]) -> list[KnowledgeBaseItem]:
    return [item for item in items if item.entity_type in entity_types]


def _name(item: KnowledgeBaseItem) -> str:
    return item.metadata.get("name") or item.metadata.get("title") or item.content[:80]


def _description(item: KnowledgeBaseItem) -> str:
    return item.metadata.get("description") or item.content


__all__ = ["extract_content", "extract_keywords", "map_content_to_component"]
