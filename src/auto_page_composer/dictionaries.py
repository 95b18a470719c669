from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Sequence

from .models.component import NarrativeRole, PageType


@dataclass(frozen=True)
class PageTypeConfig:
    type: PageType
    name: str
    description: str
    required_sections: Sequence[NarrativeRole]
    recommended_components: Sequence[str]
    min_sections: int
    max_sections: int


def _config(
    page_type: PageType,
    name: str,
    description: str,
    required: Sequence[NarrativeRole],
    recommended: Sequence[str],
    min_sections: int,
    max_sections: int,
) -> tuple[PageType, PageTypeConfig]:
    return page_type, PageTypeConfig(
        type=page_type,
        name=name,
        description=description,
        required_sections=tuple(required),
        recommended_components=tuple(recommended),
        min_sections=min_sections,
        max_sections=max_sections,
    )


_R = NarrativeRole

PAGE_TYPE_CONFIGS: Mapping[PageType, PageTypeConfig] = MappingProxyType(dict([
    _config(
        PageType.home,
        "Homepage",
        "Main landing page with full storytelling flow",
        (_R.hook, _R.solution, _R.proof, _R.action),
        ("hero-split", "features-grid", "testimonials-carousel", "cta-banner"),
        5,
        10,
    ),
    _config(
        PageType.landing,
        "Landing Page",
        "Focused conversion page for campaigns",
        (_R.hook, _R.solution, _R.action),
        ("hero-centered", "features-alternating", "form-demo-request"),
        4,
        8,
    ),
    _config(
        PageType.product,
        "Product Page",
        "Detailed product showcase",
        (_R.hook, _R.solution, _R.proof),
        ("hero-product", "features-tabs", "pricing-cards", "testimonials-grid"),
        5,
        12,
    ),
    _config(
        PageType.pricing,
        "Pricing Page",
        "Pricing plans and comparison",
        (_R.solution, _R.action),
        ("pricing-cards", "content-faq", "cta-inline"),
        3,
        6,
    ),
    _config(
        PageType.about,
        "About Page",
        "Company story and team",
        (_R.hook, _R.proof),
        ("hero-minimal", "content-rich-text", "stats-section"),
        4,
        8,
    ),
    _config(
        PageType.contact,
        "Contact Page",
        "Contact information and form",
        (_R.action,),
        ("form-contact", "content-columns"),
        2,
        4,
    ),
    _config(
        PageType.blog,
        "Blog Index",
        "Blog listing page",
        (_R.hook,),
        ("hero-minimal", "content-columns"),
        2,
        4,
    ),
    _config(
        PageType.blog_post,
        "Blog Post",
        "Individual blog article",
        (_R.hook,),
        ("content-rich-text", "cta-inline"),
        2,
        5,
    ),
    _config(
        PageType.case_study,
        "Case Study",
        "Customer success story",
        (_R.problem, _R.solution, _R.proof),
        ("hero-minimal", "stats-section", "content-quote", "cta-banner"),
        4,
        8,
    ),
    _config(
        PageType.features,
        "Features Page",
        "Detailed features overview",
        (_R.hook, _R.solution),
        ("hero-split", "features-bento", "features-alternating"),
        4,
        10,
    ),
    _config(
        PageType.solutions,
        "Solutions Page",
        "Industry or use-case solutions",
        (_R.problem, _R.solution, _R.proof),
        ("hero-centered", "features-grid", "case-studies", "cta-demo"),
        5,
        10,
    ),
    _config(
        PageType.resources,
        "Resources Page",
        "Resource library and downloads",
        (_R.hook,),
        ("hero-minimal", "content-columns", "form-newsletter"),
        2,
        5,
    ),
    _config(
        PageType.careers,
        "Careers Page",
        "Job listings and company culture",
        (_R.hook, _R.solution),
        ("hero-centered", "content-columns", "testimonials-grid"),
        4,
        8,
    ),
    _config(
        PageType.legal,
        "Legal Page",
        "Terms, privacy, and legal content",
        (),
        ("content-rich-text",),
        1,
        2,
    ),
    _config(
        PageType.custom,
        "Custom Page",
        "Fully customizable page",
        (),
        (),
        1,
        20,
    ),
]))


DEFAULT_STORY_FLOW: Sequence[NarrativeRole] = (_R.hook, _R.solution, _R.action)


# Matched case-insensitively as substrings of a component's use cases.
PAGE_TYPE_KEYWORDS: Mapping[PageType, Sequence[str]] = MappingProxyType({
    PageType.home: ("homepage", "landing", "main", "brand"),
    PageType.landing: ("campaign", "landing", "conversion", "marketing"),
    PageType.product: ("product", "saas", "feature", "software", "app"),
    PageType.pricing: ("pricing", "plan", "cost", "subscription"),
    PageType.about: ("about", "company", "team", "story", "history"),
    PageType.contact: ("contact", "support", "inquiry", "feedback"),
    PageType.blog: ("blog", "article", "content", "post"),
    PageType.blog_post: ("article", "post", "content", "blog"),
    PageType.case_study: ("case study", "success", "customer", "result"),
    PageType.features: ("feature", "capability", "function", "product"),
    PageType.solutions: ("solution", "industry", "use case", "vertical"),
    PageType.resources: ("resource", "download", "library", "guide"),
    PageType.careers: ("career", "job", "team", "culture", "hiring"),
    PageType.legal: ("legal", "terms", "privacy", "policy"),
    PageType.custom: (),
})


PAGE_SLUGS: Mapping[PageType, str] = MappingProxyType({
    PageType.home: "/",
    PageType.landing: "/landing",
    PageType.product: "/product",
    PageType.pricing: "/pricing",
    PageType.about: "/about",
    PageType.contact: "/contact",
    PageType.blog: "/blog",
    PageType.blog_post: "/blog/post",
    PageType.case_study: "/case-studies/story",
    PageType.features: "/features",
    PageType.solutions: "/solutions",
    PageType.resources: "/resources",
    PageType.careers: "/careers",
    PageType.legal: "/legal",
    PageType.custom: "/page",
})


DEFAULT_PRIMARY_CTA: Mapping[str, str] = MappingProxyType({"text": "Get Started", "href": "/signup"})
DEFAULT_SECONDARY_CTA: Mapping[str, str] = MappingProxyType({"text": "Learn More", "href": "/features"})


# Used when a request has no knowledge base at all.
DEFAULT_PAGE_CONTENT: Mapping[PageType, Mapping[str, Any]] = MappingProxyType({
    PageType.home: {
        "headline": "Welcome to Our Platform",
        "subheadline": "The best solution for your needs",
        "primaryCTA": {"text": "Get Started", "href": "/signup"},
        "secondaryCTA": {"text": "Learn More", "href": "/features"},
    },
    PageType.landing: {
        "headline": "Transform Your Business",
        "subheadline": "Start your journey today",
        "primaryCTA": {"text": "Sign Up Free", "href": "/signup"},
    },
    PageType.product: {
        "headline": "Our Product",
        "subheadline": "Powerful features for modern teams",
        "primaryCTA": {"text": "Try Free", "href": "/trial"},
    },
    PageType.pricing: {
        "headline": "Simple, Transparent Pricing",
        "subheadline": "Choose the plan that works for you",
    },
    PageType.about: {"headline": "About Us", "subheadline": "Our story and mission"},
    PageType.contact: {"headline": "Get in Touch", "subheadline": "We'd love to hear from you"},
    PageType.blog: {"headline": "Blog", "subheadline": "Latest insights and updates"},
    PageType.blog_post: {"headline": "Article Title"},
    PageType.case_study: {
        "headline": "Customer Success Story",
        "subheadline": "How we helped achieve results",
    },
    PageType.features: {"headline": "Features", "subheadline": "Everything you need to succeed"},
    PageType.solutions: {"headline": "Solutions", "subheadline": "Tailored for your industry"},
    PageType.resources: {"headline": "Resources", "subheadline": "Learn and grow with us"},
    PageType.careers: {"headline": "Join Our Team", "subheadline": "Build the future with us"},
    PageType.legal: {"headline": "Legal"},
    PageType.custom: {"headline": "Page Title"},
})


PRIMARY_NAV_PAGES: frozenset[PageType] = frozenset(
    {PageType.home, PageType.features, PageType.pricing, PageType.about, PageType.contact}
)
SECONDARY_NAV_PAGES: frozenset[PageType] = frozenset(
    {PageType.blog, PageType.resources, PageType.careers}
)
FOOTER_NAV_PAGES: frozenset[PageType] = frozenset(
    {PageType.legal, PageType.contact, PageType.about}
)

DEFAULT_SITE_PAGES: Sequence[PageType] = (
    PageType.home,
    PageType.features,
    PageType.pricing,
    PageType.about,
    PageType.contact,
)

DEFAULT_TARGET_PERSONA = "business"


__all__ = [
    "DEFAULT_PAGE_CONTENT",
    "DEFAULT_PRIMARY_CTA",
    "DEFAULT_SECONDARY_CTA",
    "DEFAULT_SITE_PAGES",
    "DEFAULT_STORY_FLOW",
    "DEFAULT_TARGET_PERSONA",
    "FOOTER_NAV_PAGES",
    "PAGE_SLUGS",
    "PAGE_TYPE_CONFIGS",
    "PAGE_TYPE_KEYWORDS",
    "PRIMARY_NAV_PAGES",
    "SECONDARY_NAV_PAGES",
    "PageTypeConfig",
]
