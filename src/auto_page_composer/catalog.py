from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping, Sequence

from .models.component import (
    AIMetadata,
    ComponentCategory,
    ComponentDefinition,
    ContentRequirements,
    NarrativeRole,
    PersonaFitScore,
    PositionHints,
    PreferredPosition,
)


def _component(
    component_id: str,
    name: str,
    category: ComponentCategory,
    description: str,
    *,
    use_cases: Sequence[str],
    persona_fit: Mapping[str, float],
    role: NarrativeRole,
    position: PreferredPosition = PreferredPosition.any,
    required: Sequence[str] = (),
    optional: Sequence[str] = (),
    min_length: Mapping[str, int] | None = None,
    max_length: Mapping[str, int] | None = None,
    min_count: Mapping[str, int] | None = None,
    max_count: Mapping[str, int] | None = None,
    avoid_after: Sequence[str] = (),
    prefer_after: Sequence[str] = (),
    animation: str = "fadeIn",
) -> ComponentDefinition:
    return ComponentDefinition(
        id=component_id,
        name=name,
        category=category,
        description=description,
        ai_metadata=AIMetadata(
            use_cases=tuple(use_cases),
            content_requirements=ContentRequirements(
                required=tuple(required),
                optional=tuple(optional),
                min_length=MappingProxyType(dict(min_length or {})),
                max_length=MappingProxyType(dict(max_length or {})),
                min_count=MappingProxyType(dict(min_count or {})),
                max_count=MappingProxyType(dict(max_count or {})),
            ),
            persona_fit=tuple(
                PersonaFitScore(persona=persona, score=score)
                for persona, score in persona_fit.items()
            ),
            position_hints=PositionHints(
                preferred_position=position,
                avoid_after=tuple(avoid_after),
                prefer_after=tuple(prefer_after),
            ),
            narrative_role=role,
        ),
        animation_preset=animation,
    )


def _index(definitions: Iterable[ComponentDefinition]) -> Mapping[str, ComponentDefinition]:
    table: dict[str, ComponentDefinition] = {}
    for definition in definitions:
        if definition.id in table:
            raise ValueError(f"Duplicate component id in catalog: {definition.id}")
        table[definition.id] = definition
    return MappingProxyType(table)


# Insertion order is the tie-break order used by the planner.
COMPONENT_DEFINITIONS: Mapping[str, ComponentDefinition] = _index([
    # Hero
    _component(
        "hero-split",
        "Hero Split",
        ComponentCategory.hero,
        "Split-screen hero with content on one side and media on the other",
        use_cases=(
            "Product launch pages",
            "SaaS landing pages",
            "Feature announcements",
            "High-impact homepages",
        ),
        required=("headline", "media"),
        optional=("subheadline", "primaryCTA", "secondaryCTA", "trustedByLogos"),
        min_length={"headline": 20},
        max_length={"headline": 80, "subheadline": 200},
        persona_fit={"technical": 0.8, "business": 0.9, "executive": 0.7},
        position=PreferredPosition.top,
        avoid_after=("hero-centered", "hero-video", "hero-animated"),
        role=NarrativeRole.hook,
    ),
    _component(
        "hero-centered",
        "Hero Centered",
        ComponentCategory.hero,
        "Full-width centered hero with prominent headline",
        use_cases=(
            "Brand-focused homepages",
            "Campaign landing pages",
            "Event pages",
            "Company announcements",
        ),
        required=("headline",),
        optional=(
            "subheadline",
            "primaryCTA",
            "secondaryCTA",
            "backgroundMedia",
            "trustedByLogos",
        ),
        min_length={"headline": 15},
        max_length={"headline": 100, "subheadline": 250},
        persona_fit={"technical": 0.6, "business": 0.9, "executive": 0.9},
        position=PreferredPosition.top,
        avoid_after=("hero-split", "hero-video"),
        role=NarrativeRole.hook,
        animation="slideUp",
    ),
    _component(
        "hero-video",
        "Hero Video",
        ComponentCategory.hero,
        "Full-screen video background hero with overlaid content",
        use_cases=(
            "Brand storytelling",
            "Product demos",
            "Immersive experiences",
            "Entertainment sites",
        ),
        required=("headline", "videoUrl"),
        optional=("subheadline", "primaryCTA", "posterImage"),
        min_length={"headline": 10},
        max_length={"headline": 60},
        persona_fit={"technical": 0.5, "business": 0.7, "executive": 0.8},
        position=PreferredPosition.top,
        avoid_after=("hero-split", "hero-centered"),
        role=NarrativeRole.hook,
    ),
    _component(
        "hero-animated",
        "Hero Animated",
        ComponentCategory.hero,
        "Hero with scroll-triggered animations and interactive elements",
        use_cases=(
            "Creative agencies",
            "Tech products",
            "Interactive showcases",
            "Modern brands",
        ),
        required=("headline",),
        optional=("subheadline", "primaryCTA", "animatedElements"),
        min_length={"headline": 15},
        max_length={"headline": 80},
        persona_fit={"technical": 0.9, "business": 0.6, "executive": 0.5},
        position=PreferredPosition.top,
        role=NarrativeRole.hook,
        animation="scaleIn",
    ),
    _component(
        "hero-product",
        "Hero Product",
        ComponentCategory.hero,
        "Product screenshot/mockup-focused hero",
        use_cases=(
            "SaaS products",
            "App launches",
            "Software demos",
            "Product pages",
        ),
        required=("headline", "productImage"),
        optional=("subheadline", "primaryCTA", "secondaryCTA", "featureBadges"),
        min_length={"headline": 20},
        max_length={"headline": 80, "subheadline": 180},
        persona_fit={"technical": 0.95, "business": 0.8, "executive": 0.6},
        position=PreferredPosition.top,
        role=NarrativeRole.hook,
        animation="slideUp",
    ),
    _component(
        "hero-minimal",
        "Hero Minimal",
        ComponentCategory.hero,
        "Clean, typography-focused minimal hero",
        use_cases=(
            "Blog pages",
            "About pages",
            "Legal pages",
            "Content-focused pages",
        ),
        required=("headline",),
        optional=("subheadline", "breadcrumb"),
        min_length={"headline": 10},
        max_length={"headline": 120},
        persona_fit={"technical": 0.7, "business": 0.7, "executive": 0.8},
        position=PreferredPosition.top,
        role=NarrativeRole.hook,
    ),
    _component(
        "hero-interactive",
        "Hero Interactive",
        ComponentCategory.hero,
        "Hero with interactive demo or playground",
        use_cases=(
            "Developer tools",
            "API products",
            "Interactive demos",
            "Try-before-buy",
        ),
        required=("headline", "interactiveElement"),
        optional=("subheadline", "primaryCTA"),
        persona_fit={"technical": 1, "business": 0.5, "executive": 0.3},
        position=PreferredPosition.top,
        role=NarrativeRole.hook,
    ),
    _component(
        "hero-stats",
        "Hero Stats",
        ComponentCategory.hero,
        "Hero with key metrics and statistics prominently displayed",
        use_cases=(
            "Data-driven companies",
            "Results-focused pages",
            "Enterprise solutions",
            "Industry leaders",
        ),
        required=("headline", "stats"),
        optional=("subheadline", "primaryCTA"),
        min_count={"stats": 3},
        max_count={"stats": 5},
        persona_fit={"technical": 0.7, "business": 0.95, "executive": 0.95},
        position=PreferredPosition.top,
        role=NarrativeRole.proof,
        animation="staggerChildren",
    ),

    # Features
    _component(
        "features-grid",
        "Features Grid",
        ComponentCategory.features,
        "Card-based grid layout for displaying features",
        use_cases=(
            "Displaying multiple features equally",
            "Product capabilities overview",
            "Service offerings",
            "Feature comparison",
        ),
        required=("features",),
        optional=("sectionTitle", "sectionDescription"),
        min_count={"features": 3},
        max_count={"features": 12},
        persona_fit={"technical": 0.8, "business": 0.9, "executive": 0.7},
        position=PreferredPosition.middle,
        prefer_after=("hero-split", "hero-centered", "hero-product"),
        role=NarrativeRole.solution,
        animation="staggerChildren",
    ),
    _component(
        "features-alternating",
        "Features Alternating",
        ComponentCategory.features,
        "Left/right alternating layout with media",
        use_cases=(
            "Deep-dive features",
            "Process explanation",
            "Step-by-step guides",
            "Product walkthrough",
        ),
        required=("features",),
        optional=("sectionTitle",),
        min_count={"features": 2},
        max_count={"features": 6},
        persona_fit={"technical": 0.85, "business": 0.85, "executive": 0.6},
        position=PreferredPosition.middle,
        prefer_after=("hero-split", "features-grid"),
        role=NarrativeRole.solution,
        animation="slideUp",
    ),
    _component(
        "features-tabs",
        "Features Tabs",
        ComponentCategory.features,
        "Tabbed interface for feature categories",
        use_cases=(
            "Multiple feature categories",
            "Product modules",
            "Use case demos",
            "Feature deep-dives",
        ),
        required=("tabs",),
        optional=("sectionTitle", "sectionDescription"),
        min_count={"tabs": 2},
        max_count={"tabs": 6},
        persona_fit={"technical": 0.9, "business": 0.8, "executive": 0.5},
        position=PreferredPosition.middle,
        role=NarrativeRole.solution,
    ),
    _component(
        "features-carousel",
        "Features Carousel",
        ComponentCategory.features,
        "Sliding carousel for feature showcase",
        use_cases=(
            "Visual feature showcase",
            "Portfolio display",
            "Product gallery",
            "Screenshot tours",
        ),
        required=("slides",),
        optional=("sectionTitle",),
        min_count={"slides": 3},
        max_count={"slides": 10},
        persona_fit={"technical": 0.6, "business": 0.8, "executive": 0.7},
        position=PreferredPosition.middle,
        role=NarrativeRole.solution,
    ),
    _component(
        "features-bento",
        "Features Bento",
        ComponentCategory.features,
        "Bento grid with varied card sizes",
        use_cases=(
            "Feature highlights",
            "Mixed importance features",
            "Visual hierarchy",
            "Modern product pages",
        ),
        required=("items",),
        optional=("sectionTitle",),
        min_count={"items": 4},
        max_count={"items": 8},
        persona_fit={"technical": 0.85, "business": 0.75, "executive": 0.6},
        position=PreferredPosition.middle,
        role=NarrativeRole.solution,
        animation="staggerChildren",
    ),
    _component(
        "features-comparison",
        "Features Comparison",
        ComponentCategory.features,
        "Comparison table layout",
        use_cases=(
            "Competitive comparison",
            "Plan comparison",
            "Before/after",
            "Feature matrix",
        ),
        required=("columns", "rows"),
        optional=("sectionTitle", "sectionDescription"),
        min_count={"columns": 2, "rows": 3},
        persona_fit={"technical": 0.9, "business": 0.95, "executive": 0.7},
        position=PreferredPosition.middle,
        prefer_after=("features-grid", "pricing-cards"),
        role=NarrativeRole.solution,
    ),
    _component(
        "features-timeline",
        "Features Timeline",
        ComponentCategory.features,
        "Timeline-based feature presentation",
        use_cases=(
            "Process flow",
            "Roadmap",
            "History",
            "Step progression",
        ),
        required=("events",),
        optional=("sectionTitle",),
        min_count={"events": 3},
        max_count={"events": 10},
        persona_fit={"technical": 0.7, "business": 0.8, "executive": 0.85},
        position=PreferredPosition.middle,
        role=NarrativeRole.solution,
        animation="slideUp",
    ),
    _component(
        "features-showcase",
        "Features Showcase",
        ComponentCategory.features,
        "Large interactive feature showcase",
        use_cases=(
            "Hero feature highlight",
            "Main product feature",
            "Key differentiator",
            "Interactive demo",
        ),
        required=("title", "description", "media"),
        optional=("features", "cta"),
        persona_fit={"technical": 0.85, "business": 0.8, "executive": 0.7},
        position=PreferredPosition.middle,
        prefer_after=("hero-split", "hero-product"),
        role=NarrativeRole.solution,
        animation="scaleIn",
    ),
    _component(
        "features-icon-list",
        "Features Icon List",
        ComponentCategory.features,
        "Simple icon + text list",
        use_cases=(
            "Quick feature list",
            "Benefits summary",
            "Checklist",
            "Supporting features",
        ),
        required=("items",),
        optional=("sectionTitle",),
        min_count={"items": 4},
        max_count={"items": 12},
        persona_fit={"technical": 0.7, "business": 0.8, "executive": 0.9},
        position=PreferredPosition.middle,
        prefer_after=("hero-centered", "content-rich-text"),
        role=NarrativeRole.solution,
        animation="staggerChildren",
    ),
    _component(
        "features-accordion",
        "Features Accordion",
        ComponentCategory.features,
        "Expandable accordion for feature details",
        use_cases=(
            "Detailed feature explanations",
            "FAQ-style features",
            "Space-efficient display",
            "Technical specifications",
        ),
        required=("items",),
        optional=("sectionTitle",),
        min_count={"items": 3},
        max_count={"items": 10},
        persona_fit={"technical": 0.9, "business": 0.7, "executive": 0.5},
        position=PreferredPosition.middle,
        role=NarrativeRole.solution,
        animation="slideDown",
    ),

    # Social proof
    _component(
        "testimonials-carousel",
        "Testimonials Carousel",
        ComponentCategory.social_proof,
        "Sliding carousel of customer testimonials",
        use_cases=(
            "Customer stories",
            "Social proof",
            "Trust building",
            "Success stories",
        ),
        required=("testimonials",),
        optional=("sectionTitle",),
        min_count={"testimonials": 3},
        persona_fit={"technical": 0.6, "business": 0.95, "executive": 0.9},
        position=PreferredPosition.middle,
        prefer_after=("features-grid", "features-alternating"),
        role=NarrativeRole.proof,
    ),
    _component(
        "testimonials-grid",
        "Testimonials Grid",
        ComponentCategory.social_proof,
        "Grid layout of customer testimonials",
        use_cases=(
            "Multiple testimonials",
            "Diverse customer voices",
            "Industry coverage",
            "Use case variety",
        ),
        required=("testimonials",),
        optional=("sectionTitle",),
        min_count={"testimonials": 3},
        max_count={"testimonials": 9},
        persona_fit={"technical": 0.65, "business": 0.9, "executive": 0.85},
        position=PreferredPosition.middle,
        role=NarrativeRole.proof,
        animation="staggerChildren",
    ),
    _component(
        "logo-cloud",
        "Logo Cloud",
        ComponentCategory.social_proof,
        "Display of customer/partner logos",
        use_cases=(
            "Trusted by section",
            "Partner showcase",
            "Client logos",
            "Integration partners",
        ),
        required=("logos",),
        optional=("sectionTitle",),
        min_count={"logos": 4},
        max_count={"logos": 20},
        persona_fit={"technical": 0.5, "business": 0.95, "executive": 1},
        position=PreferredPosition.any,
        prefer_after=("hero-centered", "hero-split"),
        role=NarrativeRole.proof,
    ),
    _component(
        "case-studies",
        "Case Studies",
        ComponentCategory.social_proof,
        "Featured case study cards",
        use_cases=(
            "Success stories",
            "Customer wins",
            "ROI proof",
            "Industry examples",
        ),
        required=("caseStudies",),
        optional=("sectionTitle", "sectionDescription"),
        min_count={"caseStudies": 2},
        max_count={"caseStudies": 4},
        persona_fit={"technical": 0.7, "business": 1, "executive": 0.95},
        position=PreferredPosition.middle,
        prefer_after=("testimonials-carousel", "features-grid"),
        role=NarrativeRole.proof,
        animation="slideUp",
    ),
    _component(
        "stats-section",
        "Stats Section",
        ComponentCategory.social_proof,
        "Key metrics and statistics display",
        use_cases=(
            "Impact metrics",
            "Company achievements",
            "Performance data",
            "Trust indicators",
        ),
        required=("stats",),
        optional=("sectionTitle", "sectionDescription"),
        min_count={"stats": 3},
        max_count={"stats": 6},
        persona_fit={"technical": 0.7, "business": 0.95, "executive": 1},
        position=PreferredPosition.middle,
        prefer_after=("hero-centered", "testimonials-carousel"),
        role=NarrativeRole.proof,
        animation="staggerChildren",
    ),
    _component(
        "awards-badges",
        "Awards & Badges",
        ComponentCategory.social_proof,
        "Display of awards, certifications, and badges",
        use_cases=(
            "Industry recognition",
            "Certifications",
            "Trust badges",
            "Awards showcase",
        ),
        required=("badges",),
        optional=("sectionTitle",),
        min_count={"badges": 3},
        max_count={"badges": 8},
        persona_fit={"technical": 0.6, "business": 0.85, "executive": 0.95},
        position=PreferredPosition.bottom,
        role=NarrativeRole.proof,
    ),

    # Pricing
    _component(
        "pricing-cards",
        "Pricing Cards",
        ComponentCategory.pricing,
        "Side-by-side pricing plan cards",
        use_cases=(
            "SaaS pricing",
            "Plan comparison",
            "Tiered offerings",
            "Subscription plans",
        ),
        required=("plans",),
        optional=("sectionTitle", "sectionDescription", "billingToggle"),
        min_count={"plans": 2},
        max_count={"plans": 4},
        persona_fit={"technical": 0.8, "business": 0.95, "executive": 0.7},
        position=PreferredPosition.middle,
        prefer_after=("features-grid", "testimonials-carousel"),
        role=NarrativeRole.action,
        animation="staggerChildren",
    ),
    _component(
        "pricing-table",
        "Pricing Table",
        ComponentCategory.pricing,
        "Detailed pricing comparison table",
        use_cases=(
            "Feature comparison",
            "Enterprise pricing",
            "Detailed plans",
            "Technical buyers",
        ),
        required=("plans", "features"),
        optional=("sectionTitle",),
        min_count={"plans": 2, "features": 5},
        persona_fit={"technical": 0.95, "business": 0.8, "executive": 0.5},
        position=PreferredPosition.middle,
        role=NarrativeRole.action,
    ),
    _component(
        "pricing-calculator",
        "Pricing Calculator",
        ComponentCategory.pricing,
        "Interactive pricing calculator",
        use_cases=(
            "Usage-based pricing",
            "Custom quotes",
            "Volume pricing",
            "ROI calculator",
        ),
        required=("variables", "formula"),
        optional=("sectionTitle", "defaultValues"),
        persona_fit={"technical": 0.9, "business": 0.95, "executive": 0.6},
        position=PreferredPosition.middle,
        role=NarrativeRole.action,
        animation="slideUp",
    ),
    _component(
        "pricing-simple",
        "Pricing Simple",
        ComponentCategory.pricing,
        "Simple single-price display",
        use_cases=(
            "Single product",
            "Simple pricing",
            "Flat rate",
            "One-time purchase",
        ),
        required=("price", "features"),
        optional=("sectionTitle", "cta"),
        persona_fit={"technical": 0.6, "business": 0.8, "executive": 0.85},
        position=PreferredPosition.middle,
        role=NarrativeRole.action,
        animation="scaleIn",
    ),
    _component(
        "pricing-enterprise",
        "Pricing Enterprise",
        ComponentCategory.pricing,
        "Enterprise/custom pricing section",
        use_cases=(
            "Enterprise sales",
            "Custom solutions",
            "Contact for pricing",
            "High-touch sales",
        ),
        required=("features",),
        optional=("sectionTitle", "contactForm", "testimonial"),
        persona_fit={"technical": 0.7, "business": 0.85, "executive": 1},
        position=PreferredPosition.middle,
        prefer_after=("pricing-cards",),
        role=NarrativeRole.action,
    ),

    # Calls to action
    _component(
        "cta-banner",
        "CTA Banner",
        ComponentCategory.cta,
        "Full-width call-to-action banner",
        use_cases=(
            "Page finale",
            "Strong conversion push",
            "Newsletter signup",
            "Demo request",
        ),
        required=("headline", "primaryCTA"),
        optional=("subheadline", "secondaryCTA", "backgroundImage"),
        max_length={"headline": 80, "subheadline": 150},
        persona_fit={"technical": 0.7, "business": 0.9, "executive": 0.8},
        position=PreferredPosition.bottom,
        prefer_after=("testimonials-carousel", "pricing-cards", "content-faq"),
        role=NarrativeRole.action,
        animation="slideUp",
    ),
    _component(
        "cta-inline",
        "CTA Inline",
        ComponentCategory.cta,
        "Inline call-to-action within content",
        use_cases=(
            "Mid-content conversion",
            "Contextual CTAs",
            "Article CTAs",
            "Soft conversion",
        ),
        required=("text", "primaryCTA"),
        optional=("icon",),
        max_length={"text": 100},
        persona_fit={"technical": 0.7, "business": 0.8, "executive": 0.7},
        position=PreferredPosition.middle,
        role=NarrativeRole.action,
    ),
    _component(
        "cta-sticky",
        "CTA Sticky",
        ComponentCategory.cta,
        "Sticky/floating call-to-action",
        use_cases=(
            "Persistent conversion",
            "Long-form content",
            "Scroll-based CTAs",
            "Mobile optimization",
        ),
        required=("text", "primaryCTA"),
        optional=("dismissible",),
        max_length={"text": 50},
        persona_fit={"technical": 0.5, "business": 0.8, "executive": 0.6},
        position=PreferredPosition.bottom,
        role=NarrativeRole.action,
        animation="slideUp",
    ),
    _component(
        "cta-card",
        "CTA Card",
        ComponentCategory.cta,
        "Card-style call-to-action",
        use_cases=(
            "Featured offer",
            "Special promotion",
            "Resource download",
            "Event signup",
        ),
        required=("title", "primaryCTA"),
        optional=("description", "image", "badge"),
        max_length={"title": 60, "description": 120},
        persona_fit={"technical": 0.7, "business": 0.85, "executive": 0.75},
        position=PreferredPosition.any,
        role=NarrativeRole.action,
        animation="scaleIn",
    ),
    _component(
        "cta-email",
        "CTA Email",
        ComponentCategory.cta,
        "Email capture call-to-action",
        use_cases=(
            "Newsletter signup",
            "Lead capture",
            "Updates subscription",
            "Content gating",
        ),
        required=("headline", "emailField"),
        optional=("subheadline", "privacyNote"),
        max_length={"headline": 60},
        persona_fit={"technical": 0.6, "business": 0.85, "executive": 0.7},
        position=PreferredPosition.bottom,
        prefer_after=("content-rich-text", "features-grid"),
        role=NarrativeRole.action,
        animation="slideUp",
    ),
    _component(
        "cta-demo",
        "CTA Demo",
        ComponentCategory.cta,
        "Demo request call-to-action",
        use_cases=(
            "Demo scheduling",
            "Sales qualified leads",
            "Product tours",
            "Consultation booking",
        ),
        required=("headline", "primaryCTA"),
        optional=("subheadline", "calendlyUrl", "testimonial"),
        max_length={"headline": 70, "subheadline": 150},
        persona_fit={"technical": 0.7, "business": 0.95, "executive": 0.9},
        position=PreferredPosition.bottom,
        prefer_after=("pricing-cards", "features-grid", "testimonials-carousel"),
        role=NarrativeRole.action,
        animation="slideUp",
    ),
    _component(
        "cta-exit-intent",
        "CTA Exit Intent",
        ComponentCategory.cta,
        "Exit-intent popup/modal",
        use_cases=(
            "Exit capture",
            "Last chance offers",
            "Abandonment recovery",
            "Special deals",
        ),
        required=("headline", "primaryCTA"),
        optional=("subheadline", "offer", "image"),
        max_length={"headline": 50},
        persona_fit={"technical": 0.4, "business": 0.7, "executive": 0.5},
        position=PreferredPosition.any,
        role=NarrativeRole.action,
        animation="scaleIn",
    ),
    _component(
        "cta-scroll-triggered",
        "CTA Scroll Triggered",
        ComponentCategory.cta,
        "Scroll-triggered call-to-action",
        use_cases=(
            "Engagement-based CTAs",
            "Progressive disclosure",
            "Reading completion",
            "Scroll milestones",
        ),
        required=("headline", "primaryCTA"),
        optional=("subheadline",),
        max_length={"headline": 60},
        persona_fit={"technical": 0.6, "business": 0.75, "executive": 0.65},
        position=PreferredPosition.any,
        role=NarrativeRole.action,
        animation="slideUp",
    ),

    # Content
    _component(
        "content-rich-text",
        "Content Rich Text",
        ComponentCategory.content,
        "Rich text content block",
        use_cases=(
            "Long-form content",
            "Articles",
            "Documentation",
            "Policy pages",
        ),
        required=("content",),
        optional=("title",),
        persona_fit={"technical": 0.8, "business": 0.7, "executive": 0.6},
        position=PreferredPosition.middle,
        role=NarrativeRole.solution,
    ),
    _component(
        "content-columns",
        "Content Columns",
        ComponentCategory.content,
        "Multi-column content layout",
        use_cases=(
            "Multi-topic content",
            "Balanced information",
            "Contact + map",
            "Side-by-side content",
        ),
        required=("columns",),
        optional=("sectionTitle",),
        min_count={"columns": 2},
        max_count={"columns": 4},
        persona_fit={"technical": 0.7, "business": 0.8, "executive": 0.75},
        position=PreferredPosition.middle,
        role=NarrativeRole.solution,
        animation="staggerChildren",
    ),
    _component(
        "content-image-text",
        "Content Image Text",
        ComponentCategory.content,
        "Image with accompanying text",
        use_cases=(
            "Visual storytelling",
            "Product context",
            "Feature highlight",
            "About sections",
        ),
        required=("image", "content"),
        optional=("title", "cta"),
        persona_fit={"technical": 0.7, "business": 0.85, "executive": 0.8},
        position=PreferredPosition.middle,
        role=NarrativeRole.solution,
        animation="slideUp",
    ),
    _component(
        "content-video",
        "Content Video",
        ComponentCategory.content,
        "Video content block",
        use_cases=(
            "Product demos",
            "Explainer videos",
            "Testimonial videos",
            "Tutorial content",
        ),
        required=("videoUrl",),
        optional=("title", "description", "transcript"),
        persona_fit={"technical": 0.7, "business": 0.8, "executive": 0.85},
        position=PreferredPosition.middle,
        role=NarrativeRole.solution,
    ),
    _component(
        "content-quote",
        "Content Quote",
        ComponentCategory.content,
        "Pull quote or blockquote",
        use_cases=(
            "Key statements",
            "Executive quotes",
            "Customer quotes",
            "Emphasis points",
        ),
        required=("quote",),
        optional=("author", "role", "company", "image"),
        max_length={"quote": 300},
        persona_fit={"technical": 0.5, "business": 0.85, "executive": 0.9},
        position=PreferredPosition.middle,
        role=NarrativeRole.proof,
    ),
    _component(
        "content-faq",
        "Content FAQ",
        ComponentCategory.content,
        "Frequently asked questions",
        use_cases=(
            "Common questions",
            "Support content",
            "Objection handling",
            "Product clarification",
        ),
        required=("questions",),
        optional=("sectionTitle", "sectionDescription"),
        min_count={"questions": 3},
        max_count={"questions": 15},
        persona_fit={"technical": 0.85, "business": 0.8, "executive": 0.6},
        position=PreferredPosition.bottom,
        prefer_after=("pricing-cards", "features-grid"),
        role=NarrativeRole.proof,
        animation="staggerChildren",
    ),
    _component(
        "content-steps",
        "Content Steps",
        ComponentCategory.content,
        "Step-by-step process",
        use_cases=(
            "How it works",
            "Getting started",
            "Process explanation",
            "Onboarding steps",
        ),
        required=("steps",),
        optional=("sectionTitle", "sectionDescription"),
        min_count={"steps": 3},
        max_count={"steps": 7},
        persona_fit={"technical": 0.8, "business": 0.85, "executive": 0.7},
        position=PreferredPosition.middle,
        prefer_after=("hero-split", "hero-centered"),
        role=NarrativeRole.solution,
        animation="staggerChildren",
    ),
    _component(
        "content-glossary",
        "Content Glossary",
        ComponentCategory.content,
        "Glossary/definitions list",
        use_cases=(
            "Technical terms",
            "Industry jargon",
            "Product glossary",
            "Educational content",
        ),
        required=("terms",),
        optional=("sectionTitle",),
        min_count={"terms": 5},
        persona_fit={"technical": 0.95, "business": 0.6, "executive": 0.4},
        position=PreferredPosition.middle,
        role=NarrativeRole.solution,
    ),
    _component(
        "content-table",
        "Content Table",
        ComponentCategory.content,
        "Data table content",
        use_cases=(
            "Technical specifications",
            "Data presentation",
            "Comparison data",
            "Structured information",
        ),
        required=("headers", "rows"),
        optional=("caption",),
        min_count={"headers": 2, "rows": 2},
        persona_fit={"technical": 1, "business": 0.7, "executive": 0.5},
        position=PreferredPosition.middle,
        role=NarrativeRole.solution,
    ),
    _component(
        "content-code",
        "Content Code",
        ComponentCategory.content,
        "Code snippet display",
        use_cases=(
            "API examples",
            "Code documentation",
            "Technical tutorials",
            "Developer content",
        ),
        required=("code", "language"),
        optional=("title", "description", "copyButton"),
        persona_fit={"technical": 1, "business": 0.2, "executive": 0.1},
        position=PreferredPosition.middle,
        role=NarrativeRole.solution,
    ),
    _component(
        "content-callout",
        "Content Callout",
        ComponentCategory.content,
        "Callout/alert box",
        use_cases=(
            "Important notices",
            "Tips and warnings",
            "Highlighted information",
            "Key takeaways",
        ),
        required=("content",),
        optional=("title", "icon", "type"),
        max_length={"content": 500},
        persona_fit={"technical": 0.8, "business": 0.7, "executive": 0.6},
        position=PreferredPosition.any,
        role=NarrativeRole.solution,
        animation="slideInLeft",
    ),
    _component(
        "content-divider",
        "Content Divider",
        ComponentCategory.content,
        "Visual section divider",
        use_cases=(
            "Section separation",
            "Visual breaks",
            "Content organization",
            "Thematic shifts",
        ),
        optional=("label", "icon"),
        persona_fit={"technical": 0.5, "business": 0.5, "executive": 0.5},
        position=PreferredPosition.any,
        role=NarrativeRole.solution,
        animation="none",
    ),

    # Interactive
    _component(
        "interactive-quiz",
        "Interactive Quiz",
        ComponentCategory.interactive,
        "Interactive quiz/assessment",
        use_cases=(
            "Lead qualification",
            "Product recommendation",
            "Knowledge assessment",
            "Engagement tool",
        ),
        required=("questions", "results"),
        optional=("title", "description"),
        min_count={"questions": 3},
        persona_fit={"technical": 0.7, "business": 0.85, "executive": 0.6},
        position=PreferredPosition.middle,
        role=NarrativeRole.action,
    ),
    _component(
        "interactive-survey",
        "Interactive Survey",
        ComponentCategory.interactive,
        "Multi-question survey",
        use_cases=(
            "Customer feedback",
            "Market research",
            "User preferences",
            "NPS collection",
        ),
        required=("questions",),
        optional=("title", "thankYouMessage"),
        min_count={"questions": 2},
        persona_fit={"technical": 0.6, "business": 0.8, "executive": 0.5},
        position=PreferredPosition.middle,
        role=NarrativeRole.action,
        animation="slideUp",
    ),
    _component(
        "interactive-calculator",
        "Interactive Calculator",
        ComponentCategory.interactive,
        "Custom calculator tool",
        use_cases=(
            "ROI calculator",
            "Savings calculator",
            "Sizing calculator",
            "Cost estimator",
        ),
        required=("inputs", "formula", "outputs"),
        optional=("title", "description"),
        min_count={"inputs": 2},
        persona_fit={"technical": 0.85, "business": 0.95, "executive": 0.8},
        position=PreferredPosition.middle,
        prefer_after=("features-grid", "pricing-cards"),
        role=NarrativeRole.proof,
        animation="scaleIn",
    ),
    _component(
        "interactive-comparison",
        "Interactive Comparison",
        ComponentCategory.interactive,
        "Interactive comparison tool",
        use_cases=(
            "Product comparison",
            "Plan comparison",
            "Feature matrix",
            "Competitive analysis",
        ),
        required=("items", "criteria"),
        optional=("title",),
        min_count={"items": 2, "criteria": 3},
        persona_fit={"technical": 0.9, "business": 0.85, "executive": 0.7},
        position=PreferredPosition.middle,
        role=NarrativeRole.solution,
    ),
    _component(
        "interactive-timeline",
        "Interactive Timeline",
        ComponentCategory.interactive,
        "Interactive timeline visualization",
        use_cases=(
            "Company history",
            "Product roadmap",
            "Project milestones",
            "Event timeline",
        ),
        required=("events",),
        optional=("title",),
        min_count={"events": 4},
        persona_fit={"technical": 0.7, "business": 0.8, "executive": 0.85},
        position=PreferredPosition.middle,
        role=NarrativeRole.proof,
        animation="staggerChildren",
    ),
    _component(
        "interactive-carousel",
        "Interactive Carousel",
        ComponentCategory.interactive,
        "Touch-friendly carousel",
        use_cases=(
            "Image gallery",
            "Product showcase",
            "Content slides",
            "Portfolio display",
        ),
        required=("slides",),
        optional=("title",),
        min_count={"slides": 3},
        persona_fit={"technical": 0.6, "business": 0.8, "executive": 0.75},
        position=PreferredPosition.middle,
        role=NarrativeRole.solution,
    ),
    _component(
        "interactive-map",
        "Interactive Map",
        ComponentCategory.interactive,
        "Interactive map display",
        use_cases=(
            "Location display",
            "Office locations",
            "Service areas",
            "Event venues",
        ),
        required=("markers",),
        optional=("title", "center", "zoom"),
        min_count={"markers": 1},
        persona_fit={"technical": 0.5, "business": 0.7, "executive": 0.6},
        position=PreferredPosition.middle,
        role=NarrativeRole.solution,
    ),
    _component(
        "interactive-tabs",
        "Interactive Tabs",
        ComponentCategory.interactive,
        "Tabbed content interface",
        use_cases=(
            "Content organization",
            "Multi-view content",
            "Category browsing",
            "Feature categories",
        ),
        required=("tabs",),
        optional=("title",),
        min_count={"tabs": 2},
        max_count={"tabs": 6},
        persona_fit={"technical": 0.8, "business": 0.75, "executive": 0.6},
        position=PreferredPosition.middle,
        role=NarrativeRole.solution,
    ),
    _component(
        "interactive-modal",
        "Interactive Modal",
        ComponentCategory.interactive,
        "Modal/dialog component",
        use_cases=(
            "Detail views",
            "Form overlays",
            "Confirmations",
            "Feature previews",
        ),
        required=("content", "trigger"),
        optional=("title", "footer"),
        persona_fit={"technical": 0.7, "business": 0.7, "executive": 0.6},
        position=PreferredPosition.any,
        role=NarrativeRole.solution,
        animation="scaleIn",
    ),
    _component(
        "interactive-drawer",
        "Interactive Drawer",
        ComponentCategory.interactive,
        "Slide-out drawer panel",
        use_cases=(
            "Side navigation",
            "Filter panels",
            "Detail sidebars",
            "Mobile menus",
        ),
        required=("content", "trigger"),
        optional=("title",),
        persona_fit={"technical": 0.75, "business": 0.7, "executive": 0.5},
        position=PreferredPosition.any,
        role=NarrativeRole.solution,
        animation="slideInRight",
    ),

    # Forms
    _component(
        "form-contact",
        "Form Contact",
        ComponentCategory.forms,
        "Contact form",
        use_cases=(
            "General inquiries",
            "Support requests",
            "Sales contact",
            "Feedback collection",
        ),
        required=("fields", "submitButton"),
        optional=("title", "description", "successMessage"),
        persona_fit={"technical": 0.6, "business": 0.85, "executive": 0.8},
        position=PreferredPosition.bottom,
        role=NarrativeRole.action,
    ),
    _component(
        "form-newsletter",
        "Form Newsletter",
        ComponentCategory.forms,
        "Newsletter signup form",
        use_cases=(
            "Email list building",
            "Content updates",
            "Blog subscriptions",
            "Product updates",
        ),
        required=("emailField", "submitButton"),
        optional=("title", "description", "privacyNote"),
        persona_fit={"technical": 0.6, "business": 0.8, "executive": 0.7},
        position=PreferredPosition.bottom,
        role=NarrativeRole.action,
        animation="slideUp",
    ),
    _component(
        "form-demo-request",
        "Form Demo Request",
        ComponentCategory.forms,
        "Demo/trial request form",
        use_cases=(
            "Product demos",
            "Free trials",
            "Consultation booking",
            "Sales qualified leads",
        ),
        required=("fields", "submitButton"),
        optional=("title", "benefits", "testimonial"),
        persona_fit={"technical": 0.75, "business": 0.95, "executive": 0.85},
        position=PreferredPosition.bottom,
        prefer_after=("features-grid", "pricing-cards"),
        role=NarrativeRole.action,
        animation="slideUp",
    ),
    _component(
        "form-multi-step",
        "Form Multi-Step",
        ComponentCategory.forms,
        "Multi-step wizard form",
        use_cases=(
            "Complex signups",
            "Onboarding flows",
            "Qualification forms",
            "Application forms",
        ),
        required=("steps",),
        optional=("title", "progressBar"),
        min_count={"steps": 2},
        max_count={"steps": 5},
        persona_fit={"technical": 0.7, "business": 0.85, "executive": 0.6},
        position=PreferredPosition.middle,
        role=NarrativeRole.action,
    ),
    _component(
        "form-inline",
        "Form Inline",
        ComponentCategory.forms,
        "Inline form element",
        use_cases=(
            "Quick actions",
            "Search bars",
            "Single-field forms",
            "Inline signups",
        ),
        required=("field", "submitButton"),
        optional=("placeholder",),
        persona_fit={"technical": 0.7, "business": 0.75, "executive": 0.7},
        position=PreferredPosition.any,
        role=NarrativeRole.action,
    ),
    _component(
        "form-survey",
        "Form Survey",
        ComponentCategory.forms,
        "Survey/feedback form",
        use_cases=(
            "Customer surveys",
            "Feedback collection",
            "Research forms",
            "Polls",
        ),
        required=("questions",),
        optional=("title", "description", "thankYouMessage"),
        min_count={"questions": 2},
        persona_fit={"technical": 0.6, "business": 0.8, "executive": 0.5},
        position=PreferredPosition.middle,
        role=NarrativeRole.action,
        animation="slideUp",
    ),

    # Navigation
    _component(
        "nav-header",
        "Navigation Header",
        ComponentCategory.navigation,
        "Main navigation header",
        use_cases=(
            "Site navigation",
            "Brand header",
            "Primary nav",
            "App header",
        ),
        required=("logo", "navigation"),
        optional=("cta", "search", "userMenu"),
        persona_fit={"technical": 0.7, "business": 0.7, "executive": 0.7},
        position=PreferredPosition.top,
        role=NarrativeRole.hook,
    ),
    _component(
        "nav-mega-menu",
        "Navigation Mega Menu",
        ComponentCategory.navigation,
        "Mega menu dropdown navigation",
        use_cases=(
            "Complex navigation",
            "Large sites",
            "Product categories",
            "Resource menus",
        ),
        required=("sections",),
        optional=("featured", "quickLinks"),
        min_count={"sections": 2},
        persona_fit={"technical": 0.75, "business": 0.8, "executive": 0.7},
        position=PreferredPosition.top,
        role=NarrativeRole.hook,
        animation="slideDown",
    ),
    _component(
        "nav-sidebar",
        "Navigation Sidebar",
        ComponentCategory.navigation,
        "Sidebar navigation",
        use_cases=(
            "Documentation",
            "App navigation",
            "Dashboard nav",
            "Settings menu",
        ),
        required=("items",),
        optional=("logo", "footer"),
        persona_fit={"technical": 0.9, "business": 0.6, "executive": 0.5},
        position=PreferredPosition.any,
        role=NarrativeRole.hook,
        animation="slideInLeft",
    ),
    _component(
        "nav-breadcrumb",
        "Navigation Breadcrumb",
        ComponentCategory.navigation,
        "Breadcrumb navigation",
        use_cases=(
            "Page hierarchy",
            "Navigation context",
            "Deep pages",
            "Category pages",
        ),
        required=("items",),
        optional=("separator",),
        min_count={"items": 2},
        persona_fit={"technical": 0.8, "business": 0.7, "executive": 0.6},
        position=PreferredPosition.top,
        prefer_after=("nav-header",),
        role=NarrativeRole.hook,
        animation="none",
    ),

    # Footer
    _component(
        "footer-standard",
        "Footer Standard",
        ComponentCategory.footer,
        "Standard site footer with links",
        use_cases=(
            "Main footer",
            "Site-wide footer",
            "Corporate footer",
            "Multi-column footer",
        ),
        required=("columns", "copyright"),
        optional=("logo", "newsletter", "social"),
        persona_fit={"technical": 0.7, "business": 0.7, "executive": 0.7},
        position=PreferredPosition.bottom,
        role=NarrativeRole.action,
    ),
    _component(
        "footer-minimal",
        "Footer Minimal",
        ComponentCategory.footer,
        "Minimal footer with essential links",
        use_cases=(
            "Simple pages",
            "Landing pages",
            "App footers",
            "Clean designs",
        ),
        required=("copyright",),
        optional=("links", "social"),
        persona_fit={"technical": 0.7, "business": 0.65, "executive": 0.7},
        position=PreferredPosition.bottom,
        role=NarrativeRole.action,
    ),
    _component(
        "footer-cta",
        "Footer CTA",
        ComponentCategory.footer,
        "Footer with prominent CTA",
        use_cases=(
            "Conversion-focused",
            "Newsletter signup",
            "Demo request",
            "Final push",
        ),
        required=("cta", "copyright"),
        optional=("headline", "subheadline", "links"),
        persona_fit={"technical": 0.6, "business": 0.85, "executive": 0.75},
        position=PreferredPosition.bottom,
        role=NarrativeRole.action,
        animation="slideUp",
    ),
    _component(
        "footer-sitemap",
        "Footer Sitemap",
        ComponentCategory.footer,
        "Comprehensive sitemap footer",
        use_cases=(
            "Large sites",
            "Enterprise sites",
            "SEO-focused",
            "Full navigation",
        ),
        required=("sections", "copyright"),
        optional=("logo", "social", "legal"),
        min_count={"sections": 4},
        persona_fit={"technical": 0.7, "business": 0.75, "executive": 0.7},
        position=PreferredPosition.bottom,
        role=NarrativeRole.action,
    ),
])


def get_component(
    component_id: str,
    *,
    catalog: Mapping[str, ComponentDefinition] = COMPONENT_DEFINITIONS,
) -> ComponentDefinition | None:
    return catalog.get(component_id)


def components_by_category(
    category: ComponentCategory | str,
    *,
    catalog: Mapping[str, ComponentDefinition] = COMPONENT_DEFINITIONS,
) -> list[ComponentDefinition]:
    category = ComponentCategory(category)
    return [definition for definition in catalog.values() if definition.category is category]


def components_by_narrative_role(
    role: NarrativeRole | str,
    *,
    catalog: Mapping[str, ComponentDefinition] = COMPONENT_DEFINITIONS,
) -> list[ComponentDefinition]:
    role = NarrativeRole(role)
    return [
        definition
        for definition in catalog.values()
        if definition.ai_metadata.narrative_role is role
    ]


def all_component_ids(
    *,
    catalog: Mapping[str, ComponentDefinition] = COMPONENT_DEFINITIONS,
) -> list[str]:
    return list(catalog.keys())


__all__ = [
    "COMPONENT_DEFINITIONS",
    "all_component_ids",
    "components_by_category",
    "components_by_narrative_role",
    "get_component",
]
