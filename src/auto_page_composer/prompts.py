from __future__ import annotations

import json
from typing import Any, Mapping, Sequence

from .dictionaries import PageTypeConfig
from .models.component import ComponentDefinition, NarrativeRole
from .models.layout import LayoutConstraints
from .models.workspace import BrandConfig, Persona

SYSTEM_PROMPT = "You are an expert web page layout generator. Always respond with valid JSON."

RESPONSE_SHAPE = """{
  "sections": [
    {
      "componentId": "component-name",
      "narrativeRole": "hook|problem|solution|proof|action",
      "contentMapping": { "contentKey": "componentProp" },
      "reasoning": "Why this component was selected"
    }
  ],
  "metadata": {
    "title": "Page title for SEO",
    "description": "Meta description",
    "keywords": ["keyword1", "keyword2"]
  }
}"""


def build_layout_prompt(
    *,
    page_config: PageTypeConfig,
    available_content: Mapping[str, Any],
    story_flow: Sequence[NarrativeRole],
    personas: Sequence[Persona],
    brand_config: BrandConfig | None,
    catalog: Mapping[str, ComponentDefinition],
    constraints: LayoutConstraints | None = None,
) -> str:
    component_lines = "\n".join(
        f"- {component.id} ({component.category.value}, {component.ai_metadata.narrative_role.value}):"
        f" requires {', '.join(component.ai_metadata.content_requirements.required) or 'nothing'}"
        for component in catalog.values()
    )
    persona_lines = "\n".join(
        f"- {persona.name}: {persona.communication_style or 'general'} style, "
        f"goals: {', '.join(persona.goals) or 'unspecified'}"
        for persona in personas
    ) or "- General audience"
    if brand_config:
        voice = brand_config.voice
        brand_voice = f"Tone: {voice.tone or 'unspecified'}, Formality: {voice.formality or 'unspecified'}"
        if voice.personality:
            brand_voice += f", Personality: {', '.join(voice.personality)}"
    else:
        brand_voice = "Professional, modern"
    constraint_text = (
        json.dumps(constraints.model_dump(exclude_none=True), ensure_ascii=False)
        if constraints
        else "None"
    )

    return f"""You are an expert web page layout generator. Generate a layout for a {page_config.type.value} page.

## Available Components
{component_lines}

## Page Configuration
- Type: {page_config.type.value}
- Name: {page_config.name}
- Description: {page_config.description}
- Required sections: {', '.join(role.value for role in page_config.required_sections) or 'none'}
- Min sections: {page_config.min_sections}
- Max sections: {page_config.max_sections}
- Recommended components: {', '.join(page_config.recommended_components) or 'none'}

## Storytelling Flow
Follow this narrative structure: {' → '.join(role.value for role in story_flow)}

## Available Content
{json.dumps(available_content, ensure_ascii=False, indent=2, default=str)}

## Target Personas
{persona_lines}

## Brand Voice
{brand_voice}

## Constraints
{constraint_text}

## Instructions
1. Select the most appropriate components for each narrative stage
2. Map available content to component requirements
3. Ensure visual variety (never use the same component twice)
4. Follow the storytelling flow strictly
5. Consider persona preferences for component selection

Return a JSON object with:
{RESPONSE_SHAPE}
"""


__all__ = ["RESPONSE_SHAPE", "SYSTEM_PROMPT", "build_layout_prompt"]
