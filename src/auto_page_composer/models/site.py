from __future__ import annotations

from datetime import datetime
from typing import Any, Literal, Mapping, Sequence

from pydantic import BaseModel, Field

from .layout import PageLayout


class NavigationItem(BaseModel):
    id: str
    label: str
    href: str
    children: Sequence["NavigationItem"] | None = None
    highlight: bool | None = None


class NavigationCTA(BaseModel):
    label: str
    href: str
    variant: Literal["primary", "secondary", "outline"] = "primary"


class NavigationStructure(BaseModel):
    primary: Sequence[NavigationItem] = Field(default_factory=list)
    secondary: Sequence[NavigationItem] = Field(default_factory=list)
    footer: Sequence[NavigationItem] = Field(default_factory=list)
    cta: NavigationCTA | None = None


class GlobalComponent(BaseModel):
    id: str
    type: Literal["header", "footer", "announcement-bar", "cookie-banner", "chat-widget"]
    component_id: str
    content: Mapping[str, Any] = Field(default_factory=dict)
    visibility: Mapping[str, Any] = Field(default_factory=lambda: {"show_on": "all"})


class SiteArchitecture(BaseModel):
    website_id: str
    pages: Sequence[PageLayout]
    navigation: NavigationStructure
    global_components: Sequence[GlobalComponent]
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)


__all__ = [
    "GlobalComponent",
    "NavigationCTA",
    "NavigationItem",
    "NavigationStructure",
    "SiteArchitecture",
]
