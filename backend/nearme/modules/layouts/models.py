from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class NavItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    href: str


class StatItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    label: str


class ConfigBundle(BaseModel):
    model_config = ConfigDict(frozen=True)

    category_key: str
    brand_name: str
    primary_color: str = 'blue-600'
    gradient_from: str = 'blue-500'
    gradient_to: str = 'blue-700'
    accent_color: str = 'blue-100'
    # Templates accept {category}, {category_lower}, {city} and {state}.
    hero_title: str
    hero_subtitle: str
    cta_text: str = 'Search'
    search_placeholder: str = 'Search by business name, service, or neighborhood...'
    search_tip: str = 'Try searching by business name, service, or neighborhood'
    show_location: bool = True
    nav_items: tuple[NavItem, ...] = Field(default_factory=tuple)
    stats: tuple[StatItem, ...] = Field(default_factory=tuple)
    popular_suggestions: tuple[str, ...] = Field(default_factory=tuple)


class HeroCopy(BaseModel):
    title: str
    subtitle: str
    cta_text: str
    search_placeholder: str
    search_tip: str
