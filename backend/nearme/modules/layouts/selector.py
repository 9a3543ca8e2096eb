from __future__ import annotations

import logging
from collections.abc import Iterable

from nearme.modules.layouts.bundles import BUILTIN_BUNDLES, BUSINESS_BUNDLE
from nearme.modules.layouts.models import ConfigBundle, HeroCopy
from nearme.multitenancy.cities import UNKNOWN_STATE
from nearme.multitenancy.tenant_resolution import NATIONWIDE, TenantContext


logger = logging.getLogger(__name__)


class LayoutSelector:
    def __init__(self, bundles: Iterable[ConfigBundle] = BUILTIN_BUNDLES, default: ConfigBundle = BUSINESS_BUNDLE) -> None:
        self.default = default
        self._bundles = {bundle.category_key: bundle for bundle in bundles}

    def select(self, category: str | None) -> ConfigBundle:
        if not category:
            return self.default
        return self._bundles.get(category.strip().lower(), self.default)

    def has_dedicated(self, category: str) -> bool:
        return category.strip().lower() in self._bundles

    def categories(self) -> list[str]:
        return sorted(self._bundles)

    def validate(self, categories: Iterable[str]) -> list[str]:
        """Log and return the referenced categories that fall back to the default bundle."""
        missing: list[str] = []
        for category in sorted(set(categories)):
            if not self.has_dedicated(category):
                logger.warning('No dedicated layout bundle for category %r; using %r', category, self.default.category_key)
                missing.append(category)
        return missing


def _fill(template: str, values: dict[str, str]) -> str:
    if not values['state']:
        # 'in {city}, {state}' collapses to 'in {city}' for Nationwide and Unknown State.
        template = template.replace('{city}, {state}', '{city}')
    return template.format_map(values)


def render_hero(bundle: ConfigBundle, ctx: TenantContext) -> HeroCopy:
    category = ctx.category_label
    values = {
        'category': category,
        'category_lower': category.lower(),
        'city': ctx.city_label or 'Your Area',
        'state': ctx.state if ctx.state not in ('', NATIONWIDE, UNKNOWN_STATE) else '',
    }
    return HeroCopy(
        title=_fill(bundle.hero_title, values),
        subtitle=_fill(bundle.hero_subtitle, values),
        cta_text=bundle.cta_text,
        search_placeholder=bundle.search_placeholder,
        search_tip=bundle.search_tip,
    )
