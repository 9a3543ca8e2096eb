from __future__ import annotations

from dataclasses import dataclass, field

from nearme.multitenancy.cities import UNKNOWN_STATE
from nearme.multitenancy.tenant_resolution import NATIONWIDE, TenantContext
from nearme.services.directory_service import tenant_hostname
from nearme.utils.text import slug_to_words


@dataclass(frozen=True)
class PageMeta:
    title: str
    description: str
    keywords: list[str] = field(default_factory=list)
    canonical_url: str | None = None


def generate_title(category: str, city: str, state: str) -> str:
    return f'Best {category} in {city}, {state}'


def build_keywords(category_slug: str, city_slug: str | None = None) -> list[str]:
    category = slug_to_words(category_slug).lower()
    keywords = [
        category,
        f'{category} near me',
        f'best {category}',
        f'local {category}',
        f'{category} directory',
        f'{category} reviews',
    ]
    if city_slug:
        city = slug_to_words(city_slug).lower()
        keywords.extend([f'{category} {city}', f'{category} in {city}', f'{city} {category}'])
    return keywords


def build_page_meta(ctx: TenantContext, scheme: str = 'https', root_domain: str | None = None) -> PageMeta:
    if ctx.blocked:
        raise ValueError('Blocked tenants have no page metadata')

    category = ctx.category_label
    category_words = category.lower()
    city = ctx.city_label
    if city:
        state = ctx.state if ctx.state not in ('', NATIONWIDE, UNKNOWN_STATE) else ''
        title = generate_title(category, city, state) if state else f'Best {category} in {city}'
        location = f'{city}, {state}' if state else city
        description = (
            f'Discover the best {category_words} in {location}. Read reviews, get directions, '
            f'and find the perfect {category_words} near you.'
        )
    else:
        title = f'Best {category} | Find Local {category} Near You'
        description = (
            f'Discover the best {category_words} in your area. Read reviews, get directions, '
            f'and find the perfect {category_words} near you.'
        )

    return PageMeta(
        title=title,
        description=description,
        keywords=build_keywords(ctx.category, ctx.city),
        canonical_url=build_canonical_url(ctx, scheme, root_domain),
    )


def build_canonical_url(ctx: TenantContext, scheme: str = 'https', root_domain: str | None = None) -> str | None:
    """One URL per tenant: alias hosts such as ``nail-salons.nyc`` point at the canonical city."""
    if not ctx.host:
        return None
    if ctx.vertical is None and ctx.city and root_domain:
        return f'{scheme}://{tenant_hostname(ctx.category, ctx.city, root_domain)}'
    if ctx.is_path_based and ctx.city:
        return f'{scheme}://{ctx.host}/{ctx.city}'
    return f'{scheme}://{ctx.host}'
