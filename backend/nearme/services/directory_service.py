from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from nearme.multitenancy.tenant_resolution import TenantRegistries


@dataclass(frozen=True)
class TenantLink:
    category: str
    city: str
    host: str
    path: str = '/'

    @property
    def url(self) -> str:
        return f'https://{self.host}{self.path}'


def known_combinations(categories: Iterable[str], cities: Iterable[str]) -> list[tuple[str, str]]:
    city_keys = sorted(set(cities))
    return [(category, city) for category in sorted(set(categories)) for city in city_keys]


def tenant_hostname(category: str, city: str, root_domain: str) -> str:
    return f'{category}.{city}.{root_domain}'


def tenant_links(registries: TenantRegistries, root_domain: str) -> list[TenantLink]:
    """Every crawlable ``(category, city)`` page.

    Path-based verticals serve cities below their own hostname; everything
    else uses the ``category.city.root`` form.
    """
    path_verticals = {
        entry.category: entry for entry in registries.verticals.entries() if entry.is_path_based
    }
    links: list[TenantLink] = []
    for category, city in known_combinations(registries.all_categories(), registries.cities.all_cities()):
        vertical = path_verticals.get(category)
        if vertical is not None:
            links.append(TenantLink(category=category, city=city, host=vertical.hostname, path=f'/{city}'))
        else:
            links.append(TenantLink(category=category, city=city, host=tenant_hostname(category, city, root_domain)))
    return links
