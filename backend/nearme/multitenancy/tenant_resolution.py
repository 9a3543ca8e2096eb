from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from nearme.multitenancy.cities import CityStateRegistry
from nearme.multitenancy.hostname import ParsedHost, first_path_segment, parse_hostname
from nearme.multitenancy.seed_data import RESERVED_PATH_SEGMENTS
from nearme.multitenancy.verticals import Blocklist, LocationSource, VerticalEntry, VerticalKind, VerticalRegistry
from nearme.utils.text import slug_to_title


logger = logging.getLogger(__name__)

SERVICES_CATEGORY = 'services'
NATIONWIDE = 'Nationwide'


@dataclass(frozen=True)
class TenantContext:
    category: str = ''
    raw_category: str = ''
    city: str | None = None
    raw_city: str | None = None
    state: str = ''
    kind: VerticalKind | None = None
    blocked: bool = False
    host: str = ''
    vertical: VerticalEntry | None = field(default=None, compare=False, repr=False)

    @classmethod
    def blocked_context(cls, host: str = '') -> TenantContext:
        return cls(blocked=True, host=host)

    @property
    def category_label(self) -> str:
        if self.vertical is not None:
            return self.vertical.label
        return slug_to_title(self.category)

    @property
    def city_label(self) -> str | None:
        return slug_to_title(self.city) if self.city else None

    @property
    def is_path_based(self) -> bool:
        return self.vertical is not None and self.vertical.is_path_based


@dataclass
class TenantRegistries:
    cities: CityStateRegistry
    verticals: VerticalRegistry
    blocklist: Blocklist
    categories: list[str] = field(default_factory=list)

    def all_categories(self) -> list[str]:
        return sorted({*self.categories, *self.verticals.categories()})


class TenantResolver:
    """Turn a hostname (and path) into exactly one ``TenantContext``.

    Precedence, first match wins: blocklist, registered vertical, generic
    ``category.city`` pattern, then the services fallback.
    """

    def __init__(self, registries: TenantRegistries, root_domain: str, extra_root_domains: Iterable[str] = ()) -> None:
        self.registries = registries
        self.root_domain = root_domain.lower()
        self.extra_root_domains = tuple(domain.lower() for domain in extra_root_domains)

    def parse(self, hostname: str | None) -> ParsedHost:
        return parse_hostname(hostname, self.root_domain, self.extra_root_domains)

    def resolve(self, hostname: str | None, path: str | None = None) -> TenantContext:
        parsed = self.parse(hostname)
        context = self._resolve(parsed, path)
        logger.debug(
            'Resolved host=%r path=%r -> category=%s city=%s kind=%s blocked=%s',
            hostname,
            path,
            context.category,
            context.city,
            context.kind.value if context.kind else None,
            context.blocked,
        )
        return context

    def _resolve(self, parsed: ParsedHost, path: str | None) -> TenantContext:
        blocklist = self.registries.blocklist
        if blocklist.is_blocked(parsed.canonical_host) or blocklist.is_blocked(parsed.host):
            return TenantContext.blocked_context(parsed.canonical_host)

        vertical = self._find_vertical(parsed)
        if vertical is not None:
            return self._vertical_context(vertical, parsed, path)

        if len(parsed.labels) == 2:
            raw_category, raw_city = parsed.labels
            cities = self.registries.cities
            return TenantContext(
                category=raw_category,
                raw_category=raw_category,
                city=cities.canonical_city(raw_city) or raw_city,
                raw_city=raw_city,
                state=cities.lookup_state(raw_city),
                kind=None,
                host=parsed.canonical_host,
            )

        return TenantContext(
            category=SERVICES_CATEGORY,
            raw_category=parsed.category_label or '',
            state=NATIONWIDE,
            kind=VerticalKind.SERVICES,
            host=parsed.canonical_host,
        )

    def _find_vertical(self, parsed: ParsedHost) -> VerticalEntry | None:
        verticals = self.registries.verticals
        site_host = parsed.canonical_host
        if parsed.had_www:
            site_host = site_host.removeprefix('www.')
        candidates = [site_host, parsed.host.removeprefix('www.')]
        if parsed.category_label:
            candidates.append(f'{parsed.category_label}.{self.root_domain}')
        for candidate in candidates:
            vertical = verticals.find_vertical(candidate)
            if vertical is not None:
                return vertical
        return None

    def _vertical_context(self, vertical: VerticalEntry, parsed: ParsedHost, path: str | None) -> TenantContext:
        if vertical.location_source is LocationSource.PATH:
            raw_city = first_path_segment(path)
            if raw_city in RESERVED_PATH_SEGMENTS:
                raw_city = None
        else:
            raw_city = parsed.city_label

        if raw_city is None:
            city, state = None, NATIONWIDE
        else:
            cities = self.registries.cities
            city, state = cities.canonical_city(raw_city) or raw_city, cities.lookup_state(raw_city)

        return TenantContext(
            category=vertical.category,
            raw_category=parsed.category_label or vertical.category,
            city=city,
            raw_city=raw_city,
            state=state,
            kind=vertical.kind,
            host=parsed.canonical_host,
            vertical=vertical,
        )
