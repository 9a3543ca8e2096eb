from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from nearme.core.config import Settings
from nearme.multitenancy.cities import CityStateEntry, CityStateRegistry
from nearme.multitenancy.seed_data import BLOCKED_LABELS, SERVICE_CATEGORIES, VERTICAL_SEED, city_entries
from nearme.multitenancy.tenant_resolution import TenantRegistries
from nearme.multitenancy.verticals import Blocklist, LocationSource, VerticalEntry, VerticalKind, VerticalRegistry


logger = logging.getLogger(__name__)


class RegistrySeedError(RuntimeError):
    pass


class CitySeed(BaseModel):
    city: str = Field(min_length=1)
    state: str = Field(min_length=1)
    aliases: list[str] = Field(default_factory=list)


class VerticalSeed(BaseModel):
    hostname: str = Field(min_length=1)
    category: str = Field(min_length=1)
    label: str = Field(min_length=1)
    kind: VerticalKind
    location_source: LocationSource = LocationSource.SUBDOMAIN
    description: str = ''


class RegistrySeedFile(BaseModel):
    cities: list[CitySeed] = Field(default_factory=list)
    verticals: list[VerticalSeed] = Field(default_factory=list)
    blocked: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)


def default_verticals(root_domain: str) -> list[VerticalEntry]:
    return [
        VerticalEntry(
            hostname=f'{label}.{root_domain}',
            category=category,
            label=display,
            kind=kind,
            location_source=source,
            description=description,
        )
        for label, category, display, kind, source, description in VERTICAL_SEED
    ]


def default_blocked_hosts(root_domain: str) -> list[str]:
    return [f'{label}.{root_domain}' for label in BLOCKED_LABELS]


def load_seed_file(path: str | Path) -> RegistrySeedFile:
    seed_path = Path(path)
    try:
        payload: Any = json.loads(seed_path.read_text(encoding='utf-8'))
    except (OSError, json.JSONDecodeError) as exc:
        raise RegistrySeedError(f'Cannot read registry seed file {seed_path}: {exc}') from exc
    try:
        return RegistrySeedFile.model_validate(payload)
    except ValidationError as exc:
        raise RegistrySeedError(f'Invalid registry seed file {seed_path}: {exc}') from exc


def apply_seed(registries: TenantRegistries, seed: RegistrySeedFile) -> None:
    try:
        for city in seed.cities:
            registries.cities.register_city(CityStateEntry.create(city.city, city.state, city.aliases))
    except ValueError as exc:
        raise RegistrySeedError(f'Conflicting city seed: {exc}') from exc

    for vertical in seed.verticals:
        registries.verticals.register_vertical(VerticalEntry(**vertical.model_dump()))
    for host in seed.blocked:
        registries.blocklist.block(host)
    for category in seed.categories:
        slug = category.strip().lower()
        if slug and slug not in registries.categories:
            registries.categories.append(slug)


def build_registries(settings: Settings) -> TenantRegistries:
    root_domain = settings.ROOT_DOMAIN
    registries = TenantRegistries(
        cities=CityStateRegistry(city_entries()),
        verticals=VerticalRegistry(default_verticals(root_domain)),
        blocklist=Blocklist([*default_blocked_hosts(root_domain), *settings.extra_blocked_hosts]),
        categories=list(SERVICE_CATEGORIES),
    )

    if settings.REGISTRY_SEED_PATH:
        apply_seed(registries, load_seed_file(settings.REGISTRY_SEED_PATH))
        logger.info('Applied registry seed file %s', settings.REGISTRY_SEED_PATH)

    logger.info(
        'Tenant registries ready: %d cities, %d verticals, %d blocked hosts, %d categories',
        len(registries.cities),
        len(registries.verticals),
        len(registries.blocklist),
        len(registries.categories),
    )
    return registries
