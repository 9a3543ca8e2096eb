from pydantic import BaseModel

from nearme.multitenancy.verticals import LocationSource, VerticalKind
from nearme.schemas.common import BaseSchema
from nearme.schemas.types import Hostname, Slug


class TenantContextOut(BaseSchema):
    category: str
    raw_category: str
    category_label: str
    city: str | None
    raw_city: str | None
    city_label: str | None
    state: str
    kind: VerticalKind | None
    blocked: bool
    is_path_based: bool
    host: str


class VerticalOut(BaseSchema):
    hostname: str
    category: str
    label: str
    kind: VerticalKind
    location_source: LocationSource
    description: str


class VerticalCreate(BaseModel):
    hostname: Hostname
    category: Slug
    label: str
    kind: VerticalKind
    location_source: LocationSource = LocationSource.SUBDOMAIN
    description: str = ''


class BlockRequest(BaseModel):
    hostname: Hostname


class BlocklistOut(BaseModel):
    hosts: list[str]
