from pydantic import Field

from nearme.schemas.common import BaseSchema, PaginatedResponse


class PageMetaOut(BaseSchema):
    title: str
    description: str
    keywords: list[str] = Field(default_factory=list)
    canonical_url: str | None = None


class TenantLinkOut(BaseSchema):
    category: str
    city: str
    host: str
    path: str
    url: str


class TenantLinkListResponse(PaginatedResponse[TenantLinkOut]):
    pass
