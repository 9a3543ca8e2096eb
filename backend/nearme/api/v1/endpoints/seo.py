from fastapi import APIRouter, Depends, Query, Request

from nearme.multitenancy.deps import get_registries, get_resolver, get_tenant_context
from nearme.multitenancy.tenant_resolution import TenantContext, TenantRegistries, TenantResolver
from nearme.schemas.common import page_window
from nearme.schemas.seo import PageMetaOut, TenantLinkListResponse, TenantLinkOut
from nearme.services import directory_service, seo_service


router = APIRouter(tags=['seo'])


@router.get('/seo/current', response_model=PageMetaOut)
def get_page_meta(
    request: Request,
    ctx: TenantContext = Depends(get_tenant_context),
    resolver: TenantResolver = Depends(get_resolver),
) -> PageMetaOut:
    meta = seo_service.build_page_meta(ctx, scheme=request.url.scheme, root_domain=resolver.root_domain)
    return PageMetaOut.model_validate(meta)


@router.get('/directory/hostnames', response_model=TenantLinkListResponse)
def list_tenant_links(
    category: str | None = Query(default=None),
    page: int = Query(default=1, ge=1),
    page_size: int = Query(default=100, ge=1, le=1000),
    registries: TenantRegistries = Depends(get_registries),
    resolver: TenantResolver = Depends(get_resolver),
) -> TenantLinkListResponse:
    links = directory_service.tenant_links(registries, resolver.root_domain)
    if category:
        links = [link for link in links if link.category == category.strip().lower()]
    window, meta = page_window(links, page, page_size)
    return TenantLinkListResponse(items=[TenantLinkOut.model_validate(link) for link in window], meta=meta)
