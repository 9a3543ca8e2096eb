from fastapi import APIRouter, Depends, Query

from nearme.multitenancy.deps import get_resolver, get_tenant_context
from nearme.multitenancy.tenant_resolution import TenantContext, TenantResolver
from nearme.schemas.tenant import TenantContextOut


router = APIRouter(prefix='/tenants', tags=['tenants'])


@router.get('/current', response_model=TenantContextOut)
def get_current_tenant(ctx: TenantContext = Depends(get_tenant_context)) -> TenantContextOut:
    return TenantContextOut.model_validate(ctx)


@router.get('/resolve', response_model=TenantContextOut)
def resolve_tenant(
    host: str = Query(min_length=1, max_length=255),
    path: str | None = Query(default=None, max_length=2048),
    resolver: TenantResolver = Depends(get_resolver),
) -> TenantContextOut:
    return TenantContextOut.model_validate(resolver.resolve(host, path))
