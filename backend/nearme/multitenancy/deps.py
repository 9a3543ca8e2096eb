from __future__ import annotations

import logging
import secrets

from fastapi import Depends, Header, HTTPException, Request, status

from nearme.core.config import settings
from nearme.modules.layouts import LayoutSelector
from nearme.multitenancy.hostname import normalize_host
from nearme.multitenancy.tenant_resolution import TenantContext, TenantRegistries, TenantResolver
from nearme.utils.rate_limit import SimpleRateLimiter


logger = logging.getLogger(__name__)

admin_rate_limiter = SimpleRateLimiter(max_requests=10, window_seconds=60)


def _get_host(request: Request) -> str | None:
    host = request.headers.get('x-forwarded-host') if settings.TRUST_PROXY_HEADERS else None
    if host:
        return host.split(',')[0].strip()
    return request.headers.get('host')


def get_registries(request: Request) -> TenantRegistries:
    return request.app.state.registries


def get_resolver(request: Request) -> TenantResolver:
    return request.app.state.resolver


def get_layout_selector(request: Request) -> LayoutSelector:
    return request.app.state.layouts


def resolve_request(request: Request, resolver: TenantResolver = Depends(get_resolver)) -> TenantContext:
    # The API is called on behalf of a page; `path` carries that page's URL path.
    path = request.query_params.get('path')
    return resolver.resolve(_get_host(request), path)


def get_tenant_context(ctx: TenantContext = Depends(resolve_request)) -> TenantContext:
    if ctx.blocked:
        # Blocked hosts never render; send the visitor to the public directory instead.
        raise HTTPException(
            status_code=status.HTTP_307_TEMPORARY_REDIRECT,
            detail='Host is reserved',
            headers={'Location': settings.BLOCKED_REDIRECT_URL},
        )
    return ctx


def require_admin(request: Request, x_admin_token: str | None = Header(default=None)) -> None:
    if not settings.ADMIN_API_TOKEN:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Not Found')

    if settings.APP_ENV == 'production' and normalize_host(_get_host(request)) != settings.admin_host:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Not a product admin host')

    client_ip = request.client.host if request.client else 'unknown'
    if not admin_rate_limiter.remaining(client_ip):
        raise HTTPException(status_code=status.HTTP_429_TOO_MANY_REQUESTS, detail='Too many admin attempts')

    if x_admin_token and secrets.compare_digest(x_admin_token, settings.ADMIN_API_TOKEN):
        admin_rate_limiter.reset(client_ip)
        return

    if not admin_rate_limiter.hit(client_ip):
        raise HTTPException(status_code=status.HTTP_429_TOO_MANY_REQUESTS, detail='Too many admin attempts')
    logger.warning('Rejected admin token from %s', client_ip)
    raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail='Invalid admin token')
