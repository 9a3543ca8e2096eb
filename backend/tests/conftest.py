import os
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault('APP_ENV', 'test')
os.environ.setdefault('LOG_LEVEL', 'DEBUG')
os.environ.setdefault('ROOT_DOMAIN', 'near-me.us')
os.environ.setdefault('EXTRA_ROOT_DOMAINS', 'localhost')
os.environ.setdefault('ADMIN_API_TOKEN', 'test-admin-token-0123456789')
os.environ.setdefault('BLOCKED_REDIRECT_URL', 'https://services.near-me.us')

from nearme.core.config import get_settings
from nearme.main import app
from nearme.multitenancy.deps import admin_rate_limiter
from nearme.multitenancy.tenant_resolution import TenantRegistries, TenantResolver
from nearme.services.bootstrap_service import build_registries


ROOT = 'near-me.us'
ADMIN_TOKEN = os.environ['ADMIN_API_TOKEN']


@pytest.fixture()
def registries() -> TenantRegistries:
    return build_registries(get_settings())


@pytest.fixture()
def resolver(registries: TenantRegistries) -> TenantResolver:
    return TenantResolver(registries, root_domain=ROOT, extra_root_domains=['localhost'])


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    admin_rate_limiter.reset('testclient')
    with TestClient(app) as api_client:
        yield api_client
    admin_rate_limiter.reset('testclient')


def host_headers(host: str) -> dict[str, str]:
    return {'host': host}


def admin_headers(token: str = ADMIN_TOKEN, host: str = f'admin.{ROOT}') -> dict[str, str]:
    return {'X-Admin-Token': token, 'host': host}
