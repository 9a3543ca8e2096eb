from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nearme.api.v1.router import api_router
from nearme.core.config import settings
from nearme.modules.layouts import LayoutSelector
from nearme.multitenancy.tenant_resolution import TenantResolver
from nearme.services.bootstrap_service import build_registries


logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()

    registries = build_registries(settings)
    layouts = LayoutSelector()
    missing = layouts.validate(registries.verticals.categories())
    if missing:
        logger.warning('%d vertical categories render with the generic layout', len(missing))

    app.state.registries = registries
    app.state.layouts = layouts
    app.state.resolver = TenantResolver(
        registries,
        root_domain=settings.ROOT_DOMAIN,
        extra_root_domains=settings.extra_root_domains,
    )

    yield


app = FastAPI(
    title='Near Me Directory Tenant API',
    version='0.1.0',
    openapi_url='/api/v1/openapi.json',
    docs_url='/api/v1/docs',
    redoc_url='/api/v1/redoc',
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

app.include_router(api_router, prefix='/api/v1')


@app.get('/')
def root() -> dict[str, str]:
    return {'service': 'near-me-tenant-api', 'status': 'running'}
