from fastapi import APIRouter

from nearme.api.v1.endpoints import (
    admin,
    cities,
    health,
    layouts,
    seo,
    tenants,
)


api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(tenants.router)
api_router.include_router(layouts.router)
api_router.include_router(seo.router)
api_router.include_router(cities.router)
api_router.include_router(admin.router)
