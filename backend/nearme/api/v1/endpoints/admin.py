import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from nearme.modules.layouts import LayoutSelector
from nearme.multitenancy.cities import CityStateEntry
from nearme.multitenancy.deps import get_layout_selector, get_registries, require_admin
from nearme.multitenancy.tenant_resolution import TenantRegistries
from nearme.multitenancy.verticals import VerticalEntry
from nearme.schemas.city import CityCreate, CityOut
from nearme.schemas.layout import LayoutValidationOut
from nearme.schemas.tenant import BlocklistOut, BlockRequest, VerticalCreate, VerticalOut


logger = logging.getLogger(__name__)

router = APIRouter(prefix='/admin', tags=['admin'], dependencies=[Depends(require_admin)])


@router.post('/cities', response_model=CityOut, status_code=status.HTTP_201_CREATED)
def register_city(payload: CityCreate, registries: TenantRegistries = Depends(get_registries)) -> CityOut:
    try:
        entry = registries.cities.register_city(
            CityStateEntry.create(payload.city, payload.state, payload.aliases)
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    logger.info('Registered city %s (%s) aliases=%s', entry.city, entry.state, list(entry.aliases))
    return CityOut.model_validate(entry)


@router.get('/verticals', response_model=list[VerticalOut])
def list_verticals(registries: TenantRegistries = Depends(get_registries)) -> list[VerticalOut]:
    return [VerticalOut.model_validate(entry) for entry in registries.verticals.entries()]


@router.post('/verticals', response_model=VerticalOut, status_code=status.HTTP_201_CREATED)
def register_vertical(payload: VerticalCreate, registries: TenantRegistries = Depends(get_registries)) -> VerticalOut:
    if registries.blocklist.is_blocked(payload.hostname):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail='Hostname is blocked')
    entry = registries.verticals.register_vertical(VerticalEntry(**payload.model_dump()))
    logger.info('Registered vertical %s -> %s (%s)', entry.hostname, entry.category, entry.kind.value)
    return VerticalOut.model_validate(entry)


@router.delete('/verticals/{hostname}', status_code=status.HTTP_204_NO_CONTENT)
def unregister_vertical(hostname: str, registries: TenantRegistries = Depends(get_registries)) -> Response:
    if not registries.verticals.unregister_vertical(hostname):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Vertical not found')
    logger.info('Removed vertical %s', hostname)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get('/blocklist', response_model=BlocklistOut)
def list_blocked(registries: TenantRegistries = Depends(get_registries)) -> BlocklistOut:
    return BlocklistOut(hosts=registries.blocklist.hosts())


@router.post('/blocklist', response_model=BlocklistOut, status_code=status.HTTP_201_CREATED)
def block_host(payload: BlockRequest, registries: TenantRegistries = Depends(get_registries)) -> BlocklistOut:
    host = registries.blocklist.block(payload.hostname)
    logger.info('Blocked host %s', host)
    return BlocklistOut(hosts=registries.blocklist.hosts())


@router.delete('/blocklist/{hostname}', status_code=status.HTTP_204_NO_CONTENT)
def unblock_host(hostname: str, registries: TenantRegistries = Depends(get_registries)) -> Response:
    if not registries.blocklist.unblock(hostname):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Host is not blocked')
    logger.info('Unblocked host %s', hostname)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get('/layouts/validation', response_model=LayoutValidationOut)
def validate_layouts(
    registries: TenantRegistries = Depends(get_registries),
    layouts: LayoutSelector = Depends(get_layout_selector),
) -> LayoutValidationOut:
    categories = registries.verticals.categories()
    return LayoutValidationOut(categories=categories, missing=layouts.validate(categories))
