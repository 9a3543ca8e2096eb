from fastapi import APIRouter, Depends, HTTPException, Query, status

from nearme.multitenancy.deps import get_registries
from nearme.multitenancy.states import STATE_NAMES
from nearme.multitenancy.tenant_resolution import TenantRegistries
from nearme.schemas.city import CityListResponse, CityOut, StateOut
from nearme.schemas.common import page_window


router = APIRouter(tags=['cities'])


@router.get('/cities', response_model=CityListResponse)
def list_cities(
    state: str | None = Query(default=None),
    q: str | None = Query(default=None, max_length=100),
    page: int = Query(default=1, ge=1),
    page_size: int = Query(default=50, ge=1, le=500),
    registries: TenantRegistries = Depends(get_registries),
) -> CityListResponse:
    cities = registries.cities
    entries = cities.search_cities(q) if q else list(cities)
    if state:
        in_state = set(cities.cities_for_state(state))
        entries = [entry for entry in entries if entry.city in in_state]
    entries = sorted(entries, key=lambda entry: entry.city)

    window, meta = page_window(entries, page, page_size)
    return CityListResponse(items=[CityOut.model_validate(entry) for entry in window], meta=meta)


@router.get('/cities/{city}', response_model=CityOut)
def get_city(city: str, registries: TenantRegistries = Depends(get_registries)) -> CityOut:
    entry = registries.cities.get_entry(city)
    if not entry:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='City not found')
    return CityOut.model_validate(entry)


@router.get('/states', response_model=list[StateOut])
def list_states(registries: TenantRegistries = Depends(get_registries)) -> list[StateOut]:
    abbreviations = {name: abbr for abbr, name in STATE_NAMES.items()}
    return [
        StateOut(
            abbreviation=abbreviations.get(state, state),
            name=state,
            city_count=len(registries.cities.cities_for_state(state)),
        )
        for state in registries.cities.all_states()
    ]
