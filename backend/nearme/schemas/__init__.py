from nearme.schemas.city import CityCreate, CityListResponse, CityOut, StateOut
from nearme.schemas.layout import LayoutOut, LayoutValidationOut
from nearme.schemas.seo import PageMetaOut, TenantLinkListResponse, TenantLinkOut
from nearme.schemas.tenant import BlocklistOut, BlockRequest, TenantContextOut, VerticalCreate, VerticalOut

__all__ = [
    'BlockRequest',
    'BlocklistOut',
    'CityCreate',
    'CityListResponse',
    'CityOut',
    'LayoutOut',
    'LayoutValidationOut',
    'PageMetaOut',
    'StateOut',
    'TenantContextOut',
    'TenantLinkListResponse',
    'TenantLinkOut',
    'VerticalCreate',
    'VerticalOut',
]
