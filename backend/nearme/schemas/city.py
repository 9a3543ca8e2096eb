from pydantic import BaseModel, Field

from nearme.schemas.common import BaseSchema, PaginatedResponse
from nearme.schemas.types import Slug


class CityOut(BaseSchema):
    city: str
    state: str
    aliases: list[str] = Field(default_factory=list)


class CityListResponse(PaginatedResponse[CityOut]):
    pass


class CityCreate(BaseModel):
    city: Slug
    state: str = Field(min_length=2)
    aliases: list[Slug] = Field(default_factory=list)


class StateOut(BaseModel):
    abbreviation: str
    name: str
    city_count: int
