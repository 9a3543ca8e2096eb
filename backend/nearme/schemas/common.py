from collections.abc import Sequence
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class PaginationMeta(BaseModel):
    page: int
    page_size: int
    total: int


T = TypeVar('T')


class PaginatedResponse(BaseModel, Generic[T]):
    items: list[T]
    meta: PaginationMeta


def page_window(items: Sequence[T], page: int, page_size: int) -> tuple[list[T], PaginationMeta]:
    """Slice one 1-based page out of ``items`` (already in display order)."""
    start = (page - 1) * page_size
    return list(items[start : start + page_size]), PaginationMeta(page=page, page_size=page_size, total=len(items))
