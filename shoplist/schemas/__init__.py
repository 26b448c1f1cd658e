"""Pydantic schemas for API requests and responses."""

from shoplist.schemas.availability import AvailabilityResponse, AvailabilityUpdate
from shoplist.schemas.category import CategoryResponse
from shoplist.schemas.item import (
    ItemCreate,
    ItemCreatedResponse,
    ItemSearchResponse,
    ItemSummaryResponse,
)
from shoplist.schemas.view import ItemViewResponse, ShoppingViewsResponse

__all__ = [
    "AvailabilityUpdate",
    "AvailabilityResponse",
    "CategoryResponse",
    "ItemCreate",
    "ItemCreatedResponse",
    "ItemSummaryResponse",
    "ItemSearchResponse",
    "ItemViewResponse",
    "ShoppingViewsResponse",
]
