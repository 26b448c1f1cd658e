"""Item schemas."""

from datetime import datetime

from pydantic import Field

from shoplist.schemas.base import CamelModel


class ItemCreate(CamelModel):
    """Create a new master item.

    Fields are optional here so the catalog service can report every
    missing or invalid field at once.
    """

    name: str | None = None
    category_id: int | None = None
    created_by: str | None = Field(None, max_length=255)


class ItemCreatedResponse(CamelModel):
    """A created item with its category name and initial availability timestamp."""

    id: int
    name: str
    category_id: int
    category: str
    availability_updated_at: datetime


class ItemSummaryResponse(CamelModel):
    """Item as returned by name lookups."""

    id: int
    name: str
    category: str


class ItemSearchResponse(CamelModel):
    """Result of a prefix lookup."""

    exists: bool
    items: list[ItemSummaryResponse]
