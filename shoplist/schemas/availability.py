"""Availability schemas."""

from datetime import datetime

from pydantic import Field

from shoplist.schemas.base import CamelModel


class AvailabilityUpdate(CamelModel):
    """Set whether an item is in stock."""

    is_available: bool
    updated_by: str | None = Field(None, max_length=255)


class AvailabilityResponse(CamelModel):
    """Availability record after an update."""

    item_id: int
    is_available: bool
    updated_at: datetime
    updated_by: str
