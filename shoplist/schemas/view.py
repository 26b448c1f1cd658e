"""Master list and buy list schemas."""

from datetime import datetime

from shoplist.schemas.base import CamelModel
from shoplist.schemas.category import CategoryResponse


class ItemViewResponse(CamelModel):
    """One row of the master list or buy list."""

    id: int
    name: str
    category_name: str
    is_available: bool
    last_updated: datetime | None
    updated_by: str | None


class ShoppingViewsResponse(CamelModel):
    """Categories, every master item, and the items that need buying."""

    categories: list[CategoryResponse]
    master_items: list[ItemViewResponse]
    buy_list: list[ItemViewResponse]
