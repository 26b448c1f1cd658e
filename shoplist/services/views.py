"""Composition of the master list and buy list views."""

from dataclasses import dataclass, field
from datetime import datetime

from sqlalchemy.orm import Session

from shoplist.models.category import Category
from shoplist.repository import ShoppingRepository
from shoplist.services.base import storage_errors


@dataclass
class ItemView:
    """One display row: an item joined with its category and availability."""

    id: int
    name: str
    category_name: str
    is_available: bool
    last_updated: datetime | None
    updated_by: str | None


@dataclass
class ShoppingViews:
    categories: list[Category] = field(default_factory=list)
    master_items: list[ItemView] = field(default_factory=list)
    buy_list: list[ItemView] = field(default_factory=list)


class ViewComposer:
    """Builds the master and buy lists from items, categories and availability."""

    def __init__(self, db: Session, repository: ShoppingRepository | None = None):
        self.db = db
        self.repository = repository or ShoppingRepository(db)

    def build_views(self) -> ShoppingViews:
        """Join every item with its availability and split out what needs buying.

        Items without an availability record count as unavailable, so they are
        on the buy list. The buy list keeps the master list's order.
        """
        with storage_errors("build views"):
            categories = self.repository.list_categories_ordered_by_name()
            rows = self.repository.list_items_with_category()
            availability = {a.item_id: a for a in self.repository.list_all_availability()}

        master_items = []
        for item, category in rows:
            record = availability.get(item.id)
            master_items.append(
                ItemView(
                    id=item.id,
                    name=item.name,
                    category_name=category.name if category else "",
                    is_available=record.is_available if record else False,
                    last_updated=record.updated_at if record else None,
                    updated_by=record.updated_by if record else None,
                )
            )

        buy_list = [row for row in master_items if not row.is_available]
        return ShoppingViews(categories=categories, master_items=master_items, buy_list=buy_list)

    def list_categories(self) -> list[Category]:
        """All categories ordered by name."""
        with storage_errors("list categories"):
            return self.repository.list_categories_ordered_by_name()
