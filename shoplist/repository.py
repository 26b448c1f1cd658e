"""Persistence operations used by the services."""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime

from sqlalchemy import func
from sqlalchemy.orm import Session

from shoplist.errors import NotFoundError
from shoplist.models.availability import ItemAvailability
from shoplist.models.category import Category
from shoplist.models.item import Item


class ShoppingRepository:
    """Category, item and availability storage on top of a SQLAlchemy session.

    Write methods only add and flush. Callers own the transaction through
    ``transaction()``.
    """

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """Commit when the block succeeds, roll back on any failure."""
        try:
            yield self.db
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    # Categories

    def find_category_by_id(self, category_id: int) -> Category | None:
        return self.db.query(Category).filter(Category.id == category_id).first()

    def list_categories_ordered_by_name(self) -> list[Category]:
        return self.db.query(Category).order_by(Category.name, Category.id).all()

    def count_categories(self) -> int:
        return self.db.query(func.count(Category.id)).scalar() or 0

    def insert_category(self, name: str) -> Category:
        category = Category(name=name)
        self.db.add(category)
        self.db.flush()
        return category

    # Items

    def find_item_by_id(self, item_id: int) -> Item | None:
        return self.db.query(Item).filter(Item.id == item_id).first()

    def item_exists(self, category_id: int, normalized_name: str) -> bool:
        """Check for an item with this lowercase, trimmed name in the category."""
        query = self.db.query(Item.id).filter(
            Item.category_id == category_id,
            Item.normalized_name == normalized_name,
        )
        return self.db.query(query.exists()).scalar()

    def list_items_with_category(self) -> list[tuple[Item, Category | None]]:
        """All items with their category, ordered by category name then item name.

        An item whose category row is gone sorts as if the category name were empty.
        """
        return (
            self.db.query(Item, Category)
            .outerjoin(Category, Item.category_id == Category.id)
            .order_by(func.coalesce(Category.name, ""), Item.name, Item.id)
            .all()
        )

    def list_items_by_name_prefix(
        self, prefix: str, limit: int
    ) -> list[tuple[Item, Category | None]]:
        """Items whose lowercase name starts with ``prefix``, ordered by name."""
        return (
            self.db.query(Item, Category)
            .outerjoin(Category, Item.category_id == Category.id)
            .filter(Item.normalized_name.startswith(prefix, autoescape=True))
            .order_by(Item.name, Item.id)
            .limit(limit)
            .all()
        )

    def insert_item(self, name: str, category_id: int) -> Item:
        item = Item(name=name, normalized_name=name.lower(), category_id=category_id)
        self.db.add(item)
        self.db.flush()
        return item

    # Availability

    def find_availability_by_item_id(self, item_id: int) -> ItemAvailability | None:
        return self.db.get(ItemAvailability, item_id)

    def insert_availability(
        self, item_id: int, is_available: bool, updated_at: datetime, updated_by: str
    ) -> ItemAvailability:
        availability = ItemAvailability(
            item_id=item_id,
            is_available=is_available,
            updated_at=updated_at,
            updated_by=updated_by,
        )
        self.db.add(availability)
        self.db.flush()
        return availability

    def update_availability(
        self, item_id: int, is_available: bool, updated_at: datetime, updated_by: str
    ) -> ItemAvailability:
        availability = self.db.get(ItemAvailability, item_id)
        if availability is None:
            raise NotFoundError(f"No availability record for item {item_id}")

        # All three fields change together
        availability.is_available = is_available
        availability.updated_at = updated_at
        availability.updated_by = updated_by
        self.db.flush()
        return availability

    def list_all_availability(self) -> list[ItemAvailability]:
        return self.db.query(ItemAvailability).all()
