"""Availability service: per-item stock state and typeahead lookups."""

import logging
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.orm import Session

from shoplist.errors import NotFoundError
from shoplist.repository import ShoppingRepository
from shoplist.services.base import normalize_name, storage_errors, utcnow

logger = logging.getLogger(__name__)

ANONYMOUS_ACTOR = "anon"
DEFAULT_LIST_LIMIT = 10
MAX_LIST_LIMIT = 50


@dataclass
class AvailabilityState:
    """The full availability record after an update."""

    item_id: int
    is_available: bool
    updated_at: datetime
    updated_by: str


@dataclass
class ItemSummary:
    """An item as returned by name lookups."""

    id: int
    name: str
    category_name: str


def clamp_limit(limit: int | None) -> int:
    """Clamp a requested result size to 1..50, defaulting to 10."""
    if limit is None:
        return DEFAULT_LIST_LIMIT
    return max(1, min(limit, MAX_LIST_LIMIT))


class AvailabilityService:
    """Service for reading and toggling whether items are in stock."""

    def __init__(self, db: Session, repository: ShoppingRepository | None = None):
        self.db = db
        self.repository = repository or ShoppingRepository(db)

    def set_availability(
        self, item_id: int, is_available: bool, actor: str | None = None
    ) -> AvailabilityState:
        """Set an item's availability, creating its record first if it has none.

        ``is_available``, ``updated_at`` and ``updated_by`` are always written
        together. A blank actor is recorded as "anon".

        Raises:
            NotFoundError: the item does not exist.
            StorageError: the database rejected the write. Not retried.
        """
        if item_id <= 0:
            raise NotFoundError(f"Item {item_id} not found")

        updated_by = actor.strip() if actor and actor.strip() else ANONYMOUS_ACTOR

        now = utcnow()
        with storage_errors("update availability"), self.repository.transaction():
            if self.repository.find_item_by_id(item_id) is None:
                raise NotFoundError(f"Item {item_id} not found")

            if self.repository.find_availability_by_item_id(item_id) is None:
                logger.info(f"Item {item_id} has no availability record, creating one")
                self.repository.insert_availability(
                    item_id, is_available=False, updated_at=now, updated_by=updated_by
                )
            self.repository.update_availability(
                item_id, is_available=is_available, updated_at=now, updated_by=updated_by
            )

        logger.info(f"Item {item_id} availability set to {is_available} by {updated_by}")
        return AvailabilityState(
            item_id=item_id,
            is_available=is_available,
            updated_at=now,
            updated_by=updated_by,
        )

    def list_items(self, prefix: str | None = None, limit: int | None = None) -> list[ItemSummary]:
        """List items whose name starts with ``prefix`` (case-insensitive), by name."""
        key = normalize_name(prefix or "")
        with storage_errors("list items"):
            rows = self.repository.list_items_by_name_prefix(key, clamp_limit(limit))
            return [
                ItemSummary(
                    id=item.id,
                    name=item.name,
                    category_name=category.name if category else "",
                )
                for item, category in rows
            ]
