"""Catalog service: validated creation of master items."""

import logging
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.orm import Session

from shoplist.errors import ConflictError, ValidationError
from shoplist.models.item import ITEM_NAME_MAX_LENGTH
from shoplist.repository import ShoppingRepository
from shoplist.services.base import normalize_name, storage_errors, utcnow

logger = logging.getLogger(__name__)

SYSTEM_ACTOR = "system"


@dataclass
class CreatedItem:
    """A newly created item, ready to display without a re-read."""

    id: int
    name: str
    category_id: int
    category_name: str
    availability_updated_at: datetime


class CatalogService:
    """Service for adding items to the master catalog."""

    def __init__(self, db: Session, repository: ShoppingRepository | None = None):
        self.db = db
        self.repository = repository or ShoppingRepository(db)

    def create_item(
        self, name: str | None, category_id: int | None, actor: str | None = None
    ) -> CreatedItem:
        """Create a master item together with its initial availability row.

        Checks run in this order: field validation, duplicate name within the
        category (case-insensitive, trimmed), then category existence. The item
        starts out unavailable so it shows up on the buy list immediately.

        Raises:
            ValidationError: invalid fields or unknown category.
            ConflictError: the category already holds an item with this name.
            StorageError: the database failed either insert.
        """
        self._validate(name, category_id)
        display_name = name.strip()
        normalized = normalize_name(display_name)

        updated_by = actor.strip() if actor and actor.strip() else SYSTEM_ACTOR
        now = utcnow()
        with storage_errors("create item"), self.repository.transaction():
            if self.repository.item_exists(category_id, normalized):
                raise ConflictError("item already exists in this category")

            category = self.repository.find_category_by_id(category_id)
            if category is None:
                raise ValidationError(["selected category does not exist"])

            item = self.repository.insert_item(display_name, category_id)
            self.repository.insert_availability(
                item.id, is_available=False, updated_at=now, updated_by=updated_by
            )
            created = CreatedItem(
                id=item.id,
                name=item.name,
                category_id=category.id,
                category_name=category.name,
                availability_updated_at=now,
            )

        logger.info(
            f"Created item {created.id} '{created.name}' in category '{created.category_name}'"
        )
        return created

    @staticmethod
    def _validate(name: str | None, category_id: int | None) -> None:
        errors = []
        if name is None or not name.strip():
            errors.append("name is required")
        elif len(name.strip()) > ITEM_NAME_MAX_LENGTH:
            errors.append(f"name must be at most {ITEM_NAME_MAX_LENGTH} characters")

        if category_id is None:
            errors.append("categoryId is required")
        elif category_id <= 0:
            errors.append("categoryId must be a positive integer")

        if errors:
            raise ValidationError(errors)
