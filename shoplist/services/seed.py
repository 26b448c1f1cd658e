"""Startup seeding of the fixed category set."""

import logging

from sqlalchemy.orm import Session

from shoplist.repository import ShoppingRepository
from shoplist.services.base import storage_errors

logger = logging.getLogger(__name__)


def seed_categories(db: Session, names: list[str]) -> int:
    """Insert the given categories if none exist yet.

    Returns the number of categories inserted.
    """
    repository = ShoppingRepository(db)
    cleaned = [name.strip() for name in names if name and name.strip()]
    with storage_errors("seed categories"), repository.transaction():
        if repository.count_categories() > 0:
            return 0

        for name in cleaned:
            repository.insert_category(name)

    logger.info(f"Seeded {len(cleaned)} categories")
    return len(cleaned)
