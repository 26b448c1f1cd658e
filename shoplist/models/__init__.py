"""SQLAlchemy models."""

from shoplist.models.availability import ItemAvailability
from shoplist.models.category import Category
from shoplist.models.item import Item

__all__ = [
    "Category",
    "Item",
    "ItemAvailability",
]
