"""Business services for the shopping list."""

from shoplist.services.availability import AvailabilityService
from shoplist.services.catalog import CatalogService
from shoplist.services.views import ViewComposer

__all__ = [
    "AvailabilityService",
    "CatalogService",
    "ViewComposer",
]
