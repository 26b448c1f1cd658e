"""Item API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from shoplist.api.dependencies import (
    get_availability_service,
    get_catalog_service,
    require_api_key,
)
from shoplist.schemas.item import (
    ItemCreate,
    ItemCreatedResponse,
    ItemSearchResponse,
    ItemSummaryResponse,
)
from shoplist.services.availability import AvailabilityService
from shoplist.services.catalog import CatalogService

router = APIRouter(prefix="/api", tags=["items"], dependencies=[Depends(require_api_key)])


@router.get("/items", response_model=ItemSearchResponse)
def search_items(
    availability_service: Annotated[AvailabilityService, Depends(get_availability_service)],
    prefix: str | None = Query(default=None, description="Case-insensitive name prefix"),
    limit: int | None = Query(default=None, description="Maximum results, clamped to 1..50"),
):
    """Suggest existing items whose name starts with the prefix."""
    if prefix is None or not prefix.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="prefix is required")

    items = availability_service.list_items(prefix, limit)
    return ItemSearchResponse(
        exists=len(items) > 0,
        items=[
            ItemSummaryResponse(id=item.id, name=item.name, category=item.category_name)
            for item in items
        ],
    )


@router.post("/items", response_model=ItemCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_item(
    item_data: ItemCreate,
    response: Response,
    catalog_service: Annotated[CatalogService, Depends(get_catalog_service)],
):
    """Add a new master item. It starts out on the buy list."""
    created = catalog_service.create_item(
        item_data.name, item_data.category_id, actor=item_data.created_by
    )
    response.headers["Location"] = f"/api/items/{created.id}"
    return ItemCreatedResponse(
        id=created.id,
        name=created.name,
        category_id=created.category_id,
        category=created.category_name,
        availability_updated_at=created.availability_updated_at,
    )
