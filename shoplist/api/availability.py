"""Availability API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from shoplist.api.dependencies import get_availability_service, require_api_key
from shoplist.schemas.availability import AvailabilityResponse, AvailabilityUpdate
from shoplist.services.availability import AvailabilityService

router = APIRouter(prefix="/api", tags=["availability"], dependencies=[Depends(require_api_key)])


@router.api_route(
    "/availability/{item_id}", methods=["PATCH", "POST"], response_model=AvailabilityResponse
)
def set_availability(
    item_id: int,
    update: AvailabilityUpdate,
    availability_service: Annotated[AvailabilityService, Depends(get_availability_service)],
):
    """Mark an item as in stock or as needing to be bought."""
    state = availability_service.set_availability(
        item_id, update.is_available, actor=update.updated_by
    )
    return AvailabilityResponse.model_validate(state)
