"""Master list, buy list and category endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from shoplist.api.dependencies import get_view_composer, require_api_key
from shoplist.schemas.category import CategoryResponse
from shoplist.schemas.view import ShoppingViewsResponse
from shoplist.services.views import ViewComposer

router = APIRouter(prefix="/api", tags=["views"], dependencies=[Depends(require_api_key)])


@router.get("/views", response_model=ShoppingViewsResponse)
def get_views(
    view_composer: Annotated[ViewComposer, Depends(get_view_composer)],
):
    """Get categories, the master list and the buy list in one payload."""
    return ShoppingViewsResponse.model_validate(view_composer.build_views())


@router.get("/categories", response_model=list[CategoryResponse])
def get_categories(
    view_composer: Annotated[ViewComposer, Depends(get_view_composer)],
):
    """Get all categories ordered by name."""
    return [CategoryResponse.model_validate(c) for c in view_composer.list_categories()]
