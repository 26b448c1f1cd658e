"""FastAPI dependencies for authentication and services."""

import hmac
import logging
from typing import Annotated

from fastapi import Depends, HTTPException, Query, Request, status
from sqlalchemy.orm import Session

from shoplist.config import Settings, get_settings
from shoplist.database import get_db
from shoplist.services.availability import AvailabilityService
from shoplist.services.catalog import CatalogService
from shoplist.services.views import ViewComposer

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-API-Key"


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or missing API key",
    )


def require_api_key(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
    k: Annotated[str | None, Query(include_in_schema=False)] = None,
) -> None:
    """Reject the request unless it carries the configured API key.

    The key is read from the X-API-Key header, falling back to the ``k`` query
    parameter. With no key configured every request is rejected.
    """
    expected = (settings.api_key or "").strip()
    if not expected:
        logger.warning("Rejecting request: no API key is configured (API_KEY)")
        raise _unauthorized()

    provided = request.headers.get(API_KEY_HEADER)
    if not provided or not provided.strip():
        provided = k
    if not provided or not provided.strip():
        raise _unauthorized()

    if not hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8")):
        logger.warning(f"Rejecting request to {request.url.path}: API key mismatch")
        raise _unauthorized()


def get_catalog_service(
    db: Annotated[Session, Depends(get_db)],
) -> CatalogService:
    """Get catalog service with dependencies."""
    return CatalogService(db)


def get_availability_service(
    db: Annotated[Session, Depends(get_db)],
) -> AvailabilityService:
    """Get availability service with dependencies."""
    return AvailabilityService(db)


def get_view_composer(
    db: Annotated[Session, Depends(get_db)],
) -> ViewComposer:
    """Get view composer with dependencies."""
    return ViewComposer(db)
