"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shoplist.api import availability, items, views
from shoplist.api.errors import register_error_handlers
from shoplist.config import get_settings
from shoplist.database import SessionLocal, init_db
from shoplist.logging_config import configure_logging
from shoplist.services.seed import seed_categories

settings = get_settings()
configure_logging(settings.log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    if settings.bootstrap_on_startup:
        init_db()
        db = SessionLocal()
        try:
            seed_categories(db, settings.seed_categories)
        finally:
            db.close()
    if not (settings.api_key or "").strip():
        logger.warning("API_KEY is not set; every /api request will be rejected")
    yield


app = FastAPI(
    title="Shopping List API",
    description="Household shopping list: master items, availability and the buy list",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://localhost:5173"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

register_error_handlers(app)

# Register routers
app.include_router(items.router)
app.include_router(availability.router)
app.include_router(views.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
