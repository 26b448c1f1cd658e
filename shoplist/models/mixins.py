"""Mixins for SQLAlchemy models."""

from sqlalchemy import Column, func

from shoplist.models.types import UTCDateTime


class TimestampMixin:
    """Mixin to add created_at and updated_at timestamp columns."""

    created_at = Column(UTCDateTime(), server_default=func.now(), nullable=False)
    updated_at = Column(
        UTCDateTime(),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
