"""Helpers shared by the services."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime

from sqlalchemy.exc import SQLAlchemyError

from shoplist.errors import StorageError

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def normalize_name(name: str) -> str:
    """Comparison key for item names: trimmed and lowercased."""
    return name.strip().lower()


@contextmanager
def storage_errors(action: str) -> Iterator[None]:
    """Re-raise SQLAlchemy failures inside the block as StorageError."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(f"Storage failure while trying to {action}: {e}")
        raise StorageError.from_exception(e) from e
