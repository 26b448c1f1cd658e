"""Errors raised by the catalog and availability services."""

from sqlalchemy.exc import SQLAlchemyError


class ShoppingListError(Exception):
    """Base class for failures reported to API callers."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ShoppingListError):
    """Malformed or missing input. Carries every field-level message."""

    def __init__(self, messages: list[str]):
        super().__init__("; ".join(messages))
        self.messages = list(messages)


class ConflictError(ShoppingListError):
    """An item with the same name already exists in the category."""


class NotFoundError(ShoppingListError):
    """Unknown item or category reference."""


class StorageError(ShoppingListError):
    """The database rejected or failed a read or write."""

    @classmethod
    def from_exception(cls, exc: Exception) -> "StorageError":
        """Wrap a driver exception, keeping the driver's own message."""
        if isinstance(exc, SQLAlchemyError) and getattr(exc, "orig", None) is not None:
            return cls(str(exc.orig))
        return cls(str(exc))
