"""Category schemas."""

from shoplist.schemas.base import CamelModel


class CategoryResponse(CamelModel):
    """Category response."""

    id: int
    name: str
