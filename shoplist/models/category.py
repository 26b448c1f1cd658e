"""Category model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from shoplist.database import Base
from shoplist.models.mixins import TimestampMixin


class Category(Base, TimestampMixin):
    """Category grouping master items (seeded at startup, never edited)."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)

    # Relationships
    items = relationship("Item", back_populates="category")
