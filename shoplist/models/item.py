"""Master item model."""

from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from shoplist.database import Base
from shoplist.models.mixins import TimestampMixin

ITEM_NAME_MAX_LENGTH = 128


class Item(Base, TimestampMixin):
    """Master catalog entry, unique by name within its category."""

    __tablename__ = "items"
    __table_args__ = (
        UniqueConstraint("category_id", "normalized_name", name="uq_items_category_normalized_name"),
    )

    id = Column(Integer, primary_key=True, index=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    name = Column(String(ITEM_NAME_MAX_LENGTH), nullable=False)  # Display name, trimmed
    normalized_name = Column(String(ITEM_NAME_MAX_LENGTH), nullable=False)  # Lowercase, trimmed

    # Relationships
    category = relationship("Category", back_populates="items")
    availability = relationship(
        "ItemAvailability",
        back_populates="item",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
