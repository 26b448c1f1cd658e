"""Per-item availability model."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from shoplist.database import Base
from shoplist.models.types import UTCDateTime


class ItemAvailability(Base):
    """Stock state of one master item.

    The primary key is also the foreign key to the item, so an item has at
    most one row and the row goes away with its item.
    """

    __tablename__ = "item_availabilities"

    item_id = Column(Integer, ForeignKey("items.id", ondelete="CASCADE"), primary_key=True)
    is_available = Column(Boolean, nullable=False, default=False)
    updated_at = Column(UTCDateTime(), nullable=False)
    updated_by = Column(String(255), nullable=False, default="system")

    # Relationships
    item = relationship("Item", back_populates="availability")
