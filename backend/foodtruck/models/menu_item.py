from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from foodtruck.db import Base
from foodtruck.models.truck import availability_column
from foodtruck.utils.clock import utcnow


class MenuItem(Base):
    __tablename__ = "menu_items"

    id = Column(Integer, primary_key=True, index=True)
    truck_id = Column(Integer, ForeignKey("trucks.id"), nullable=False, index=True)
    name = Column(String(128), nullable=False)
    price_cents = Column(Integer, nullable=False)
    category = Column(String(64), nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    # never hard-deleted; "unavailable" hides the item from customers
    status = availability_column()
    created_at = Column(DateTime, default=utcnow, nullable=False)

    truck = relationship("Truck", back_populates="menu_items")

    def __repr__(self):
        return f"<MenuItem id={self.id} truck={self.truck_id} name={self.name}>"
