from sqlalchemy import Column, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship

from foodtruck.db import Base
from foodtruck.utils.clock import utcnow


class CartEntry(Base):
    __tablename__ = "cart_entries"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    item_id = Column(Integer, ForeignKey("menu_items.id"), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    price_cents = Column(Integer, nullable=False)  # price at time of add
    created_at = Column(DateTime, default=utcnow, nullable=False)

    item = relationship("MenuItem")
