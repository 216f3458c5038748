import enum

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from foodtruck.db import Base
from foodtruck.utils.clock import utcnow


class Availability(str, enum.Enum):
    available = "available"
    unavailable = "unavailable"


def availability_column(**kw):
    return Column(
        Enum(Availability, values_callable=lambda e: [m.value for m in e], native_enum=False, length=16),
        nullable=False,
        default=Availability.available,
        **kw,
    )


class Truck(Base):
    __tablename__ = "trucks"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)
    name = Column(String(128), nullable=False)
    truck_status = availability_column()
    # whether the truck currently accepts orders
    order_status = availability_column()
    created_at = Column(DateTime, default=utcnow, nullable=False)

    owner = relationship("User", back_populates="truck")
    menu_items = relationship("MenuItem", back_populates="truck")
