import enum

from sqlalchemy import Column, Date, DateTime, Enum, Integer, String
from sqlalchemy.orm import relationship

from foodtruck.db import Base
from foodtruck.utils.clock import utcnow


class UserRole(str, enum.Enum):
    customer = "customer"
    truck_owner = "truckOwner"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(128), nullable=False)
    # always stored lower-cased; uniqueness is case-insensitive through that
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(
        Enum(UserRole, values_callable=lambda e: [m.value for m in e], native_enum=False, length=16),
        nullable=False,
        default=UserRole.customer,
    )
    birth_date = Column(Date, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    truck = relationship("Truck", back_populates="owner", uselist=False)

    def __repr__(self):
        return f"<User id={self.id} role={self.role.value if self.role else None}>"
