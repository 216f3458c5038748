from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from foodtruck.models.truck import Availability
from foodtruck.schemas.base import CamelModel


class MenuItemIn(CamelModel):
    name: str = Field(..., min_length=1, max_length=128)
    price: Decimal = Field(..., gt=0, le=Decimal("10000"), max_digits=10, decimal_places=2)
    category: str = Field(..., min_length=1, max_length=64)
    description: Optional[str] = None


class MenuItemOut(CamelModel):
    item_id: int
    truck_id: int
    name: str
    price: Decimal
    category: str
    description: str
    status: Availability
    created_at: datetime


class TruckOut(CamelModel):
    truck_id: int
    owner_id: int
    truck_name: str
    truck_status: Availability
    order_status: Availability
    created_at: datetime


class TruckOrderStatusIn(CamelModel):
    order_status: Availability
