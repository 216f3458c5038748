from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from foodtruck.models.order import OrderStatus
from foodtruck.schemas.base import CamelModel


class PlaceOrderIn(CamelModel):
    scheduled_pickup_time: datetime


class PlaceOrderOut(CamelModel):
    message: str
    order_id: int
    total_price: Decimal
    order_status: OrderStatus
    estimated_earliest_pickup: datetime


class OrderLineOut(CamelModel):
    item_id: int
    item_name: str
    quantity: int
    price: Decimal


class OrderSummaryOut(CamelModel):
    order_id: int
    user_id: int
    customer_name: str
    truck_id: int
    truck_name: str
    order_status: OrderStatus
    total_price: Decimal
    scheduled_pickup_time: datetime
    estimated_earliest_pickup: Optional[datetime] = None
    created_at: datetime


class OrderDetailOut(OrderSummaryOut):
    items: List[OrderLineOut]


class OrderStatusIn(CamelModel):
    # plain str so an unknown status is reported as a ValidationError by the service
    order_status: str
    estimated_earliest_pickup: Optional[datetime] = None
