from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from foodtruck.schemas.base import CamelModel


class AddToCartIn(CamelModel):
    item_id: int
    quantity: int = Field(1, ge=1, le=1000)


class EditCartIn(CamelModel):
    # range is checked by the service so the error reads like the others
    quantity: int


class CartLineOut(CamelModel):
    cart_id: int
    item_id: int
    item_name: str
    price: Decimal
    quantity: int
    line_total: Decimal


class CartOut(CamelModel):
    truck_id: Optional[int] = None
    items: List[CartLineOut]
    total_price: Decimal


class AddToCartOut(CamelModel):
    message: str
    cart_id: int
