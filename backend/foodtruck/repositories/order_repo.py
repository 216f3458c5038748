from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from foodtruck.models.order import Order, OrderItem


class OrderRepository:
    def __init__(self, db: Session):
        self.db = db

    def add(self, order: Order) -> Order:
        self.db.add(order)
        self.db.flush()
        return order

    def add_item(self, order_id: int, item_id: int, quantity: int, price_cents: int) -> OrderItem:
        oi = OrderItem(order_id=order_id, item_id=item_id, quantity=quantity, price_cents=price_cents)
        self.db.add(oi)
        return oi

    def _detailed(self):
        return self.db.query(Order).options(
            joinedload(Order.truck),
            joinedload(Order.customer),
            joinedload(Order.items).joinedload(OrderItem.item),
        )

    def list_for_customer(self, user_id: int) -> List[Order]:
        return (
            self._detailed()
            .filter(Order.user_id == user_id)
            .order_by(Order.id.desc())
            .all()
        )

    def list_for_truck(self, truck_id: int) -> List[Order]:
        return (
            self._detailed()
            .filter(Order.truck_id == truck_id)
            .order_by(Order.id.desc())
            .all()
        )

    def get_for_customer(self, order_id: int, user_id: int) -> Optional[Order]:
        return self._detailed().filter(Order.id == order_id, Order.user_id == user_id).first()

    def get_for_truck(self, order_id: int, truck_id: int) -> Optional[Order]:
        return self._detailed().filter(Order.id == order_id, Order.truck_id == truck_id).first()
