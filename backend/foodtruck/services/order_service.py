import logging
from datetime import datetime, timedelta
from typing import List, Optional

from filelock import Timeout
from sqlalchemy.orm import Session

from foodtruck.config import Settings, settings as default_settings
from foodtruck.errors import ConflictError, NotFoundError, ValidationError
from foodtruck.models.order import Order, OrderStatus
from foodtruck.repositories.cart_repo import CartRepository
from foodtruck.repositories.order_repo import OrderRepository
from foodtruck.repositories.user_repo import UserRepository
from foodtruck.utils.clock import to_naive_utc, utcnow
from foodtruck.utils.locks import user_lock
from foodtruck.utils.money import from_cents
from foodtruck.utils.transactions import smart_transaction

log = logging.getLogger(__name__)


class OrderService:
    def __init__(self, db: Session, settings: Settings = default_settings):
        self.db = db
        self.settings = settings
        self.cart_repo = CartRepository(db)
        self.order_repo = OrderRepository(db)
        self.users = UserRepository(db)

    def place_order(self, user_id: int, scheduled_pickup_time: datetime) -> Order:
        """
        Turn the user's cart into a pending order.

        Reading the cart, inserting the order and its lines, and clearing the
        cart commit together or not at all. The user row and cart rows are locked
        for the duration, and the per-user cart lock serialises this against
        other placements and cart adds on backends without row locks. Only the
        lines that were read are cleared, so nothing is dropped unbilled.
        """
        lock = user_lock(self.settings, user_id)
        try:
            with lock.acquire(timeout=self.settings.USER_LOCK_TIMEOUT_SECONDS):
                with smart_transaction(self.db):
                    self.users.lock(user_id)
                    entries = self.cart_repo.list_for_user(user_id, lock=True)
                    if not entries:
                        raise ValidationError("Cart is empty")

                    truck_ids = {e.item.truck_id for e in entries if e.item is not None}
                    if not truck_ids:
                        raise ConflictError("No valid truck found for items")
                    if len(truck_ids) > 1:
                        raise ConflictError("Cannot order from multiple trucks")

                    now = utcnow()
                    order = self.order_repo.add(
                        Order(
                            user_id=user_id,
                            truck_id=truck_ids.pop(),
                            status=OrderStatus.pending,
                            total_price_cents=sum(e.price_cents * e.quantity for e in entries),
                            scheduled_pickup_time=to_naive_utc(scheduled_pickup_time),
                            estimated_earliest_pickup=now
                            + timedelta(minutes=self.settings.PICKUP_ESTIMATE_MINUTES),
                            created_at=now,
                        )
                    )
                    for e in entries:
                        self.order_repo.add_item(order.id, e.item_id, e.quantity, e.price_cents)
                    self.cart_repo.clear(user_id, [e.id for e in entries])
        except Timeout:
            raise ConflictError("Cart is busy; try again")

        log.info(
            "order placed",
            extra={"user_id": user_id, "order_id": order.id, "total_cents": order.total_price_cents},
        )
        return order

    def list_for_customer(self, user_id: int) -> List[Order]:
        return self.order_repo.list_for_customer(user_id)

    def get_for_customer(self, user_id: int, order_id: int) -> Order:
        order = self.order_repo.get_for_customer(order_id, user_id)
        if not order:
            raise NotFoundError("Order not found")
        return order

    def list_for_truck(self, truck_id: Optional[int]) -> List[Order]:
        if not truck_id:
            raise NotFoundError("Truck owner has no truck")
        return self.order_repo.list_for_truck(truck_id)

    def get_for_truck(self, truck_id: Optional[int], order_id: int) -> Order:
        order = self.order_repo.get_for_truck(order_id, truck_id) if truck_id else None
        if not order:
            raise NotFoundError("Order not found")
        return order

    def update_status(
        self,
        truck_id: Optional[int],
        order_id: int,
        order_status: str,
        estimated_earliest_pickup: Optional[datetime] = None,
    ) -> Order:
        try:
            status = OrderStatus(order_status)
        except ValueError:
            raise ValidationError("Invalid order status")
        order = self.get_for_truck(truck_id, order_id)
        with smart_transaction(self.db):
            order.status = status
            if estimated_earliest_pickup is not None:
                order.estimated_earliest_pickup = to_naive_utc(estimated_earliest_pickup)
        log.info("order status changed", extra={"order_id": order_id, "status": status.value})
        return order


def order_summary_payload(order: Order) -> dict:
    return {
        "order_id": order.id,
        "user_id": order.user_id,
        "customer_name": order.customer.name,
        "truck_id": order.truck_id,
        "truck_name": order.truck.name,
        "order_status": order.status,
        "total_price": from_cents(order.total_price_cents),
        "scheduled_pickup_time": order.scheduled_pickup_time,
        "estimated_earliest_pickup": order.estimated_earliest_pickup,
        "created_at": order.created_at,
    }


def order_detail_payload(order: Order) -> dict:
    body = order_summary_payload(order)
    body["items"] = [
        {
            "item_id": oi.item_id,
            "item_name": oi.item.name,
            "quantity": oi.quantity,
            "price": from_cents(oi.price_cents),
        }
        for oi in order.items
    ]
    return body
