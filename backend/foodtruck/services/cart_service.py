import logging
from typing import List

from filelock import Timeout
from sqlalchemy.orm import Session

from foodtruck.config import Settings, settings as default_settings
from foodtruck.errors import ConflictError, NotFoundError, ValidationError
from foodtruck.models.cart_entry import CartEntry
from foodtruck.repositories.cart_repo import CartRepository
from foodtruck.repositories.menu_item_repo import MenuItemRepository
from foodtruck.repositories.user_repo import UserRepository
from foodtruck.utils.locks import user_lock
from foodtruck.utils.money import from_cents
from foodtruck.utils.transactions import smart_transaction

log = logging.getLogger(__name__)

MAX_QUANTITY = 1000


class CartService:
    def __init__(self, db: Session, settings: Settings = default_settings):
        self.db = db
        self.settings = settings
        self.users = UserRepository(db)
        self.cart_repo = CartRepository(db)
        self.item_repo = MenuItemRepository(db)

    def add_item(self, user_id: int, item_id: int, quantity: int) -> CartEntry:
        """
        Put an available menu item in the user's cart at its current price.

        The price is captured now and never re-read: a later catalog change
        does not alter what the cart (and the order placed from it) costs.
        A cart only ever holds items of one truck; the check and the insert run
        under the per-user cart lock so concurrent adds cannot mix trucks.
        """
        _check_quantity(quantity)
        item = self.item_repo.get_available(item_id)
        if not item:
            raise NotFoundError("Item not available")
        try:
            with user_lock(self.settings, user_id).acquire(
                timeout=self.settings.USER_LOCK_TIMEOUT_SECONDS
            ):
                with smart_transaction(self.db):
                    self.users.lock(user_id)
                    cart_truck = self.cart_repo.truck_of_cart(user_id)
                    if cart_truck is not None and cart_truck != item.truck_id:
                        raise ConflictError("Cannot order from multiple trucks")
                    entry = self.cart_repo.add(user_id, item.id, quantity, item.price_cents)
        except Timeout:
            raise ConflictError("Cart is busy; try again")
        log.info("cart add", extra={"user_id": user_id, "item_id": item.id, "quantity": quantity})
        return entry

    def list_items(self, user_id: int) -> List[CartEntry]:
        return self.cart_repo.list_for_user(user_id)

    def edit_quantity(self, user_id: int, entry_id: int, quantity: int) -> CartEntry:
        _check_quantity(quantity)
        entry = self.cart_repo.get_for_user(entry_id, user_id)
        if not entry:
            raise NotFoundError("Cart item not found")
        with smart_transaction(self.db):
            entry.quantity = quantity
        return entry

    def remove_item(self, user_id: int, entry_id: int) -> None:
        entry = self.cart_repo.get_for_user(entry_id, user_id)
        if not entry:
            raise NotFoundError("Cart item not found")
        with smart_transaction(self.db):
            self.cart_repo.remove(entry)


def _check_quantity(quantity) -> None:
    if quantity is None or quantity < 1 or quantity > MAX_QUANTITY:
        raise ValidationError("Valid quantity is required")


def cart_payload(entries: List[CartEntry]) -> dict:
    lines = []
    total = 0
    for e in entries:
        line_total = e.price_cents * e.quantity
        lines.append(
            {
                "cart_id": e.id,
                "item_id": e.item_id,
                "item_name": e.item.name,
                "price": from_cents(e.price_cents),
                "quantity": e.quantity,
                "line_total": from_cents(line_total),
            }
        )
        total += line_total
    return {
        "truck_id": entries[0].item.truck_id if entries else None,
        "items": lines,
        "total_price": from_cents(total),
    }
