from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from foodtruck.models.cart_entry import CartEntry
from foodtruck.models.menu_item import MenuItem


class CartRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_for_user(self, user_id: int, lock: bool = False) -> List[CartEntry]:
        qry = (
            self.db.query(CartEntry)
            .options(joinedload(CartEntry.item))
            .filter(CartEntry.user_id == user_id)
            .order_by(CartEntry.id)
        )
        if lock:
            # row locks where the dialect has them (no-op on SQLite)
            qry = qry.with_for_update(of=CartEntry)
        return qry.all()

    def truck_of_cart(self, user_id: int) -> Optional[int]:
        return (
            self.db.query(MenuItem.truck_id)
            .join(CartEntry, CartEntry.item_id == MenuItem.id)
            .filter(CartEntry.user_id == user_id)
            .limit(1)
            .scalar()
        )

    def get_for_user(self, entry_id: int, user_id: int) -> Optional[CartEntry]:
        return (
            self.db.query(CartEntry)
            .filter(CartEntry.id == entry_id, CartEntry.user_id == user_id)
            .first()
        )

    def add(self, user_id: int, item_id: int, quantity: int, price_cents: int) -> CartEntry:
        entry = CartEntry(user_id=user_id, item_id=item_id, quantity=quantity, price_cents=price_cents)
        self.db.add(entry)
        self.db.flush()
        return entry

    def remove(self, entry: CartEntry) -> None:
        self.db.delete(entry)
        self.db.flush()

    def clear(self, user_id: int, entry_ids: List[int]) -> int:
        """Delete the given entries of the user; lines added meanwhile are left alone."""
        return (
            self.db.query(CartEntry)
            .filter(CartEntry.user_id == user_id, CartEntry.id.in_(entry_ids))
            .delete(synchronize_session=False)
        )
