from typing import List, Optional

from sqlalchemy.orm import Session

from foodtruck.models.menu_item import MenuItem
from foodtruck.models.truck import Availability


class MenuItemRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, item_id: int) -> Optional[MenuItem]:
        return self.db.get(MenuItem, item_id)

    def get_available(self, item_id: int) -> Optional[MenuItem]:
        return (
            self.db.query(MenuItem)
            .filter(MenuItem.id == item_id, MenuItem.status == Availability.available)
            .first()
        )

    def get_for_truck(self, item_id: int, truck_id: int) -> Optional[MenuItem]:
        return (
            self.db.query(MenuItem)
            .filter(MenuItem.id == item_id, MenuItem.truck_id == truck_id)
            .first()
        )

    def list_available(self, truck_id: int, category: Optional[str] = None) -> List[MenuItem]:
        query = self.db.query(MenuItem).filter(
            MenuItem.truck_id == truck_id, MenuItem.status == Availability.available
        )
        if category is not None:
            query = query.filter(MenuItem.category == category)
        return query.order_by(MenuItem.id).all()

    def create(self, truck_id: int, name: str, price_cents: int, category: str, description: str = "") -> MenuItem:
        item = MenuItem(
            truck_id=truck_id,
            name=name,
            price_cents=price_cents,
            category=category,
            description=description or "",
            status=Availability.available,
        )
        self.db.add(item)
        self.db.flush()
        return item
