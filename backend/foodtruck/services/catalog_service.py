import logging
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from foodtruck.errors import NotFoundError, ValidationError
from foodtruck.models.menu_item import MenuItem
from foodtruck.models.truck import Availability, Truck
from foodtruck.repositories.menu_item_repo import MenuItemRepository
from foodtruck.repositories.truck_repo import TruckRepository
from foodtruck.utils.money import from_cents, to_cents
from foodtruck.utils.transactions import smart_transaction

log = logging.getLogger(__name__)


class CatalogService:
    """Trucks and their menus. Writes are always scoped to the caller's own truck."""

    def __init__(self, db: Session):
        self.db = db
        self.trucks = TruckRepository(db)
        self.items = MenuItemRepository(db)

    # --- owner side ---

    def _own_truck(self, truck_id: Optional[int]) -> Truck:
        truck = self.trucks.get(truck_id) if truck_id else None
        if not truck:
            raise NotFoundError("Truck owner has no truck")
        return truck

    def _own_item(self, truck_id: Optional[int], item_id: int) -> MenuItem:
        truck = self._own_truck(truck_id)
        item = self.items.get_for_truck(item_id, truck.id)
        if not item:
            raise NotFoundError("Menu item not found")
        return item

    def create_item(
        self,
        truck_id: Optional[int],
        name: str,
        price: Decimal,
        category: str,
        description: Optional[str] = None,
    ) -> MenuItem:
        truck = self._own_truck(truck_id)
        with smart_transaction(self.db):
            item = self.items.create(truck.id, name, to_cents(price), category, description or "")
        log.info("menu item created", extra={"truck_id": truck.id, "item_id": item.id})
        return item

    def list_own_items(self, truck_id: Optional[int]) -> List[MenuItem]:
        truck = self._own_truck(truck_id)
        return self.items.list_available(truck.id)

    def get_own_item(self, truck_id: Optional[int], item_id: int) -> MenuItem:
        return self._own_item(truck_id, item_id)

    def edit_item(
        self,
        truck_id: Optional[int],
        item_id: int,
        name: str,
        price: Decimal,
        category: str,
        description: Optional[str] = None,
    ) -> MenuItem:
        item = self._own_item(truck_id, item_id)
        with smart_transaction(self.db):
            item.name = name
            item.price_cents = to_cents(price)
            item.category = category
            item.description = description or ""
        return item

    def delete_item(self, truck_id: Optional[int], item_id: int) -> MenuItem:
        item = self._own_item(truck_id, item_id)
        with smart_transaction(self.db):
            item.status = Availability.unavailable
        log.info("menu item withdrawn", extra={"item_id": item_id})
        return item

    def get_own_truck(self, truck_id: Optional[int]) -> Truck:
        return self._own_truck(truck_id)

    def set_order_status(self, truck_id: Optional[int], order_status) -> Truck:
        try:
            status = Availability(order_status)
        except ValueError:
            raise ValidationError("Invalid orderStatus")
        truck = self._own_truck(truck_id)
        with smart_transaction(self.db):
            truck.order_status = status
        return truck

    # --- public side ---

    def list_open_trucks(self) -> List[Truck]:
        return self.trucks.list_open()

    def list_menu(self, truck_id: int, category: Optional[str] = None) -> List[MenuItem]:
        return self.items.list_available(truck_id, category)


def menu_item_payload(item: MenuItem) -> dict:
    return {
        "item_id": item.id,
        "truck_id": item.truck_id,
        "name": item.name,
        "price": from_cents(item.price_cents),
        "category": item.category,
        "description": item.description,
        "status": item.status,
        "created_at": item.created_at,
    }


def truck_payload(truck: Truck) -> dict:
    return {
        "truck_id": truck.id,
        "owner_id": truck.owner_id,
        "truck_name": truck.name,
        "truck_status": truck.truck_status,
        "order_status": truck.order_status,
        "created_at": truck.created_at,
    }
