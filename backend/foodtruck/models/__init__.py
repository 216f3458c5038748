from foodtruck.models.user import User, UserRole
from foodtruck.models.truck import Availability, Truck
from foodtruck.models.menu_item import MenuItem
from foodtruck.models.user_session import UserSession
from foodtruck.models.cart_entry import CartEntry
from foodtruck.models.order import Order, OrderItem, OrderStatus

__all__ = [
    "Availability",
    "CartEntry",
    "MenuItem",
    "Order",
    "OrderItem",
    "OrderStatus",
    "Truck",
    "User",
    "UserRole",
    "UserSession",
]
