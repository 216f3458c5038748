from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from foodtruck.api.deps import get_settings, require_customer
from foodtruck.config import Settings
from foodtruck.db import get_db
from foodtruck.schemas.base import Message
from foodtruck.schemas.cart_schema import AddToCartIn, AddToCartOut, CartOut, EditCartIn
from foodtruck.services.auth_service import Identity
from foodtruck.services.cart_service import CartService, cart_payload

router = APIRouter(prefix="/cart", tags=["cart"])


def get_cart_service(
    db: Session = Depends(get_db), settings: Settings = Depends(get_settings)
) -> CartService:
    return CartService(db, settings)


@router.post("/new", response_model=AddToCartOut, summary="Add item to cart")
def add_item(
    payload: AddToCartIn,
    customer: Identity = Depends(require_customer),
    cart: CartService = Depends(get_cart_service),
):
    entry = cart.add_item(customer.user_id, payload.item_id, payload.quantity)
    return {"message": "item added to cart successfully", "cart_id": entry.id}


@router.get("/view", response_model=CartOut, summary="Get cart")
def view_cart(customer: Identity = Depends(require_customer), cart: CartService = Depends(get_cart_service)):
    return cart_payload(cart.list_items(customer.user_id))


@router.put("/edit/{cart_id}", response_model=Message, summary="Change quantity")
def edit_item(
    cart_id: int,
    payload: EditCartIn,
    customer: Identity = Depends(require_customer),
    cart: CartService = Depends(get_cart_service),
):
    cart.edit_quantity(customer.user_id, cart_id, payload.quantity)
    return {"message": "cart updated successfully"}


@router.delete("/delete/{cart_id}", response_model=Message, summary="Remove item")
def remove_item(
    cart_id: int, customer: Identity = Depends(require_customer), cart: CartService = Depends(get_cart_service)
):
    cart.remove_item(customer.user_id, cart_id)
    return {"message": "item removed from cart successfully"}
