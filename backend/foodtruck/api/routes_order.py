from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from foodtruck.api.deps import get_settings, require_customer, require_truck_owner
from foodtruck.config import Settings
from foodtruck.db import get_db
from foodtruck.schemas.base import Message
from foodtruck.schemas.order_schema import (
    OrderDetailOut,
    OrderStatusIn,
    OrderSummaryOut,
    PlaceOrderIn,
    PlaceOrderOut,
)
from foodtruck.services.auth_service import Identity
from foodtruck.services.order_service import (
    OrderService,
    order_detail_payload,
    order_summary_payload,
)
from foodtruck.utils.money import from_cents

router = APIRouter(prefix="/order", tags=["orders"])


def get_order_service(
    db: Session = Depends(get_db), settings: Settings = Depends(get_settings)
) -> OrderService:
    return OrderService(db, settings)


# --- customer ---


@router.post("/new", response_model=PlaceOrderOut, summary="Place order from cart")
def place_order(
    payload: PlaceOrderIn,
    customer: Identity = Depends(require_customer),
    svc: OrderService = Depends(get_order_service),
):
    order = svc.place_order(customer.user_id, payload.scheduled_pickup_time)
    return {
        "message": "order placed successfully",
        "order_id": order.id,
        "total_price": from_cents(order.total_price_cents),
        "order_status": order.status,
        "estimated_earliest_pickup": order.estimated_earliest_pickup,
    }


@router.get("/myOrders", response_model=List[OrderSummaryOut], summary="My orders")
def my_orders(
    customer: Identity = Depends(require_customer),
    svc: OrderService = Depends(get_order_service),
):
    return [order_summary_payload(o) for o in svc.list_for_customer(customer.user_id)]


@router.get("/details/{order_id}", response_model=OrderDetailOut, summary="One of my orders")
def my_order_details(
    order_id: int,
    customer: Identity = Depends(require_customer),
    svc: OrderService = Depends(get_order_service),
):
    return order_detail_payload(svc.get_for_customer(customer.user_id, order_id))


# --- truck owner ---


@router.get("/truckOrders", response_model=List[OrderSummaryOut], summary="Orders for my truck")
def truck_orders(
    owner: Identity = Depends(require_truck_owner),
    svc: OrderService = Depends(get_order_service),
):
    return [order_summary_payload(o) for o in svc.list_for_truck(owner.truck_id)]


@router.get("/truckOwner/{order_id}", response_model=OrderDetailOut, summary="Order for my truck")
def truck_order_details(
    order_id: int,
    owner: Identity = Depends(require_truck_owner),
    svc: OrderService = Depends(get_order_service),
):
    return order_detail_payload(svc.get_for_truck(owner.truck_id, order_id))


@router.put("/updateStatus/{order_id}", response_model=Message, summary="Move an order along")
def update_status(
    order_id: int,
    payload: OrderStatusIn,
    owner: Identity = Depends(require_truck_owner),
    svc: OrderService = Depends(get_order_service),
):
    svc.update_status(
        owner.truck_id, order_id, payload.order_status, payload.estimated_earliest_pickup
    )
    return {"message": "order status updated successfully"}
