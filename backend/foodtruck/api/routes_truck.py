from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from foodtruck.api.deps import require_truck_owner
from foodtruck.db import get_db
from foodtruck.schemas.base import Message
from foodtruck.schemas.catalog_schema import TruckOrderStatusIn, TruckOut
from foodtruck.services.auth_service import Identity
from foodtruck.services.catalog_service import CatalogService, truck_payload

router = APIRouter(prefix="/trucks", tags=["trucks"])


@router.get("/view", response_model=List[TruckOut], summary="Trucks open for orders")
def list_trucks(db: Session = Depends(get_db)):
    return [truck_payload(t) for t in CatalogService(db).list_open_trucks()]


@router.get("/myTruck", response_model=TruckOut, summary="My truck")
def my_truck(owner: Identity = Depends(require_truck_owner), db: Session = Depends(get_db)):
    return truck_payload(CatalogService(db).get_own_truck(owner.truck_id))


@router.put("/updateOrderStatus", response_model=Message, summary="Open or close my truck for orders")
def update_order_status(
    payload: TruckOrderStatusIn,
    owner: Identity = Depends(require_truck_owner),
    db: Session = Depends(get_db),
):
    CatalogService(db).set_order_status(owner.truck_id, payload.order_status)
    return {"message": "truck order status updated successfully"}
