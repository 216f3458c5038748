from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from foodtruck.api.deps import require_truck_owner
from foodtruck.db import get_db
from foodtruck.schemas.base import Message
from foodtruck.schemas.catalog_schema import MenuItemIn, MenuItemOut
from foodtruck.services.auth_service import Identity
from foodtruck.services.catalog_service import CatalogService, menu_item_payload

router = APIRouter(prefix="/menuItem", tags=["menu"])


@router.post("/new", response_model=Message, summary="Create menu item")
def create_item(
    payload: MenuItemIn,
    owner: Identity = Depends(require_truck_owner),
    db: Session = Depends(get_db),
):
    CatalogService(db).create_item(
        owner.truck_id, payload.name, payload.price, payload.category, payload.description
    )
    return {"message": "menu item was created successfully"}


@router.get("/view", response_model=List[MenuItemOut], summary="List my menu items")
def list_my_items(owner: Identity = Depends(require_truck_owner), db: Session = Depends(get_db)):
    return [menu_item_payload(i) for i in CatalogService(db).list_own_items(owner.truck_id)]


@router.get("/view/{item_id}", response_model=MenuItemOut, summary="View one of my menu items")
def view_my_item(
    item_id: int, owner: Identity = Depends(require_truck_owner), db: Session = Depends(get_db)
):
    return menu_item_payload(CatalogService(db).get_own_item(owner.truck_id, item_id))


@router.put("/edit/{item_id}", response_model=Message, summary="Edit menu item")
def edit_item(
    item_id: int,
    payload: MenuItemIn,
    owner: Identity = Depends(require_truck_owner),
    db: Session = Depends(get_db),
):
    CatalogService(db).edit_item(
        owner.truck_id, item_id, payload.name, payload.price, payload.category, payload.description
    )
    return {"message": "menu item updated successfully"}


@router.delete("/delete/{item_id}", response_model=Message, summary="Withdraw menu item")
def delete_item(
    item_id: int, owner: Identity = Depends(require_truck_owner), db: Session = Depends(get_db)
):
    CatalogService(db).delete_item(owner.truck_id, item_id)
    return {"message": "menu item deleted successfully"}


@router.get("/truck/{truck_id}", response_model=List[MenuItemOut], summary="Public menu of a truck")
def truck_menu(truck_id: int, db: Session = Depends(get_db)):
    return [menu_item_payload(i) for i in CatalogService(db).list_menu(truck_id)]


@router.get(
    "/truck/{truck_id}/category/{category}",
    response_model=List[MenuItemOut],
    summary="Public menu of a truck, one category",
)
def truck_menu_by_category(truck_id: int, category: str, db: Session = Depends(get_db)):
    return [menu_item_payload(i) for i in CatalogService(db).list_menu(truck_id, category)]
