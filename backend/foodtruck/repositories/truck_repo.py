from typing import List, Optional

from sqlalchemy.orm import Session

from foodtruck.models.truck import Availability, Truck


class TruckRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, truck_id: int) -> Optional[Truck]:
        return self.db.get(Truck, truck_id)

    def create(self, owner_id: int, name: str) -> Truck:
        t = Truck(
            owner_id=owner_id,
            name=name,
            truck_status=Availability.available,
            order_status=Availability.available,
        )
        self.db.add(t)
        self.db.flush()
        return t

    def list_open(self) -> List[Truck]:
        return (
            self.db.query(Truck)
            .filter(
                Truck.truck_status == Availability.available,
                Truck.order_status == Availability.available,
            )
            .order_by(Truck.id)
            .all()
        )
