from typing import Optional

from sqlalchemy.orm import Session

from foodtruck.models.truck import Truck
from foodtruck.models.user import User


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email.strip().lower()).first()

    def create(self, **fields) -> User:
        u = User(**fields)
        self.db.add(u)
        self.db.flush()
        return u

    def owned_truck_id(self, user_id: int) -> Optional[int]:
        return self.db.query(Truck.id).filter(Truck.owner_id == user_id).scalar()

    def lock(self, user_id: int) -> User:
        # row lock where the dialect has one; serialises per-user writes across hosts
        return self.db.query(User).filter(User.id == user_id).with_for_update().one()
