from datetime import datetime
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from foodtruck.models.truck import Truck
from foodtruck.models.user import User
from foodtruck.models.user_session import UserSession


class SessionRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_live(self, token: str, now: datetime) -> Optional[Tuple[User, Optional[int]]]:
        """
        Resolve a token to (user, owned truck id) in one query, or None when the
        token is unknown or expired.
        """
        row = (
            self.db.query(User, Truck.id)
            .join(UserSession, UserSession.user_id == User.id)
            .outerjoin(Truck, Truck.owner_id == User.id)
            .filter(UserSession.token == token, UserSession.expires_at > now)
            .first()
        )
        if row is None:
            return None
        return row[0], row[1]

    def delete_for_user(self, user_id: int) -> int:
        return (
            self.db.query(UserSession)
            .filter(UserSession.user_id == user_id)
            .delete(synchronize_session=False)
        )

    def delete_token(self, token: str) -> int:
        return (
            self.db.query(UserSession)
            .filter(UserSession.token == token)
            .delete(synchronize_session=False)
        )

    def delete_expired(self, now: datetime) -> int:
        return (
            self.db.query(UserSession)
            .filter(UserSession.expires_at <= now)
            .delete(synchronize_session=False)
        )

    def add(self, user_id: int, token: str, expires_at: datetime) -> UserSession:
        s = UserSession(user_id=user_id, token=token, expires_at=expires_at)
        self.db.add(s)
        self.db.flush()
        return s
