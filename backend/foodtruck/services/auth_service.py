import logging
from datetime import date, timedelta
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from foodtruck.config import Settings, settings as default_settings
from foodtruck.errors import AuthenticationError, AuthorizationError, ValidationError
from foodtruck.models.user import User, UserRole
from foodtruck.models.user_session import UserSession
from foodtruck.repositories.session_repo import SessionRepository
from foodtruck.repositories.truck_repo import TruckRepository
from foodtruck.repositories.user_repo import UserRepository
from foodtruck.utils.clock import utcnow
from foodtruck.utils.security import hash_password, new_session_token, verify_password
from foodtruck.utils.transactions import smart_transaction

log = logging.getLogger(__name__)


class Identity:
    """Who is calling: the resolved user, their role and, for owners, their truck."""

    def __init__(self, user: User, truck_id: Optional[int] = None):
        self.user = user
        self.truck_id = truck_id

    @property
    def user_id(self) -> int:
        return self.user.id

    @property
    def role(self) -> UserRole:
        return self.user.role

    def require_role(self, role: UserRole) -> "Identity":
        if self.role != role:
            raise AuthorizationError("Forbidden")
        return self


class AuthService:
    def __init__(self, db: Session, settings: Settings = default_settings):
        self.db = db
        self.settings = settings
        self.users = UserRepository(db)
        self.sessions = SessionRepository(db)
        self.trucks = TruckRepository(db)

    def register(
        self,
        name: str,
        email: str,
        password: str,
        role: UserRole = UserRole.customer,
        birth_date: Optional[date] = None,
        truck_name: Optional[str] = None,
    ) -> Identity:
        """
        Create a user; a truckOwner gets their truck in the same transaction.
        Emails compare case-insensitively, so a differently-cased duplicate is rejected.
        """
        email = email.strip().lower()
        name = name.strip()
        truck_name = truck_name.strip() if truck_name else None
        if not name:
            raise ValidationError("Name, email, and password are required")
        if self.users.get_by_email(email):
            raise ValidationError("Email already registered")

        truck_id = None
        try:
            with smart_transaction(self.db):
                user = self.users.create(
                    name=name,
                    email=email,
                    password_hash=hash_password(password),
                    role=role,
                    birth_date=birth_date,
                )
                if role == UserRole.truck_owner:
                    truck = self.trucks.create(user.id, truck_name or f"{name}'s Truck")
                    truck_id = truck.id
        except IntegrityError:
            # lost a race against a concurrent registration of the same email
            raise ValidationError("Email already registered")

        log.info("user registered", extra={"user_id": user.id, "role": role.value})
        return Identity(user, truck_id)

    def login(self, email: str, password: str) -> tuple:
        """
        Verify credentials and open a fresh session.

        Any session the user already had is deleted in the same transaction as
        the insert, with the user row locked first so concurrent logins queue
        up; sessions.user_id is unique as well, so at most one token per user
        authenticates at a time.
        Returns (Identity, UserSession).
        """
        user = self.users.get_by_email(email)
        if not user or not verify_password(password, user.password_hash):
            log.warning("failed login attempt")
            raise AuthenticationError("Invalid credentials")

        now = utcnow()
        with smart_transaction(self.db):
            self.users.lock(user.id)
            replaced = self.sessions.delete_for_user(user.id)
            session = self.sessions.add(
                user.id,
                new_session_token(),
                now + timedelta(hours=self.settings.SESSION_TTL_HOURS),
            )
        truck_id = self.users.owned_truck_id(user.id)
        log.info("user logged in", extra={"user_id": user.id, "replaced_sessions": replaced})
        return Identity(user, truck_id), session

    def logout(self, token: str) -> None:
        with smart_transaction(self.db):
            removed = self.sessions.delete_token(token)
        log.info("logout", extra={"sessions_removed": removed})

    def authenticate(self, token: Optional[str]) -> Identity:
        if not token or token in ("null", "undefined"):
            raise AuthenticationError("Authentication required")
        found = self.sessions.find_live(token, utcnow())
        if found is None:
            raise AuthenticationError("Invalid or expired token")
        user, truck_id = found
        return Identity(user, truck_id)

    def purge_expired_sessions(self) -> int:
        with smart_transaction(self.db):
            n = self.sessions.delete_expired(utcnow())
        if n:
            log.info("expired sessions purged", extra={"count": n})
        return n


def login_payload(identity: Identity, session: UserSession) -> dict:
    return {
        "message": "Login successful",
        "token": session.token,
        "expires_at": session.expires_at,
        "user": user_payload(identity),
    }


def user_payload(identity: Identity) -> dict:
    u = identity.user
    return {
        "user_id": u.id,
        "name": u.name,
        "email": u.email,
        "role": u.role,
        "birth_date": u.birth_date,
        "created_at": u.created_at,
        "truck_id": identity.truck_id,
    }
