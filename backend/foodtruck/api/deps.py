from typing import Callable, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from foodtruck.config import Settings
from foodtruck.db import get_db
from foodtruck.errors import AuthenticationError
from foodtruck.models.user import UserRole
from foodtruck.services.auth_service import AuthService, Identity

# auto_error is off so a missing header surfaces as our own 401 body
bearer_scheme = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Authentication required")
    return credentials.credentials


def get_auth_service(
    db: Session = Depends(get_db), settings: Settings = Depends(get_settings)
) -> AuthService:
    return AuthService(db, settings)


def get_identity(
    token: str = Depends(get_bearer_token),
    auth: AuthService = Depends(get_auth_service),
) -> Identity:
    return auth.authenticate(token)


def require_role(role: UserRole) -> Callable[..., Identity]:
    """Dependency factory: the caller must be authenticated and hold `role`."""

    def _check(identity: Identity = Depends(get_identity)) -> Identity:
        return identity.require_role(role)

    return _check


require_customer = require_role(UserRole.customer)
require_truck_owner = require_role(UserRole.truck_owner)
