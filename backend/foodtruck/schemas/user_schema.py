from datetime import date, datetime
from typing import Optional

from pydantic import EmailStr, Field

from foodtruck.models.user import UserRole
from foodtruck.schemas.base import CamelModel


class RegisterIn(CamelModel):
    name: str = Field(..., min_length=1, max_length=128)
    email: EmailStr
    password: str = Field(..., min_length=1)
    role: UserRole = UserRole.customer
    birth_date: Optional[date] = None
    truck_name: Optional[str] = Field(None, min_length=1, max_length=128)


class LoginIn(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserOut(CamelModel):
    user_id: int
    name: str
    email: str
    role: UserRole
    birth_date: Optional[date] = None
    created_at: datetime
    truck_id: Optional[int] = None


class RegisterOut(CamelModel):
    message: str
    user: UserOut


class LoginOut(CamelModel):
    message: str
    token: str
    expires_at: datetime
    user: UserOut
