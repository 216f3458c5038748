from fastapi import APIRouter, Depends, status

from foodtruck.api.deps import get_auth_service, get_bearer_token, get_identity
from foodtruck.schemas.base import Message
from foodtruck.schemas.user_schema import LoginIn, LoginOut, RegisterIn, RegisterOut, UserOut
from foodtruck.services.auth_service import AuthService, Identity, login_payload, user_payload

router = APIRouter(prefix="/user", tags=["users"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=RegisterOut, summary="Register")
def register(payload: RegisterIn, auth: AuthService = Depends(get_auth_service)):
    identity = auth.register(
        name=payload.name,
        email=payload.email,
        password=payload.password,
        role=payload.role,
        birth_date=payload.birth_date,
        truck_name=payload.truck_name,
    )
    return {"message": "User registered successfully", "user": user_payload(identity)}


@router.post("/login", response_model=LoginOut, summary="Log in and open a session")
def login(payload: LoginIn, auth: AuthService = Depends(get_auth_service)):
    identity, session = auth.login(payload.email, payload.password)
    return login_payload(identity, session)


@router.post("/logout", response_model=Message, summary="Close the presented session")
def logout(token: str = Depends(get_bearer_token), auth: AuthService = Depends(get_auth_service)):
    auth.logout(token)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=UserOut, summary="Current user")
def me(identity: Identity = Depends(get_identity)):
    return user_payload(identity)
