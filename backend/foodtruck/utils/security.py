import secrets

from passlib.context import CryptContext

pwd = CryptContext(schemes=["argon2"], deprecated="auto")


def hash_password(p: str) -> str:
    return pwd.hash(p)


def verify_password(p: str, h: str) -> bool:
    return pwd.verify(p, h)


def new_session_token() -> str:
    # 32 random bytes -> 64 hex chars
    return secrets.token_hex(32)
