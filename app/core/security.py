"""
Пароли, JWT и роли пользователей.
"""

from datetime import datetime, timedelta, timezone
from enum import IntEnum
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from .config import settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class UserRole(IntEnum):
    """Роль хранится в users.role целым числом"""
    blocked = 0
    operator = 1
    admin = 2


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def check_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


def issue_token(user_id: int, lifetime: Optional[timedelta] = None) -> str:
    """Bearer-токен с id пользователя в поле sub"""
    if lifetime is None:
        lifetime = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    claims = {
        "sub": str(user_id),
        "exp": datetime.now(timezone.utc) + lifetime,
    }
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def read_token(token: str) -> Optional[int]:
    """id пользователя из токена или None, если токен битый или истек"""
    try:
        claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        return int(claims["sub"])
    except (JWTError, KeyError, TypeError, ValueError):
        return None
