"""JWT token utilities"""
from datetime import datetime, timedelta
from typing import Optional
from jose import JWTError, jwt
from sdh_inventory.infrastructure.config.settings import settings


def _secret_key() -> str:
    return settings.JWT_SECRET_KEY or settings.SECRET_KEY


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a JWT access token

    Args:
        data: Claims to encode (e.g. {"sub": user_id, "role": "ADMIN"})
        expires_delta: Optional lifetime. Defaults to JWT_EXPIRE_HOURS

    Returns:
        Encoded JWT token string
    """
    to_encode = data.copy()
    now = datetime.utcnow()
    expire = now + (expires_delta or timedelta(hours=settings.JWT_EXPIRE_HOURS))
    to_encode.update({"exp": expire, "iat": now})
    return jwt.encode(to_encode, _secret_key(), algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    """
    Decode and verify a JWT access token

    Returns:
        Decoded token payload or None if invalid or expired
    """
    try:
        return jwt.decode(token, _secret_key(), algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        return None
