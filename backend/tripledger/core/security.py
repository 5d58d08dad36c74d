"""
Password hashing and the JWT access tokens handed out at login.

A token names the account (``sub``), its id (``user_id``) and its role
(``role``); it stays valid for ACCESS_TOKEN_EXPIRE_HOURS.
"""
from datetime import datetime, timedelta
from typing import Any, Dict, Optional
import hashlib
import bcrypt
from jose import JWTError, jwt
from tripledger.core.config import settings

TOKEN_CLAIMS = ("sub", "user_id", "role")


def _pre_hash_password(password: str) -> bytes:
    # bcrypt only reads the first 72 bytes
    return hashlib.sha256(password.encode("utf-8")).digest()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return bcrypt.checkpw(_pre_hash_password(plain_password), hashed_password.encode("utf-8"))


def get_password_hash(password: str) -> str:
    """Hash a password for the ``hashed_password`` column."""
    return bcrypt.hashpw(_pre_hash_password(password), bcrypt.gensalt()).decode("utf-8")


def create_access_token(user: Any, expires_delta: Optional[timedelta] = None) -> str:
    """
    Issue a signed token for a user.

    Args:
        user: anything with ``id``, ``username`` and ``role`` (enum or plain string)
        expires_delta: lifetime override; defaults to ACCESS_TOKEN_EXPIRE_HOURS
    """
    role = getattr(user.role, "value", user.role)
    lifetime = expires_delta or timedelta(hours=settings.ACCESS_TOKEN_EXPIRE_HOURS)
    claims = {
        "sub": user.username,
        "user_id": user.id,
        "role": role,
        "exp": datetime.utcnow() + lifetime,
    }
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Return the claims of a valid token, or None when it is expired, forged or incomplete."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
    if any(claim not in payload for claim in TOKEN_CLAIMS):
        return None
    return payload
