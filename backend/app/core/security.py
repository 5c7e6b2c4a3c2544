from datetime import datetime, timedelta, timezone
from typing import Any, Optional
import logging

import bcrypt
import jwt

from .config import settings

logger = logging.getLogger(__name__)

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


def _password_bytes(password: str) -> bytes:
    # bcrypt only looks at the first 72 bytes
    return password.encode("utf-8")[:72]


def get_password_hash(password: str) -> str:
    """Hash a password with a fresh salt."""
    return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against its stored hash."""
    try:
        return bcrypt.checkpw(
            _password_bytes(plain_password), hashed_password.encode("utf-8")
        )
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def _create_token(
    subject: str, token_type: str, expires_delta: timedelta, version: int
) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": subject,
        "type": token_type,
        "ver": version,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def create_access_token(subject: str, version: int = 0) -> str:
    return _create_token(
        subject,
        ACCESS_TOKEN_TYPE,
        timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        version,
    )


def create_refresh_token(subject: str, version: int = 0) -> str:
    return _create_token(
        subject,
        REFRESH_TOKEN_TYPE,
        timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS),
        version,
    )


def decode_jwt_token(token: str) -> dict[str, Any]:
    """Decode and validate a token. Raises jwt.PyJWTError on any problem."""
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])


def verify_token(token: str, token_type: str = ACCESS_TOKEN_TYPE) -> Optional[dict[str, Any]]:
    """
    Return the payload of a valid token of the given type, or None.

    Expired, tampered and wrong-type tokens all yield None.
    """
    try:
        payload = decode_jwt_token(token)
    except jwt.PyJWTError as e:
        logger.info(f"Rejected token: {e}")
        return None

    if payload.get("type") != token_type or not payload.get("sub"):
        return None
    return payload
