"""Security utilities: password hashing and JWT issue/verify."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.config import settings
from app.core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

# bcrypt generates a fresh random salt for every hash
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

TOKEN_NOT_VALID = "Token is not valid"


def get_password_hash(password: str) -> str:
    """Hash a password with a per-call random salt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """Check a plain password against a stored hash."""
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(user_id: str, expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed token whose payload identifies the user."""
    if expires_delta is None:
        expires_delta = timedelta(seconds=settings.ACCESS_TOKEN_EXPIRE_SECONDS)
    expire = datetime.now(timezone.utc) + expires_delta
    to_encode = {"user": {"id": str(user_id)}, "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_token(token: str) -> str:
    """Verify signature and expiry and return the user id carried by the token."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logger.debug(f"Token rejected: {e}")
        raise AuthenticationError(TOKEN_NOT_VALID)

    user = payload.get("user")
    user_id = user.get("id") if isinstance(user, dict) else None
    if not user_id:
        raise AuthenticationError(TOKEN_NOT_VALID)
    return user_id
