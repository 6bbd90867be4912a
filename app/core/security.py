"""
Security utilities: JWT, password hashing, admin authentication
"""
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
import logging

from app.core.config import settings
from app.core.exceptions import Unauthorized

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
# auto_error=False so a missing header yields our localized 401 instead of FastAPI's default
security_scheme = HTTPBearer(auto_error=False)

ADMIN_ROLE = "admin"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash"""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password"""
    return pwd_context.hash(password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token"""
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt


def decode_access_token(token: str) -> Optional[dict]:
    """Decode and verify JWT token"""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        return payload
    except JWTError:
        return None


def create_admin_token(admin_id: int, username: str) -> str:
    """Issue an access token for an authenticated admin account"""
    return create_access_token(
        data={"sub": username, "admin_id": admin_id, "role": ADMIN_ROLE}
    )


async def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security_scheme)
) -> Dict[str, Any]:
    """
    FastAPI dependency to verify admin JWT token.
    Guards every mutating content endpoint.

    Args:
        credentials: HTTP Bearer token from Authorization header

    Returns:
        Decoded token payload

    Raises:
        Unauthorized: If the header is missing, the token is invalid/expired,
            or the token was not issued to an admin

    Example:
        @router.post("/blog")
        async def create_blog(admin: dict = Depends(get_current_admin)):
            ...
    """
    if credentials is None:
        logger.warning("Missing bearer token")
        raise Unauthorized("UNAUTHORIZED")

    payload = decode_access_token(credentials.credentials)

    if not payload:
        logger.warning("Invalid or expired token")
        raise Unauthorized("UNAUTHORIZED")

    if payload.get("role") != ADMIN_ROLE:
        logger.warning(f"Non-admin token attempt: {payload.get('sub')}")
        raise Unauthorized("UNAUTHORIZED")

    return payload
