"""
Authentication endpoints for Admin API.
Login and token verification.
"""
import logging
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import settings
from app.core.database import get_db
from app.core.security import get_current_admin
from app.schemas.admin import LoginRequest, LoginResponse, VerifyResponse
from app.services.admin_service import AdminService

logger = logging.getLogger(__name__)
router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)


# ==================== AUTHENTICATION ENDPOINTS ====================

@router.post("/login", response_model=LoginResponse)
@limiter.limit(settings.LOGIN_RATE_LIMIT)  # Prevent brute force attacks
async def admin_login(request: Request, credentials: LoginRequest, db: Session = Depends(get_db)):
    """
    Admin login endpoint.
    Returns JWT token for authentication.

    Raises:
        Unauthorized: If credentials are invalid
    """
    access_token = AdminService(db).authenticate(credentials.username, credentials.password)

    return LoginResponse(
        access_token=access_token,
        token_type="bearer",
        expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60  # Convert to seconds
    )


@router.get("/verify", response_model=VerifyResponse)
async def verify_token(admin: dict = Depends(get_current_admin)):
    """
    Verify JWT token.
    Protected endpoint that requires valid admin token.
    """
    return VerifyResponse(
        valid=True,
        user=admin.get("sub")
    )
