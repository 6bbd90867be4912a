"""
Admin API module - back-office accounts.

Modular structure:
- auth.py: Authentication endpoints (login, verify)
- accounts.py: Admin account creation, mounted by app.main at the /admin root

All endpoints require admin authentication except /login.
"""
from fastapi import APIRouter

from .auth import router as auth_router, limiter
from .accounts import router as accounts_router

# Main admin router
router = APIRouter()

router.include_router(auth_router, tags=["auth"])

__all__ = ["router", "accounts_router", "limiter"]
