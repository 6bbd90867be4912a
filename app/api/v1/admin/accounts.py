"""
Admin account management
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import get_current_admin
from app.schemas.admin import AdminCreate, AdminResponse
from app.services.admin_service import AdminService

router = APIRouter()


@router.post("", response_model=AdminResponse, status_code=status.HTTP_201_CREATED)
async def create_admin(
    payload: AdminCreate,
    db: Session = Depends(get_db),
    admin: dict = Depends(get_current_admin),
):
    """Create another admin account. Only an existing admin can do this."""
    return AdminService(db).create(payload.username, payload.password)
