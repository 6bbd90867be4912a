"""
Admin Service - back-office accounts and login
"""
import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import Conflict, Unauthorized
from app.core.monitoring import service_operation
from app.core.security import get_password_hash, verify_password, create_admin_token
from app.models.admin import Admin

logger = logging.getLogger(__name__)


class AdminService:

    def __init__(self, db: Session):
        self.db = db
        self.entity_name = "admin"

    def get_by_username(self, username: str) -> Optional[Admin]:
        return self.db.query(Admin).filter(Admin.username == username).first()

    @service_operation
    def create(self, username: str, password: str) -> Admin:
        """
        Raises:
            Conflict: username already taken
        """
        if self.get_by_username(username):
            raise Conflict("ADMIN_EXISTS", username=username)

        admin = Admin(username=username, password_hash=get_password_hash(password))
        self.db.add(admin)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise Conflict("ADMIN_EXISTS", username=username)
        self.db.refresh(admin)

        logger.info(f"Admin '{username}' created")
        return admin

    @service_operation
    def authenticate(self, username: str, password: str) -> str:
        """
        Check credentials and issue an access token.

        Raises:
            Unauthorized: unknown user or wrong password
        """
        admin = self.get_by_username(username)
        if not admin or not verify_password(password, admin.password_hash):
            logger.warning(f"Failed login attempt for username: {username}")
            raise Unauthorized("WRONG_CREDENTIALS")

        logger.info(f"Admin '{username}' logged in")
        return create_admin_token(admin.id, admin.username)

    def ensure_default_admin(self) -> Optional[Admin]:
        """Create the ADMIN_USERNAME/ADMIN_PASSWORD account on first start."""
        if not settings.ADMIN_USERNAME or not settings.ADMIN_PASSWORD:
            return None
        existing = self.get_by_username(settings.ADMIN_USERNAME)
        if existing:
            return existing
        return self.create(settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD)
