#!/usr/bin/env python3
"""
Create an admin account from the command line.

Usage: python scripts/create_admin.py <username> [password]
Prompts for the password when it is not given.
"""
import sys
import os
from getpass import getpass

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from app.core.database import SessionLocal, Base, engine
from app.core.exceptions import AppError
from app.services.admin_service import AdminService
from app.services.localization_service import localization
from app import models  # noqa: F401


def create_admin(username: str, password: str) -> bool:
    """Create the account; returns False when it cannot be created."""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        admin = AdminService(db).create(username, password)
        print(f"✅ Admin '{admin.username}' created (ID: {admin.id})")
        return True
    except AppError as e:
        print(f"❌ {localization.get_translation(e.message_key, 'en', e.params)}")
        return False
    finally:
        db.close()


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python scripts/create_admin.py <username> [password]")
        sys.exit(1)

    username = sys.argv[1]
    password = sys.argv[2] if len(sys.argv) > 2 else getpass("Password: ")
    if len(password) < 8:
        print("❌ Password must be at least 8 characters")
        sys.exit(1)

    success = create_admin(username, password)
    sys.exit(0 if success else 1)
