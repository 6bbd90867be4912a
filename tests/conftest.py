"""
Shared fixtures: SQLite test database, API client and admin credentials
"""
import os

# Settings are read at import time, so the environment comes first
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["DOMAIN"] = "https://example.com"
os.environ["REDIS_URL"] = "redis://localhost:6399/0"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ.pop("ADMIN_USERNAME", None)
os.environ.pop("ADMIN_PASSWORD", None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.main import app
from app.core.database import Base, get_db
from app.core.security import create_admin_token


SQLALCHEMY_DATABASE_URL = os.environ["DATABASE_URL"]
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    """Override database dependency for testing"""
    try:
        db = TestingSessionLocal()
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(scope="function")
def db_session():
    """Create test database session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """API client bound to the test database"""
    return TestClient(app)


@pytest.fixture
def auth_headers():
    """Bearer header carrying a valid admin token"""
    token = create_admin_token(1, "admin")
    return {"Authorization": f"Bearer {token}"}
