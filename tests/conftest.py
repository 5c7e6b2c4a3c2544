import os
import tempfile
from datetime import datetime, timedelta, timezone

# Settings are read at import time, so point them at test resources first
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="reunion-test-"))
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app import models  # noqa: F401
from app.core.config import settings
from app.core.database import get_db
from app.core.security import create_access_token, get_password_hash
from app.models.user import User
from app.models.student import Student
from main import app


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    return engine


@pytest.fixture
def db_session(engine):
    """Create a database session for testing."""
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(db_session):
    """API client whose requests share the test session."""

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def upload_dir(tmp_path):
    """Point object storage at a temporary directory."""
    original_upload_dir = settings.UPLOAD_DIR
    settings.UPLOAD_DIR = str(tmp_path)
    yield tmp_path
    settings.UPLOAD_DIR = original_upload_dir


@pytest.fixture
def admin_user(db_session):
    user = User(
        email="admin@example.com",
        display_name="Reunion Admin",
        hashed_password=get_password_hash("correct-horse"),
        is_admin=True,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def admin_headers(admin_user):
    token = create_access_token(str(admin_user.id), admin_user.token_version)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def students(db_session):
    """A small class; inserted out of name order on purpose."""
    rows = [
        Student(name="Iqra Aslam", batch="2021-2025", role="GR", email="iqra@example.com"),
        Student(name="Ali Khan", batch="2021-2025", role="CR", bio="Always at the canteen"),
        Student(name="Zoya", batch="2020-2024", role="Student"),
        Student(name="Haroon Hafeez", batch="2020-2024", email="haroon@example.com"),
    ]
    db_session.add_all(rows)
    db_session.commit()
    return rows


def minutes_ago(minutes: int) -> datetime:
    return datetime.now(timezone.utc) - timedelta(minutes=minutes)
