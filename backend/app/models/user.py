from sqlmodel import SQLModel, Field
from uuid import UUID, uuid4
from datetime import datetime, timezone
from typing import Optional


class User(SQLModel, table=True):
    """Account that can sign in to the admin panel."""

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    display_name: str = Field(max_length=100)

    # Authentication
    hashed_password: str
    is_active: bool = Field(default=True)
    is_admin: bool = Field(default=False)

    # Bumped on sign-out; tokens carrying an older version are rejected
    token_version: int = Field(default=0)

    # Timestamps
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    last_login: Optional[datetime] = Field(default=None)
