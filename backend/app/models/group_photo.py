from sqlmodel import SQLModel, Field
from uuid import UUID, uuid4
from datetime import datetime, timezone
from typing import Optional


class GroupPhoto(SQLModel, table=True):
    """Admin-managed photo of a student group, keyed by group name."""

    __tablename__ = "group_photos"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    group_name: str = Field(unique=True, index=True, max_length=100)
    photo_url: Optional[str] = Field(default=None, max_length=500)
    thumbnail_url: Optional[str] = Field(default=None, max_length=500)

    updated_at: Optional[datetime] = Field(default=None)
    updated_by: Optional[UUID] = Field(default=None, foreign_key="users.id")
