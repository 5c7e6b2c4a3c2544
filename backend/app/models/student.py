from sqlmodel import SQLModel, Field, Column
from sqlalchemy import Text
from uuid import UUID, uuid4
from datetime import datetime, timezone
from typing import Optional


class Student(SQLModel, table=True):
    """A member of the graduating class."""

    __tablename__ = "students"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100, index=True)
    batch: str = Field(max_length=20, index=True)  # e.g. "2021-2025"

    # Free text; "CR" and "GR" get a badge on the directory card
    role: Optional[str] = Field(default=None, max_length=50)

    photo_url: Optional[str] = Field(default=None, max_length=500)
    bio: Optional[str] = Field(default=None, sa_column=Column(Text))
    email: Optional[str] = Field(default=None, max_length=255)

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
