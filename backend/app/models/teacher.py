from sqlmodel import SQLModel, Field, Column
from sqlalchemy import Text
from uuid import UUID, uuid4
from datetime import datetime, timezone
from typing import Optional


class Teacher(SQLModel, table=True):
    """A faculty member shown in the teachers section."""

    __tablename__ = "teachers"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100)
    role: str = Field(max_length=100)
    designation: Optional[str] = Field(default=None, max_length=100)
    photo_url: Optional[str] = Field(default=None, max_length=500)
    description: Optional[str] = Field(default=None, sa_column=Column(Text))

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)
