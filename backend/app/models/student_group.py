from sqlmodel import SQLModel, Field
from uuid import UUID, uuid4
from datetime import datetime, timezone
from typing import Optional


class StudentGroup(SQLModel, table=True):
    """A friend group shown in the groups section."""

    __tablename__ = "student_groups"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(unique=True, index=True, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    emoji: Optional[str] = Field(default=None, max_length=16)
    photo_url: Optional[str] = Field(default=None, max_length=500)

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class GroupMember(SQLModel, table=True):
    """Join table between student groups and students."""

    __tablename__ = "group_members"

    group_id: UUID = Field(foreign_key="student_groups.id", primary_key=True)
    student_id: UUID = Field(foreign_key="students.id", primary_key=True)
