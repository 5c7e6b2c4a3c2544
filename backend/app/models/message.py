from sqlmodel import SQLModel, Field, Column
from sqlalchemy import Text
from uuid import UUID, uuid4
from datetime import datetime, timezone
from typing import Optional
from enum import Enum


class MessageStatus(str, Enum):
    """Moderation state of a guestbook message."""

    PENDING = "pending"
    APPROVED = "approved"


class Message(SQLModel, table=True):
    """A guestbook message. Only approved messages are publicly listed."""

    __tablename__ = "messages"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    author_name: str = Field(max_length=100)
    author_email: Optional[str] = Field(default=None, max_length=255)
    message: str = Field(sa_column=Column(Text, nullable=False))

    status: MessageStatus = Field(default=MessageStatus.PENDING, index=True)

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)
    approved_at: Optional[datetime] = Field(default=None)
    approved_by: Optional[UUID] = Field(default=None, foreign_key="users.id")
