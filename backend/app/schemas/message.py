from datetime import datetime
from uuid import UUID
from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

from ..models.message import MessageStatus


class MessageCreate(BaseModel):
    """Guestbook submission. Name and message are required, email is optional."""

    author_name: str = Field(max_length=100)
    author_email: Optional[EmailStr] = None
    message: str = Field(max_length=2000)

    @field_validator("author_name", "message", mode="before")
    @classmethod
    def strip_required(cls, value):
        if isinstance(value, str):
            value = value.strip()
        if not value:
            raise ValueError("Please fill in your name and message")
        return value

    @field_validator("author_email", mode="before")
    @classmethod
    def blank_email_is_none(cls, value):
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value


class MessageResponse(BaseModel):
    """Publicly visible message."""

    id: UUID
    author_name: str
    message: str
    created_at: datetime

    class Config:
        from_attributes = True


class MessageSubmitResponse(BaseModel):
    """Confirmation of a submitted message."""

    id: UUID
    status: MessageStatus
    message: str = "Message submitted! It will appear after approval."


class MessageAdminResponse(MessageResponse):
    """Message as seen by moderators."""

    author_email: Optional[str] = None
    status: MessageStatus
    approved_at: Optional[datetime] = None
    approved_by: Optional[UUID] = None
