from sqlmodel import SQLModel, Field, Column
from sqlalchemy import Text
from uuid import UUID, uuid4
from datetime import datetime, timezone
from typing import Optional


class GalleryPhoto(SQLModel, table=True):
    """A photo in the memories gallery."""

    __tablename__ = "gallery"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    photo_url: str = Field(max_length=500)
    title: Optional[str] = Field(default=None, max_length=200)
    description: Optional[str] = Field(default=None, sa_column=Column(Text))

    # One of reunion_core.PhotoCategory, or None for untagged photos
    category: Optional[str] = Field(default=None, max_length=50, index=True)

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)
