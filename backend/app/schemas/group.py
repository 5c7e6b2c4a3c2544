from datetime import datetime
from uuid import UUID
from typing import List, Optional
from pydantic import BaseModel


class GroupMemberResponse(BaseModel):
    """Student listed as a group member."""

    id: UUID
    name: str

    class Config:
        from_attributes = True


class GroupResponse(BaseModel):
    """Student group with its members."""

    id: UUID
    name: str
    description: Optional[str] = None
    emoji: Optional[str] = None
    photo_url: Optional[str] = None
    members: List[GroupMemberResponse] = []


class GroupPhotoResponse(BaseModel):
    """Admin view of a group photo row."""

    id: UUID
    group_name: str
    photo_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    updated_at: Optional[datetime] = None
    updated_by: Optional[UUID] = None

    class Config:
        from_attributes = True
