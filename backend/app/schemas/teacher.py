from datetime import datetime
from uuid import UUID
from typing import Optional
from pydantic import BaseModel


class TeacherResponse(BaseModel):
    """Teacher card."""

    id: UUID
    name: str
    role: str
    designation: Optional[str] = None
    photo_url: Optional[str] = None
    description: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
