from datetime import datetime
from uuid import UUID
from pydantic import BaseModel, EmailStr


class UserResponse(BaseModel):
    """User response model."""

    id: UUID
    email: EmailStr
    display_name: str
    is_admin: bool
    created_at: datetime
    last_login: datetime | None = None

    class Config:
        from_attributes = True
