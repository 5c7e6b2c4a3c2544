from datetime import datetime
from uuid import UUID
from typing import List, Optional
from pydantic import BaseModel


class GalleryPhotoResponse(BaseModel):
    """Gallery photo."""

    id: UUID
    photo_url: str
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class CategoryButton(BaseModel):
    """A category filter button with its photo count."""

    name: str
    icon: str
    count: int
    selected: bool
    # Category to request when this button is clicked; None clears the filter
    next_category: Optional[str] = None


class GalleryResponse(BaseModel):
    """Gallery listing with category counts."""

    photos: List[GalleryPhotoResponse]
    categories: List[CategoryButton]
    active_category: Optional[str] = None
    total: int
