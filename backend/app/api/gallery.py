import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlmodel import Session, select

from reunion_core import PhotoCategory, count_by_category, filter_by_category, toggle_category

from ..core.database import get_db
from ..models.gallery import GalleryPhoto
from ..schemas.gallery import CategoryButton, GalleryPhotoResponse, GalleryResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def fetch_gallery(db: Session) -> List[GalleryPhoto]:
    """All gallery photos, newest first."""
    return db.exec(select(GalleryPhoto).order_by(GalleryPhoto.created_at.desc())).all()


@router.get("", response_model=GalleryResponse)
async def list_gallery(
    category: Optional[str] = Query(None, description="Show only this category"),
    db: Session = Depends(get_db),
):
    """List gallery photos with a count per category."""
    valid = [c.value for c in PhotoCategory]
    if category is not None and category not in valid:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown category '{category}'. Choose one of: {', '.join(valid)}",
        )

    photos = fetch_gallery(db)
    counts = count_by_category(photos)
    shown = filter_by_category(photos, category)

    buttons = [
        CategoryButton(
            name=c.value,
            icon=c.icon,
            count=counts[c.value],
            selected=category == c.value,
            next_category=toggle_category(category, c.value),
        )
        for c in PhotoCategory
    ]

    return GalleryResponse(
        photos=[GalleryPhotoResponse.model_validate(photo) for photo in shown],
        categories=buttons,
        active_category=category,
        total=len(photos),
    )
