from fastapi import APIRouter, Depends
from sqlmodel import Session

from reunion_core import load_section

from ..core.database import get_db
from ..schemas.gallery import GalleryPhotoResponse
from ..schemas.home import HomeResponse, SectionResponse
from ..schemas.message import MessageResponse
from ..schemas.teacher import TeacherResponse
from .gallery import fetch_gallery
from .groups import fetch_groups
from .messages import fetch_approved_messages
from .teachers import fetch_teachers

router = APIRouter()


@router.get("", response_model=HomeResponse)
async def get_home(db: Session = Depends(get_db)):
    """
    Load every landing-page section independently.

    A section whose read fails is reported as failed while the others
    still render; an empty section is reported as loaded with no items.
    """
    loaders = {
        "groups": lambda: fetch_groups(db),
        "teachers": lambda: [TeacherResponse.model_validate(t) for t in fetch_teachers(db)],
        "memories": lambda: [GalleryPhotoResponse.model_validate(p) for p in fetch_gallery(db)],
        "messages": lambda: [MessageResponse.model_validate(m) for m in fetch_approved_messages(db)],
    }

    sections = {}
    for name, fetch in loaders.items():
        result = load_section(name, fetch)
        if result.error:
            # A failed statement leaves the session unusable for the next section
            db.rollback()
        sections[name] = SectionResponse(
            state=result.state,
            items=result.items,
            error=result.error,
            is_empty=result.is_empty,
        )

    return HomeResponse(sections=sections)
