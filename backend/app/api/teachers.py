from typing import List

from fastapi import APIRouter, Depends
from sqlmodel import Session, select

from ..core.database import get_db
from ..models.teacher import Teacher
from ..schemas.teacher import TeacherResponse

router = APIRouter()


def fetch_teachers(db: Session) -> List[Teacher]:
    return db.exec(select(Teacher).order_by(Teacher.created_at)).all()


@router.get("", response_model=List[TeacherResponse])
async def list_teachers(db: Session = Depends(get_db)):
    """List teachers in the order they were added."""
    return fetch_teachers(db)
