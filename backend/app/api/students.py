import logging
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session, select

from reunion_core import ALL, DirectoryFilter, StudentDirectory, StudentRecord

from ..core.database import get_db
from ..models.student import Student
from ..schemas.student import DirectoryFacets, DirectoryResponse, StudentResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def fetch_students(db: Session) -> List[Student]:
    """All students, ordered by name."""
    return db.exec(select(Student).order_by(Student.name)).all()


def load_directory(db: Session) -> StudentDirectory:
    """Directory snapshot of the current student list."""
    records = [StudentRecord.from_source(student) for student in fetch_students(db)]
    return StudentDirectory.for_students(records)


@router.get("", response_model=DirectoryResponse)
async def list_students(
    search: str = Query("", description="Matched against name, email and bio"),
    batch: str = Query(ALL, description="Exact batch, or 'all'"),
    role: str = Query(ALL, description="Exact role, or 'all'"),
    db: Session = Depends(get_db),
):
    """Search and filter the student directory."""
    directory = load_directory(db)
    criteria = DirectoryFilter(search=search, batch=batch, role=role)
    shown = directory.filter(criteria)

    if criteria.is_active:
        logger.info(f"Directory filter {criteria.active_filters()} matched {len(shown)} of {len(directory)} students")

    return DirectoryResponse(
        students=[StudentResponse.model_validate(record) for record in shown],
        total=len(directory),
        shown=len(shown),
        facets=DirectoryFacets(batches=directory.batches, roles=directory.roles),
        active_filters=criteria.active_filters(),
        has_active_filters=criteria.is_active,
    )


@router.get("/facets", response_model=DirectoryFacets)
async def get_facets(db: Session = Depends(get_db)):
    """Batch and role options for the directory filters."""
    directory = load_directory(db)
    return DirectoryFacets(batches=directory.batches, roles=directory.roles)
