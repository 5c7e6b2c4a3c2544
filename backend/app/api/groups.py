from typing import Dict, List, Optional

from fastapi import APIRouter, Depends
from sqlmodel import Session, select

from ..core.database import get_db
from ..models.student import Student
from ..models.student_group import StudentGroup, GroupMember
from ..models.group_photo import GroupPhoto
from ..schemas.group import GroupMemberResponse, GroupResponse

router = APIRouter()


def fetch_group_photo_urls(db: Session) -> Dict[str, Optional[str]]:
    """Admin-uploaded photo URL per group name."""
    rows = db.exec(select(GroupPhoto.group_name, GroupPhoto.photo_url)).all()
    return {group_name: photo_url for group_name, photo_url in rows}


def fetch_groups(db: Session) -> List[GroupResponse]:
    """Student groups with their members, ordered by name."""
    groups = db.exec(select(StudentGroup).order_by(StudentGroup.name)).all()
    photo_urls = fetch_group_photo_urls(db)

    members_by_group: Dict = {group.id: [] for group in groups}
    rows = db.exec(
        select(GroupMember.group_id, Student)
        .select_from(GroupMember)
        .join(Student, Student.id == GroupMember.student_id)
        .order_by(Student.name)
    ).all()
    for group_id, student in rows:
        if group_id in members_by_group:
            members_by_group[group_id].append(GroupMemberResponse.model_validate(student))

    return [
        GroupResponse(
            id=group.id,
            name=group.name,
            description=group.description,
            emoji=group.emoji,
            photo_url=group.photo_url or photo_urls.get(group.name),
            members=members_by_group[group.id],
        )
        for group in groups
    ]


@router.get("", response_model=List[GroupResponse])
async def list_groups(db: Session = Depends(get_db)):
    """List student groups with their members and photos."""
    return fetch_groups(db)
