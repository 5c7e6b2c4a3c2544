import logging
from datetime import datetime, timezone
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ..core.config import settings
from ..core.database import get_db
from ..core.deps import get_current_admin
from ..core.storage import (
    generate_object_name,
    public_url,
    remove_stored_file,
    save_upload_file,
)
from ..core.thumbs import create_thumbnail
from ..models.group_photo import GroupPhoto
from ..models.message import Message, MessageStatus
from ..models.user import User
from ..schemas.group import GroupPhotoResponse
from ..schemas.message import MessageAdminResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/group-photos", response_model=List[GroupPhotoResponse])
async def list_group_photos(
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    """List group photo rows ordered by group name."""
    return db.exec(select(GroupPhoto).order_by(GroupPhoto.group_name)).all()


@router.post("/group-photos/{group_name}/photo", response_model=GroupPhotoResponse)
async def upload_group_photo(
    group_name: str,
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    """Upload a group photo, then point the group's row at it."""
    group_photo = db.exec(
        select(GroupPhoto).where(GroupPhoto.group_name == group_name)
    ).first()
    if not group_photo:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Group not found"
        )

    bucket = settings.GROUP_PHOTOS_BUCKET
    object_name = generate_object_name(group_name, file.filename or "")

    # Step 1: store the binary
    file_path = await save_upload_file(file, bucket, object_name)
    thumb_path = create_thumbnail(file_path)

    # Step 2: record its address
    group_photo.photo_url = public_url(bucket, object_name)
    group_photo.thumbnail_url = public_url(bucket, thumb_path.name) if thumb_path else None
    group_photo.updated_at = datetime.now(timezone.utc)
    group_photo.updated_by = current_admin.id

    try:
        db.add(group_photo)
        db.commit()
        db.refresh(group_photo)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to update group photo row for {group_name}: {e}")

        # Don't leave an orphaned object behind
        remove_stored_file(file_path)
        if thumb_path:
            remove_stored_file(thumb_path)

        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Database update failed. The photo was not saved.",
        )

    logger.info(f"Admin {current_admin.email} uploaded photo for group {group_name}")
    return group_photo


@router.get("/messages", response_model=List[MessageAdminResponse])
async def list_messages_for_moderation(
    status_filter: MessageStatus = Query(MessageStatus.PENDING, alias="status"),
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    """List messages in a moderation state, oldest first."""
    return db.exec(
        select(Message)
        .where(Message.status == status_filter)
        .order_by(Message.created_at)
    ).all()


def _get_message(db: Session, message_id: UUID) -> Message:
    message = db.exec(select(Message).where(Message.id == message_id)).first()
    if not message:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Message not found"
        )
    return message


@router.post("/messages/{message_id}/approve", response_model=MessageAdminResponse)
async def approve_message(
    message_id: UUID,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    """Approve a pending message so it appears publicly."""
    message = _get_message(db, message_id)

    if message.status == MessageStatus.APPROVED:
        return message

    message.status = MessageStatus.APPROVED
    message.approved_at = datetime.now(timezone.utc)
    message.approved_by = current_admin.id

    db.add(message)
    db.commit()
    db.refresh(message)

    logger.info(f"Admin {current_admin.email} approved message {message.id}")
    return message


@router.delete("/messages/{message_id}")
async def delete_message(
    message_id: UUID,
    db: Session = Depends(get_db),
    current_admin: User = Depends(get_current_admin),
):
    """Reject and remove a message."""
    message = _get_message(db, message_id)

    db.delete(message)
    db.commit()

    logger.info(f"Admin {current_admin.email} deleted message {message_id}")
    return {"message": "Message deleted"}
