import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session, select

from ..core.config import settings
from ..core.database import get_db
from ..models.message import Message, MessageStatus
from ..schemas.message import MessageCreate, MessageResponse, MessageSubmitResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def fetch_approved_messages(db: Session, limit: Optional[int] = None) -> List[Message]:
    """Approved messages, newest first."""
    return db.exec(
        select(Message)
        .where(Message.status == MessageStatus.APPROVED)
        .order_by(Message.created_at.desc())
        .limit(limit or settings.MESSAGES_LIMIT)
    ).all()


@router.get("", response_model=List[MessageResponse])
async def list_messages(
    limit: Optional[int] = Query(None, ge=1, le=settings.MESSAGES_MAX_LIMIT),
    db: Session = Depends(get_db),
):
    """List the latest approved messages."""
    return fetch_approved_messages(db, limit)


@router.post("", response_model=MessageSubmitResponse, status_code=status.HTTP_201_CREATED)
async def submit_message(message_data: MessageCreate, db: Session = Depends(get_db)):
    """Submit a guestbook message. It stays hidden until a moderator approves it."""
    message = Message(
        author_name=message_data.author_name,
        author_email=message_data.author_email,
        message=message_data.message,
        status=MessageStatus.PENDING,
    )

    db.add(message)
    db.commit()
    db.refresh(message)

    logger.info(f"New message {message.id} from {message.author_name} awaiting approval")
    return MessageSubmitResponse(id=message.id, status=message.status)
