"""
Unit tests for SQLModel database models.
"""

from datetime import timezone

import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel import select

from app.models import (
    User,
    Student,
    StudentGroup,
    GroupMember,
    Teacher,
    GalleryPhoto,
    Message,
    MessageStatus,
    GroupPhoto,
)


def test_user_defaults(db_session):
    """Test creating a user."""
    user = User(email="admin@example.com", display_name="Admin", hashed_password="hash")

    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)

    assert user.id is not None
    assert user.is_active is True
    assert user.is_admin is False
    assert user.token_version == 0
    assert user.created_at is not None


def test_student_optional_fields(db_session):
    student = Student(name="Zoya", batch="2021-2025")
    db_session.add(student)
    db_session.commit()
    db_session.refresh(student)

    assert student.role is None
    assert student.bio is None
    assert student.email is None


def test_group_membership_join(db_session):
    """Test linking students to a group through the join table."""
    group = StudentGroup(name="Friend Squad", emoji="💕")
    nida = Student(name="Nida Arshad", batch="2021-2025")
    moniba = Student(name="Moniba Tahir", batch="2021-2025")
    db_session.add_all([group, nida, moniba])
    db_session.commit()

    db_session.add_all([
        GroupMember(group_id=group.id, student_id=nida.id),
        GroupMember(group_id=group.id, student_id=moniba.id),
    ])
    db_session.commit()

    members = db_session.exec(
        select(Student)
        .join(GroupMember, GroupMember.student_id == Student.id)
        .where(GroupMember.group_id == group.id)
        .order_by(Student.name)
    ).all()
    assert [m.name for m in members] == ["Moniba Tahir", "Nida Arshad"]


def test_group_photo_name_is_unique(db_session):
    db_session.add(GroupPhoto(group_name="CS Army"))
    db_session.commit()

    db_session.add(GroupPhoto(group_name="CS Army"))
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()


def test_message_defaults_to_pending(db_session):
    message = Message(author_name="Ali", message="Congratulations!")
    db_session.add(message)
    db_session.commit()
    db_session.refresh(message)

    assert message.status == MessageStatus.PENDING
    assert message.approved_at is None
    assert message.author_email is None


def test_gallery_photo_untagged(db_session):
    photo = GalleryPhoto(photo_url="/media/gallery/farewell.jpg")
    db_session.add(photo)
    db_session.commit()
    db_session.refresh(photo)

    assert photo.category is None


def test_teacher_creation(db_session):
    teacher = Teacher(name="Dr. Amna", role="HOD", designation="Associate Professor")
    db_session.add(teacher)
    db_session.commit()
    db_session.refresh(teacher)

    assert teacher.id is not None
    assert teacher.photo_url is None


def test_timestamp_defaults_are_timezone_aware():
    """Default timestamps carry UTC rather than being naive."""
    rows = [
        User(email="admin@example.com", display_name="Admin", hashed_password="hash"),
        Student(name="Zoya", batch="2021-2025"),
        StudentGroup(name="CS Army"),
        Teacher(name="Dr. Amna", role="HOD"),
        GalleryPhoto(photo_url="/media/gallery/a.jpg"),
        Message(author_name="Ali", message="Hi"),
    ]

    for row in rows:
        assert row.created_at.tzinfo is timezone.utc, type(row).__name__
