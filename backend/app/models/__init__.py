"""
SQLModel models for the Class Reunion application.

Importing this package registers every table with SQLModel metadata.
"""

from .user import User
from .student import Student
from .student_group import StudentGroup, GroupMember
from .teacher import Teacher
from .gallery import GalleryPhoto
from .message import Message, MessageStatus
from .group_photo import GroupPhoto

__all__ = [
    "User",
    "Student",
    "StudentGroup",
    "GroupMember",
    "Teacher",
    "GalleryPhoto",
    "Message",
    "MessageStatus",
    "GroupPhoto",
]
