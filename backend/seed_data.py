#!/usr/bin/env python3
"""
Seed the default student groups and their group-photo rows.

Groups and students that already exist (matched by name) are left alone,
so the script can be run repeatedly.

Usage:
    python seed_data.py [--dry-run]
"""

import sys
import argparse
import logging
from pathlib import Path

# Add the app directory to Python path
sys.path.insert(0, str(Path(__file__).parent))

from sqlmodel import SQLModel, Session, select
from app.core.database import engine
from app.models.group_photo import GroupPhoto
from app.models.student import Student
from app.models.student_group import GroupMember, StudentGroup

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger("seed_data")

DEFAULT_BATCH = "2021-2025"

DEFAULT_GROUPS = [
    {
        "name": "Late Lateefs",
        "emoji": "😁",
        "members": ["Saliha Afzal", "Ayeza Habib", "Esha Akbar", "Fizza Asghar", "Iqra Malik"],
    },
    {
        "name": "Friend Squad",
        "emoji": "💕",
        "members": ["Moniba Tahir", "Nida Arshad", "Zoya", "Tahira Mustaq"],
    },
    {
        "name": "Innocent Girls",
        "emoji": "🌸",
        "members": ["Maryam Asghar", "Ayeza Habib", "Maryam Akbar", "Iqra Ashraf"],
    },
    {
        "name": "CS Army",
        "emoji": "🌟",
        "members": ["Iqra Naz", "Maryam Fatime", "Iqra Arshad", "Esha Maqsood"],
    },
    {
        "name": "V Close Group",
        "emoji": "🌟",
        "members": ["Syed Nishaf Hussan", "Haroon Hafeez", "M. Haris"],
    },
]


def seed_groups(session: Session, groups: list = DEFAULT_GROUPS, dry_run: bool = False) -> dict:
    """
    Insert missing groups, members and group-photo rows.

    Returns:
        Counts of created rows
    """
    stats = {"groups": 0, "students": 0, "memberships": 0, "group_photos": 0}

    students = {s.name: s for s in session.exec(select(Student)).all()}

    for group_def in groups:
        group = session.exec(
            select(StudentGroup).where(StudentGroup.name == group_def["name"])
        ).first()
        if not group:
            group = StudentGroup(name=group_def["name"], emoji=group_def.get("emoji"))
            session.add(group)
            stats["groups"] += 1

        for member_name in group_def["members"]:
            student = students.get(member_name)
            if not student:
                student = Student(name=member_name, batch=DEFAULT_BATCH)
                students[member_name] = student
                session.add(student)
                stats["students"] += 1

            session.flush()
            link = session.get(GroupMember, (group.id, student.id))
            if not link:
                session.add(GroupMember(group_id=group.id, student_id=student.id))
                stats["memberships"] += 1

        photo_row = session.exec(
            select(GroupPhoto).where(GroupPhoto.group_name == group_def["name"])
        ).first()
        if not photo_row:
            session.add(GroupPhoto(group_name=group_def["name"]))
            stats["group_photos"] += 1

    if dry_run:
        session.rollback()
    else:
        session.commit()

    return stats


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed default student groups")
    parser.add_argument("--dry-run", action="store_true", help="Report without writing")
    args = parser.parse_args()

    if engine is None:
        logger.error("Database is not available. Check DATABASE_URL.")
        return 1

    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        stats = seed_groups(session, dry_run=args.dry_run)

    prefix = "Would create" if args.dry_run else "Created"
    print(f"🌱 {prefix}: {stats['groups']} groups, {stats['students']} students, "
          f"{stats['memberships']} memberships, {stats['group_photos']} group photo rows")
    return 0


if __name__ == "__main__":
    sys.exit(main())
