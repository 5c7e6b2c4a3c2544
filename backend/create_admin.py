#!/usr/bin/env python3
"""
Create an admin account, or promote an existing one.

Usage:
    python create_admin.py EMAIL --name "Display Name" [--password PASSWORD]

The password is prompted for when not given on the command line.
"""

import sys
import argparse
import getpass
import logging
from datetime import datetime, timezone
from pathlib import Path

# Add the app directory to Python path
sys.path.insert(0, str(Path(__file__).parent))

from sqlmodel import SQLModel, Session, select
from app.core.database import engine
from app.core.security import get_password_hash
from app.models.user import User

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger("create_admin")


def create_admin(session: Session, email: str, display_name: str, password: str) -> User:
    """Create or update the admin account for an email address."""
    user = session.exec(select(User).where(User.email == email)).first()

    if user:
        logger.info(f"Promoting existing account {email} to admin")
        user.is_admin = True
        user.is_active = True
        user.hashed_password = get_password_hash(password)
        user.updated_at = datetime.now(timezone.utc)
    else:
        logger.info(f"Creating admin account {email}")
        user = User(
            email=email,
            display_name=display_name,
            hashed_password=get_password_hash(password),
            is_admin=True,
        )

    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def main() -> int:
    parser = argparse.ArgumentParser(description="Create or promote an admin account")
    parser.add_argument("email", help="Admin email address")
    parser.add_argument("--name", default="Admin", help="Display name")
    parser.add_argument("--password", help="Password (prompted when omitted)")
    args = parser.parse_args()

    if engine is None:
        logger.error("Database is not available. Check DATABASE_URL.")
        return 1

    password = args.password or getpass.getpass("Password: ")
    if len(password) < 8:
        logger.error("Password must be at least 8 characters")
        return 1

    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        user = create_admin(session, args.email, args.name, password)

    print(f"✅ Admin ready: {user.email} ({user.id})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
