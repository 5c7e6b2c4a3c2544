import logging
from datetime import datetime, timezone
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session, select

from ..core.database import get_db
from ..core.security import (
    REFRESH_TOKEN_TYPE,
    verify_password,
    create_access_token,
    create_refresh_token,
    verify_token,
)
from ..core.deps import get_current_admin
from ..models.user import User
from ..schemas.auth import UserLogin, Token, RefreshTokenRequest
from ..schemas.user import UserResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _issue_tokens(user: User) -> Token:
    return Token(
        access_token=create_access_token(str(user.id), user.token_version),
        refresh_token=create_refresh_token(str(user.id), user.token_version),
    )


@router.post("/login", response_model=Token)
async def login(user_data: UserLogin, db: Session = Depends(get_db)):
    """Sign in to the admin panel and return JWT tokens."""
    user = db.exec(select(User).where(User.email == user_data.email)).first()
    if not user or not verify_password(user_data.password, user.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    # Only admins have anything to sign in to
    if not user.is_active or not user.is_admin:
        logger.warning(f"Rejected sign-in for non-admin account {user.email}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="This account does not have admin access",
        )

    user.last_login = datetime.now(timezone.utc)
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info(f"Admin {user.email} signed in")
    return _issue_tokens(user)


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(current_user: User = Depends(get_current_admin)):
    """Get current admin information."""
    return current_user


@router.post("/refresh", response_model=Token)
async def refresh_access_token(request_data: RefreshTokenRequest, db: Session = Depends(get_db)):
    """Refresh access token using refresh token."""
    payload = verify_token(request_data.refresh_token, token_type=REFRESH_TOKEN_TYPE)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid refresh token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        user_id = UUID(payload["sub"])
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid refresh token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = db.exec(select(User).where(User.id == user_id)).first()
    if not user or not user.is_active or payload.get("ver", 0) != user.token_version:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found or session ended",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return _issue_tokens(user)


@router.post("/logout")
async def logout(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin),
):
    """End every session of the current user."""
    current_user.token_version += 1
    current_user.updated_at = datetime.now(timezone.utc)
    db.add(current_user)
    db.commit()

    logger.info(f"Admin {current_user.email} signed out")
    return {"message": "Signed out"}
