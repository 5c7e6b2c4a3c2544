from pydantic import BaseModel, EmailStr


class UserLogin(BaseModel):
    """Admin login request."""

    email: EmailStr
    password: str


class Token(BaseModel):
    """JWT token response."""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class RefreshTokenRequest(BaseModel):
    """Token refresh request."""

    refresh_token: str
