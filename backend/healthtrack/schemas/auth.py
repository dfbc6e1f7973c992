"""Authentication schemas."""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class SignupRequest(BaseModel):
    """Signup request schema. Presence is checked by the account service."""
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    """Login request schema."""
    email: Optional[str] = None
    password: Optional[str] = None


class UserPublic(BaseModel):
    """User fields safe to return to the client."""
    id: int
    name: str
    email: str

    class Config:
        from_attributes = True


class UserDetail(UserPublic):
    """User information returned by /me."""
    created_at: Optional[datetime] = None


class AuthResponse(BaseModel):
    """Signup/login response with JWT token."""
    message: str
    token: str
    user: UserPublic


class MeResponse(BaseModel):
    """Current user response."""
    user: UserDetail


class TokenPayload(BaseModel):
    """JWT token payload."""
    sub: int  # user_id, encoded as a string in the token
    iat: datetime
    exp: datetime
