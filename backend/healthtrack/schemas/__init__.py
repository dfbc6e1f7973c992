"""Pydantic schemas for request/response models."""
from healthtrack.schemas.auth import (
    SignupRequest,
    LoginRequest,
    UserPublic,
    UserDetail,
    AuthResponse,
    MeResponse,
    TokenPayload,
)
from healthtrack.schemas.activity import (
    ActivityCreate,
    ActivityResponse,
    ActivityEnvelope,
    ActivityListResponse,
    Statistics,
    StatisticsResponse,
    MessageResponse,
)

__all__ = [
    "SignupRequest",
    "LoginRequest",
    "UserPublic",
    "UserDetail",
    "AuthResponse",
    "MeResponse",
    "TokenPayload",
    "ActivityCreate",
    "ActivityResponse",
    "ActivityEnvelope",
    "ActivityListResponse",
    "Statistics",
    "StatisticsResponse",
    "MessageResponse",
]
