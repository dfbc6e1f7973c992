"""Authentication API routes and the bearer-token gate."""
from datetime import timedelta
from typing import Optional
from fastapi import APIRouter, Depends, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from healthtrack.config import Settings, get_settings
from healthtrack.database import get_db
from healthtrack.errors import Unauthenticated
from healthtrack.schemas.auth import (
    SignupRequest,
    LoginRequest,
    AuthResponse,
    MeResponse,
    UserPublic,
    UserDetail,
)
from healthtrack.services.account_service import AccountService
from healthtrack.services.auth_service import PasswordHasher, TokenIssuer, TokenVerifier

router = APIRouter()
security = HTTPBearer(auto_error=False)


def get_token_issuer(settings: Settings = Depends(get_settings)) -> TokenIssuer:
    return TokenIssuer(
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        lifetime=timedelta(days=settings.jwt_expire_days),
    )


def get_token_verifier(settings: Settings = Depends(get_settings)) -> TokenVerifier:
    return TokenVerifier(settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def get_account_service(
    settings: Settings = Depends(get_settings),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> AccountService:
    return AccountService(
        PasswordHasher(rounds=settings.bcrypt_rounds),
        issuer,
        password_min_length=settings.password_min_length,
    )


async def get_current_user_id(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    verifier: TokenVerifier = Depends(get_token_verifier),
) -> int:
    """
    Dependency resolving the bearer token to a user id.

    The id is trusted for the token's lifetime; the user table is not
    consulted here.
    """
    if credentials is None or not credentials.credentials:
        raise Unauthenticated()

    user_id = verifier.verify(credentials.credentials)
    request.state.user_id = user_id
    return user_id


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    request: SignupRequest,
    db: AsyncSession = Depends(get_db),
    accounts: AccountService = Depends(get_account_service),
):
    """User signup endpoint."""
    user, token = await accounts.signup(db, request)
    return AuthResponse(
        message="User created",
        token=token,
        user=UserPublic.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    db: AsyncSession = Depends(get_db),
    accounts: AccountService = Depends(get_account_service),
):
    """User login endpoint."""
    user, token = await accounts.login(db, request)
    return AuthResponse(
        message="Login successful",
        token=token,
        user=UserPublic.model_validate(user),
    )


@router.get("/me", response_model=MeResponse)
async def get_me(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
    accounts: AccountService = Depends(get_account_service),
):
    """Get current user information."""
    user = await accounts.me(db, user_id)
    return MeResponse(user=UserDetail.model_validate(user))
