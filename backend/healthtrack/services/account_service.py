"""Account service: signup, login and identity lookup."""
import logging
from typing import Optional, Tuple
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from healthtrack.errors import ConflictError, InvalidCredentials, NotFound, ValidationError
from healthtrack.models.user import User
from healthtrack.schemas.auth import LoginRequest, SignupRequest
from healthtrack.services import user_store
from healthtrack.services.auth_service import (
    BCRYPT_MAX_PASSWORD_BYTES,
    PasswordHasher,
    TokenIssuer,
)

logger = logging.getLogger(__name__)


class AccountService:
    """Orchestrates the credential store, password hasher and token issuer."""

    def __init__(
        self,
        hasher: PasswordHasher,
        issuer: TokenIssuer,
        password_min_length: int = 6,
    ):
        self.hasher = hasher
        self.issuer = issuer
        self.password_min_length = password_min_length

    def _validate_signup(self, data: SignupRequest) -> None:
        if not data.name or not data.email or not data.password:
            raise ValidationError("All fields are required")
        if len(data.password) < self.password_min_length:
            raise ValidationError(
                f"Password must be at least {self.password_min_length} characters"
            )
        if len(data.password.encode('utf-8')) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes"
            )

    async def signup(self, db: AsyncSession, data: SignupRequest) -> Tuple[User, str]:
        """
        Register a new account and issue its first token.

        Returns:
            Tuple of (user, token)
        """
        self._validate_signup(data)

        if await user_store.find_user_by_email(db, data.email):
            raise ConflictError("Email already registered")

        password_hash = await run_in_threadpool(self.hasher.hash, data.password)

        try:
            user = await user_store.insert_user(db, data.name, data.email, password_hash)
        except IntegrityError as exc:
            # Lost the race against a concurrent signup for the same email
            raise ConflictError("Email already registered") from exc

        token = self.issuer.issue(user.id)
        logger.info("Created user %s (%s)", user.id, user.email)
        return user, token

    async def login(self, db: AsyncSession, data: LoginRequest) -> Tuple[User, str]:
        """
        Check credentials and issue a fresh token.

        Unknown email and wrong password raise the same InvalidCredentials.
        """
        if not data.email or not data.password:
            raise ValidationError("Email and password required")

        user = await user_store.find_user_by_email(db, data.email)
        if user is None:
            logger.info("Failed login for unknown email")
            raise InvalidCredentials()

        valid = await run_in_threadpool(self.hasher.verify, data.password, user.password_hash)
        if not valid:
            logger.info("Failed login for user %s", user.id)
            raise InvalidCredentials()

        token = self.issuer.issue(user.id)
        logger.info("User %s logged in", user.id)
        return user, token

    async def me(self, db: AsyncSession, user_id: int) -> User:
        """Resolve a verified user id to its account."""
        user: Optional[User] = await user_store.get_user_by_id(db, user_id)
        if user is None:
            raise NotFound("User not found")
        return user
