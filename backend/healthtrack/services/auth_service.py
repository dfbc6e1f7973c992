"""Credential primitives: password hashing and JWT issue/verify."""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
import jwt
import bcrypt
from pydantic import ValidationError as PayloadError
from healthtrack.errors import ConfigurationError, InternalError, InvalidOrExpiredToken
from healthtrack.schemas.auth import TokenPayload

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """Salted bcrypt hashing with a configurable work factor."""

    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a password using bcrypt."""
        try:
            salt = bcrypt.gensalt(rounds=self.rounds)
            return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')
        except (ValueError, TypeError) as exc:
            logger.error("Password hashing failed: %s", exc)
            raise InternalError("Hashing failed") from exc

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against its hash. Malformed hashes never match."""
        if not password or not password_hash:
            return False
        try:
            return bcrypt.checkpw(
                password.encode('utf-8'),
                password_hash.encode('utf-8'),
            )
        except (ValueError, TypeError):
            return False


class TokenIssuer:
    """Mints signed, time-limited bearer tokens."""

    def __init__(
        self,
        secret_key: Optional[str],
        algorithm: str = "HS256",
        lifetime: timedelta = timedelta(days=7),
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.lifetime = lifetime

    def issue(self, user_id: int, now: Optional[datetime] = None) -> str:
        """Create a JWT access token for the given user."""
        if not self.secret_key:
            raise ConfigurationError("JWT_SECRET_KEY is missing in environment variables")
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "iat": issued_at,
            "exp": issued_at + self.lifetime,
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)


class TokenVerifier:
    """Checks signature and expiry of bearer tokens."""

    def __init__(self, secret_key: Optional[str], algorithm: str = "HS256"):
        self.secret_key = secret_key
        self.algorithm = algorithm

    def decode(self, token: str) -> TokenPayload:
        """Decode and validate a JWT access token."""
        if not self.secret_key:
            raise ConfigurationError("JWT_SECRET_KEY is missing in environment variables")
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require": ["sub", "iat", "exp"]},
            )
            return TokenPayload(**payload)
        except (jwt.PyJWTError, PayloadError) as exc:
            raise InvalidOrExpiredToken() from exc

    def verify(self, token: str) -> int:
        """Return the user id a token was issued for."""
        return self.decode(token).sub
