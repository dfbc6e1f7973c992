"""Application error taxonomy.

Services raise these exceptions; the HTTP layer is the only place that turns
them into status codes and ``{"message": ...}`` bodies.
"""
import enum
from typing import Optional


class ErrorKind(str, enum.Enum):
    """Closed set of failure kinds surfaced to clients."""
    VALIDATION = "validation"
    CONFLICT = "conflict"
    INVALID_CREDENTIALS = "invalid_credentials"
    UNAUTHENTICATED = "unauthenticated"
    INVALID_OR_EXPIRED_TOKEN = "invalid_or_expired_token"
    NOT_FOUND = "not_found"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


class HealthTrackError(Exception):
    """Base class for all errors reported to API clients."""

    kind: ErrorKind = ErrorKind.INTERNAL
    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(HealthTrackError):
    kind = ErrorKind.VALIDATION
    status_code = 400
    default_message = "Invalid request"


class ConflictError(HealthTrackError):
    kind = ErrorKind.CONFLICT
    status_code = 400
    default_message = "Email already registered"


class InvalidCredentials(HealthTrackError):
    """Wrong password or unknown email; the two are never told apart."""
    kind = ErrorKind.INVALID_CREDENTIALS
    status_code = 401
    default_message = "Invalid credentials"


class Unauthenticated(HealthTrackError):
    kind = ErrorKind.UNAUTHENTICATED
    status_code = 401
    default_message = "Authentication required"


class InvalidOrExpiredToken(HealthTrackError):
    """Forged, malformed and expired tokens all end up here."""
    kind = ErrorKind.INVALID_OR_EXPIRED_TOKEN
    status_code = 401
    default_message = "Invalid or expired token"


class NotFound(HealthTrackError):
    kind = ErrorKind.NOT_FOUND
    status_code = 404
    default_message = "Not found"


class ConfigurationError(HealthTrackError):
    kind = ErrorKind.CONFIGURATION
    status_code = 500
    default_message = "Server misconfigured"


class InternalError(HealthTrackError):
    kind = ErrorKind.INTERNAL
    status_code = 500
    default_message = "Internal server error"
