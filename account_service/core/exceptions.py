"""
Exception hierarchy for the account service.

Use cases raise these; the API layer maps them to HTTP responses using the
``status_code`` carried by each class. Every error can carry a user-facing
message that is safe to render; ``message`` is for logs only.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class AccountServiceError(Exception):
    """Base exception for all account service errors."""

    status_code: int = 500
    default_user_message: str = "Server error, please try again"

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or self.default_user_message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Caller errors
# -----------------------------------------------------------------------------


class ValidationError(AccountServiceError):
    """Raised when input is malformed or missing."""

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, user_message=message, details={"field": field} if field else None)
        self.field = field


class DuplicateKeyError(AccountServiceError):
    """Raised when an email, username or phone is already registered."""

    status_code = 409
    default_user_message = "Email or phone already registered"


class NotFoundError(AccountServiceError):
    """Raised when no matching user exists."""

    status_code = 404
    default_user_message = "User not found"


class InvalidCredentialsError(AccountServiceError):
    """Raised on login mismatch. Never says which half was wrong."""

    status_code = 401
    default_user_message = "Email or password is incorrect!"


# -----------------------------------------------------------------------------
# Password reset
# -----------------------------------------------------------------------------


class InvalidCodeError(AccountServiceError):
    """Raised when a submitted reset code does not match the pending one."""

    status_code = 400
    default_user_message = "Invalid OTP"


class NoPendingRequestError(AccountServiceError):
    """Raised when a reset is attempted without a live reset request."""

    status_code = 400
    default_user_message = "OTP expired or invalid"


# -----------------------------------------------------------------------------
# Dependencies
# -----------------------------------------------------------------------------


class DependencyFailureError(AccountServiceError):
    """Raised when the store, hasher or notifier is unavailable."""

    status_code = 503
