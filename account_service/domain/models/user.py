# Standard library imports
import re
from dataclasses import InitVar, dataclass
from datetime import datetime
from typing import Optional

# Local application imports
from ...core.exceptions import ValidationError


USERNAME_MIN_LENGTH = 3
EMAIL_MIN_LENGTH = 5
PASSWORD_MIN_LENGTH = 5
# bcrypt only reads the first 72 bytes and rejects longer input
PASSWORD_MAX_BYTES = 72
PHONE_MIN_DIGITS = 10

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def normalize_email(email: Optional[str]) -> str:
    """Trim and lower-case an email address (stored form)"""
    return (email or "").strip().lower()


def normalize_username(username: Optional[str]) -> str:
    """Trim and lower-case a username (stored form)"""
    return (username or "").strip().lower()


def validate_username(username: str) -> str:
    username = normalize_username(username)
    if len(username) < USERNAME_MIN_LENGTH:
        raise ValidationError(
            f"Username must be at least {USERNAME_MIN_LENGTH} characters long", field="username"
        )
    return username


def validate_email(email: str) -> str:
    email = normalize_email(email)
    if len(email) < EMAIL_MIN_LENGTH or not _EMAIL_PATTERN.match(email):
        raise ValidationError("Enter a valid email", field="email")
    return email


def validate_phone(phone: str) -> str:
    phone = (phone or "").strip()
    if sum(ch.isdigit() for ch in phone) < PHONE_MIN_DIGITS:
        raise ValidationError(f"Phone must be at least {PHONE_MIN_DIGITS} digits", field="phone")
    return phone


def validate_profession(profession: str) -> str:
    profession = (profession or "").strip()
    if not profession:
        raise ValidationError("Profession is required", field="profession")
    return profession


def validate_password(password: str) -> str:
    """Check a plaintext password; it is returned untouched, never normalized"""
    if password is None or len(password) < PASSWORD_MIN_LENGTH:
        raise ValidationError(
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters", field="password"
        )
    if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValidationError(
            f"Password must be at most {PASSWORD_MAX_BYTES} bytes", field="password"
        )
    return password


@dataclass
class User:
    """
    Pure domain model for User entity - no external dependencies.

    ``password_hash`` stays inside the domain and infrastructure layers;
    DTOs returned to callers are built without it.
    """
    id: Optional[str]
    username: str
    email: str
    password_hash: str
    phone: str
    profession: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    # False when loading stored records, which may predate the current rules
    validate: InitVar[bool] = True

    def __post_init__(self, validate: bool) -> None:
        """Business validations (also normalizes the stored forms)"""
        if not validate:
            return
        self.username = validate_username(self.username)
        self.email = validate_email(self.email)
        self.phone = validate_phone(self.phone)
        self.profession = validate_profession(self.profession)
        if not self.password_hash:
            raise ValidationError("Password hash is required", field="password")
