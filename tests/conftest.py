"""
Shared pytest fixtures for account-service tests.
"""
import os
import uuid
from typing import Any, Dict, List, Optional, Tuple
from unittest.mock import MagicMock, patch

import pytest

from account_service.core.exceptions import DuplicateKeyError
from account_service.core.security import BcryptPasswordHasher
from account_service.domain.constants import UserFields
from account_service.domain.models.user import User
from account_service.domain.repositories.user_repository import UserRepository
from account_service.domain.services.notifier import NotificationMessage, Notifier
from account_service.infrastructure.cache.in_memory_otp_registry import InMemoryOtpRegistry
from account_service.utils.datetime_utils import now


class InMemoryUserRepository(UserRepository):
    """UserRepository fake with the same uniqueness rules as the Mongo indexes."""

    def __init__(self) -> None:
        self.users: Dict[str, User] = {}

    def _clash(self, candidate: User, ignore_id: Optional[str] = None) -> Optional[str]:
        for user in self.users.values():
            if user.id == ignore_id:
                continue
            if user.username == candidate.username:
                return "Username already taken"
            if user.email == candidate.email or user.phone == candidate.phone:
                return "Email or phone already registered"
        return None

    def _copy(self, user: User, **changes: Any) -> User:
        values = dict(
            id=user.id,
            username=user.username,
            email=user.email,
            password_hash=user.password_hash,
            phone=user.phone,
            profession=user.profession,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
        values.update(changes)
        return User(**values)

    async def find_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.email == email), None)

    async def find_by_phone(self, phone: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.phone == phone), None)

    async def find_by_email_or_phone(self, email: str, phone: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.email == email or u.phone == phone), None)

    async def find_by_email_and_phone(self, email: str, phone: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.email == email and u.phone == phone), None)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    async def find_all(self) -> List[User]:
        return list(self.users.values())

    async def create(self, user: User) -> User:
        clash = self._clash(user)
        if clash:
            raise DuplicateKeyError("duplicate key", user_message=clash)
        timestamp = now()
        saved = self._copy(user, id=uuid.uuid4().hex, created_at=timestamp, updated_at=timestamp)
        self.users[saved.id] = saved
        return saved

    async def update_by_id(self, user_id: str, fields: Dict[str, Any]) -> Optional[User]:
        current = self.users.get(user_id)
        if current is None:
            return None
        allowed = {k: v for k, v in fields.items() if k in UserFields.UPDATABLE}
        updated = self._copy(current, updated_at=now(), **allowed)
        clash = self._clash(updated, ignore_id=user_id)
        if clash:
            raise DuplicateKeyError("duplicate key", user_message=clash)
        self.users[user_id] = updated
        return updated

    async def delete_by_id(self, user_id: str) -> bool:
        return self.users.pop(user_id, None) is not None

    async def update_password_by_email(self, email: str, password_hash: str) -> None:
        user = await self.find_by_email(email)
        if user is not None:
            self.users[user.id] = self._copy(user, password_hash=password_hash, updated_at=now())


class RecordingNotifier(Notifier):
    """Notifier that keeps every message; ``fail`` makes delivery report failure."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.sent: List[Tuple[str, NotificationMessage]] = []

    async def deliver(self, destination: str, message: NotificationMessage) -> bool:
        if self.fail:
            return False
        self.sent.append((destination, message))
        return True

    def get_provider_name(self) -> str:
        return "recording"

    def last_code(self) -> str:
        """The code in the most recent reset email"""
        _, message = self.sent[-1]
        return message.body.rsplit(" ", 1)[-1]


@pytest.fixture
def user_repo():
    """Empty in-memory user repository."""
    return InMemoryUserRepository()


@pytest.fixture
def password_hasher():
    """Real bcrypt hasher at the minimum work factor, to keep tests fast."""
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def otp_registry():
    """Registry without expiry."""
    return InMemoryOtpRegistry()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def failing_notifier():
    return RecordingNotifier(fail=True)


@pytest.fixture
def registration_data():
    """Field values for a valid registration."""
    return {
        "username": "Alice",
        "email": "Alice@Example.com",
        "password": "secret1",
        "phone": "9876543210",
        "profession": "Engineer",
    }


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_account_db",
        "BCRYPT_ROUNDS": "4",
        "OTP_TTL_MINUTES": "10",
        "NOTIFIER_PROVIDER": "console",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.bcrypt_rounds = 4
    mock.otp_ttl_minutes = 10
    mock.notifier_provider = "console"
    mock.smtp_host = "smtp.example.com"
    mock.smtp_port = 587
    mock.smtp_user = "mailer@example.com"
    mock.smtp_password = "smtp-password"
    mock.smtp_use_tls = False
    mock.smtp_start_tls = True
    mock.smtp_timeout_seconds = 5.0
    mock.email_from = "mailer@example.com"
    mock.email_from_name = "Account Service"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("account_service.core.config.get_settings", return_value=mock), patch(
        "account_service.core.security.get_settings", return_value=mock
    ), patch(
        "account_service.infrastructure.notifications.email_notifier.get_settings", return_value=mock
    ), patch(
        "account_service.infrastructure.notifications.factory.get_settings", return_value=mock
    ), patch(
        "account_service.di.providers.security_provider.get_settings", return_value=mock
    ):
        yield mock
