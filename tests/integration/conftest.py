"""
Fixtures for API tests: the real app and use cases, wired to in-memory fakes.
"""
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from account_service.di.base_container import BaseContainer
from account_service.di.providers import AuthProvider, UserProvider
from account_service.domain.repositories.otp_registry import OtpRegistry
from account_service.domain.repositories.user_repository import UserRepository
from account_service.domain.services.notifier import Notifier
from account_service.domain.services.password_hasher import PasswordHasher


@pytest.fixture
def test_container(user_repo, password_hasher, otp_registry, notifier):
    container = BaseContainer()
    container.register_singleton(UserRepository, user_repo)
    container.register_singleton(PasswordHasher, password_hasher)
    container.register_singleton(OtpRegistry, otp_registry)
    container.register_singleton(Notifier, notifier)
    AuthProvider.register(container)
    UserProvider.register(container)
    return container


@pytest.fixture
def client(test_container):
    """Test client running the app lifespan without touching MongoDB."""
    from account_service.main import app

    with patch("account_service.api.v1.auth_controller.get_container", return_value=test_container), patch(
        "account_service.api.v1.user_controller.get_container", return_value=test_container
    ), patch("account_service.main.ensure_user_indexes", new_callable=AsyncMock), patch(
        "account_service.main.close_database"
    ):
        with TestClient(app) as c:
            yield c


@pytest.fixture
def registered(client, registration_data):
    """Register the default user through the API and return the response body."""
    response = client.post("/api/v1/auth/register", json=registration_data)
    assert response.status_code == 201
    return response.json()
