"""
Integration tests for auth and password reset API endpoints.
Uses TestClient with the real use cases over in-memory fakes (no real DB, no SMTP).
Note: Runs full app lifespan (slower). Use: pytest tests/unit/ for fast unit-only runs.
"""
import pytest

pytestmark = pytest.mark.integration

from account_service.domain.services.notifier import Notifier


class TestRegisterAPI:
    """Tests for POST /api/v1/auth/register"""

    def test_register_success(self, registered):
        assert registered["username"] == "alice"
        assert registered["email"] == "alice@example.com"
        assert registered["phone"] == "9876543210"
        assert "password" not in registered
        assert registered["id"]

    def test_register_duplicate_returns_409(self, client, registered, registration_data):
        registration_data["username"] = "someoneelse"
        response = client.post("/api/v1/auth/register", json=registration_data)
        assert response.status_code == 409
        assert response.json()["detail"] == "Email or phone already registered"

    def test_register_short_username_returns_400(self, client, registration_data):
        registration_data["username"] = "  al  "
        response = client.post("/api/v1/auth/register", json=registration_data)
        assert response.status_code == 400
        assert response.json()["field"] == "username"

    def test_register_invalid_body_returns_422(self, client):
        response = client.post(
            "/api/v1/auth/register",
            json={"username": "alice", "email": "not-an-email", "password": "secret1"},
        )
        assert response.status_code == 422


    def test_register_password_over_72_bytes_returns_400(self, client, registration_data):
        registration_data["password"] = "p" * 100
        response = client.post("/api/v1/auth/register", json=registration_data)
        assert response.status_code == 400
        assert response.json()["field"] == "password"


class TestLoginAPI:
    """Tests for POST /api/v1/auth/login"""

    def test_login_success(self, client, registered):
        response = client.post(
            "/api/v1/auth/login", json={"email": "ALICE@example.com", "password": "secret1"}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Login successful"
        assert data["user"]["id"] == registered["id"]
        assert "password" not in data["user"]

    def test_login_wrong_password_returns_401(self, client, registered):
        response = client.post(
            "/api/v1/auth/login", json={"email": "alice@example.com", "password": "wrong-password"}
        )
        assert response.status_code == 401
        assert response.json()["detail"] == "Email or password is incorrect!"

    def test_login_password_over_72_bytes_returns_401(self, client, registered):
        response = client.post(
            "/api/v1/auth/login", json={"email": "alice@example.com", "password": "p" * 100}
        )
        assert response.status_code == 401

    def test_login_unknown_email_same_message(self, client):
        response = client.post(
            "/api/v1/auth/login", json={"email": "nobody@example.com", "password": "secret1"}
        )
        assert response.status_code == 401
        assert response.json()["detail"] == "Email or password is incorrect!"


class TestPasswordResetAPI:
    """Tests for the forgot-password / verify-otp / reset-password flow"""

    def test_full_reset_flow(self, client, registered, notifier):
        response = client.post("/api/v1/auth/forgot-password", json={"email": "alice@example.com"})
        assert response.status_code == 200
        assert response.json()["message"] == "OTP sent to your email"

        code = notifier.last_code()
        response = client.post(
            "/api/v1/auth/verify-otp", json={"email": "alice@example.com", "otp": code}
        )
        assert response.status_code == 200
        assert response.json()["message"] == "OTP verified"

        response = client.post(
            "/api/v1/auth/reset-password", json={"email": "alice@example.com", "password": "newsecret"}
        )
        assert response.status_code == 200
        assert response.json()["message"] == "Password reset successfully"

        old = client.post("/api/v1/auth/login", json={"email": "alice@example.com", "password": "secret1"})
        new = client.post("/api/v1/auth/login", json={"email": "alice@example.com", "password": "newsecret"})
        assert old.status_code == 401
        assert new.status_code == 200

        # the code is consumed by the reset
        again = client.post(
            "/api/v1/auth/reset-password", json={"email": "alice@example.com", "password": "another1"}
        )
        assert again.status_code == 400
        assert again.json()["detail"] == "OTP expired or invalid"

    def test_forgot_password_unknown_email_returns_404(self, client):
        response = client.post("/api/v1/auth/forgot-password", json={"email": "nobody@example.com"})
        assert response.status_code == 404
        assert response.json()["detail"] == "Email not found"

    def test_forgot_password_delivery_failure_returns_503(self, client, registered, notifier):
        notifier.fail = True
        response = client.post("/api/v1/auth/forgot-password", json={"email": "alice@example.com"})
        assert response.status_code == 503
        assert response.json()["detail"] == "Server error, please try again"

    def test_verify_wrong_code_returns_400(self, client, registered, notifier):
        client.post("/api/v1/auth/forgot-password", json={"email": "alice@example.com"})
        wrong = "000000" if notifier.last_code() != "000000" else "111111"
        response = client.post(
            "/api/v1/auth/verify-otp", json={"email": "alice@example.com", "otp": wrong}
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid OTP"

    def test_verify_padded_code_returns_400(self, client, registered, notifier):
        client.post("/api/v1/auth/forgot-password", json={"email": "alice@example.com"})
        response = client.post(
            "/api/v1/auth/verify-otp", json={"email": "alice@example.com", "otp": f" {notifier.last_code()} "}
        )
        assert response.status_code == 400

    def test_reset_without_request_returns_400(self, client, registered):
        response = client.post(
            "/api/v1/auth/reset-password", json={"email": "alice@example.com", "password": "newsecret"}
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "OTP expired or invalid"

    def test_reset_password_over_72_bytes_returns_400(self, client, registered, notifier):
        client.post("/api/v1/auth/forgot-password", json={"email": "alice@example.com"})
        response = client.post(
            "/api/v1/auth/reset-password", json={"email": "alice@example.com", "password": "p" * 100}
        )
        assert response.status_code == 400
        assert response.json()["field"] == "password"

    def test_reset_short_password_returns_422(self, client, registered):
        response = client.post(
            "/api/v1/auth/reset-password", json={"email": "alice@example.com", "password": "abc"}
        )
        assert response.status_code == 422

    def test_notifier_is_the_injected_one(self, test_container, notifier):
        assert test_container.get(Notifier) is notifier
