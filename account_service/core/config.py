# Standard library imports
import os
from typing import Final, List, Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "account_service")

        # Password hashing (bcrypt work factor)
        self.bcrypt_rounds: Final[int] = int(os.getenv("BCRYPT_ROUNDS", "10"))

        # Password reset codes; 0 disables expiry
        self.otp_ttl_minutes: Final[int] = int(os.getenv("OTP_TTL_MINUTES", "10"))

        # Notification Configuration
        self.notifier_provider: Final[str] = os.getenv("NOTIFIER_PROVIDER", "console").strip().lower()
        self.smtp_host: Final[str] = os.getenv("SMTP_HOST", "")
        self.smtp_port: Final[int] = int(os.getenv("SMTP_PORT", "587"))
        self.smtp_user: Final[str] = os.getenv("SMTP_USER", "")
        self.smtp_password: Final[str] = os.getenv("SMTP_PASSWORD", "")
        self.smtp_use_tls: Final[bool] = _env_flag("SMTP_USE_TLS", "false")
        self.smtp_start_tls: Final[bool] = _env_flag("SMTP_START_TLS", "true")
        self.smtp_timeout_seconds: Final[float] = float(os.getenv("SMTP_TIMEOUT_SECONDS", "10"))
        self.email_from: Final[str] = os.getenv("EMAIL_FROM", self.smtp_user)
        self.email_from_name: Final[str] = os.getenv("EMAIL_FROM_NAME", "Account Service")

        # HTTP layer
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv(
                "CORS_ORIGINS", "http://localhost:3000,http://localhost:5173"
            ).split(",")
            if origin.strip()
        ]


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment"""
    global _settings
    _settings = None
