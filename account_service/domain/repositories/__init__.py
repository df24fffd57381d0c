from .user_repository import UserRepository
from .otp_registry import OtpRegistry

__all__ = ["UserRepository", "OtpRegistry"]
