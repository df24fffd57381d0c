from .request_password_reset import RequestPasswordResetUseCase
from .verify_reset_code import VerifyResetCodeUseCase
from .reset_password import ResetPasswordUseCase

__all__ = [
    "RequestPasswordResetUseCase",
    "VerifyResetCodeUseCase",
    "ResetPasswordUseCase",
]
