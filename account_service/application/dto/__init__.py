from .auth_dto import (
    UserRegistrationRequest,
    UserLoginRequest,
    LoginResponse,
    PasswordResetRequest,
    VerifyResetCodeRequest,
    ResetPasswordRequest,
    MessageResponse,
)
from .user_dto import (
    UserResponse,
    UserUpdateRequest,
    UserUpdateResponse,
    VerifyUserRequest,
    VerifyUserResponse,
)

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "LoginResponse",
    "PasswordResetRequest",
    "VerifyResetCodeRequest",
    "ResetPasswordRequest",
    "MessageResponse",
    "UserResponse",
    "UserUpdateRequest",
    "UserUpdateResponse",
    "VerifyUserRequest",
    "VerifyUserResponse",
]
