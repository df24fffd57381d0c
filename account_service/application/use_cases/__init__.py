from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
)
from .password_reset import (
    RequestPasswordResetUseCase,
    VerifyResetCodeUseCase,
    ResetPasswordUseCase,
)
from .user import (
    ListUsersUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
    VerifyUserExistsUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "RequestPasswordResetUseCase",
    "VerifyResetCodeUseCase",
    "ResetPasswordUseCase",
    "ListUsersUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "VerifyUserExistsUseCase",
]
