from .register_user import RegisterUserUseCase
from .login_user import LoginUserUseCase

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
]
