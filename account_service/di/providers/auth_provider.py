from typing import TYPE_CHECKING
from ...domain.repositories.otp_registry import OtpRegistry
from ...domain.repositories.user_repository import UserRepository
from ...domain.services.notifier import Notifier
from ...domain.services.password_hasher import PasswordHasher
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.password_reset.request_password_reset import RequestPasswordResetUseCase
from ...application.use_cases.password_reset.verify_reset_code import VerifyResetCodeUseCase
from ...application.use_cases.password_reset.reset_password import ResetPasswordUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Authentication use case provider - registers registration, login and password reset"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all authentication use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            RegisterUserUseCase,
            lambda: RegisterUserUseCase(
                user_repository=container.get(UserRepository),
                password_hasher=container.get(PasswordHasher),
            )
        )

        container.register_factory(
            LoginUserUseCase,
            lambda: LoginUserUseCase(
                user_repository=container.get(UserRepository),
                password_hasher=container.get(PasswordHasher),
            )
        )

        container.register_factory(
            RequestPasswordResetUseCase,
            lambda: RequestPasswordResetUseCase(
                user_repository=container.get(UserRepository),
                otp_registry=container.get(OtpRegistry),
                notifier=container.get(Notifier),
            )
        )

        container.register_factory(
            VerifyResetCodeUseCase,
            lambda: VerifyResetCodeUseCase(
                otp_registry=container.get(OtpRegistry),
            )
        )

        container.register_factory(
            ResetPasswordUseCase,
            lambda: ResetPasswordUseCase(
                user_repository=container.get(UserRepository),
                otp_registry=container.get(OtpRegistry),
                password_hasher=container.get(PasswordHasher),
            )
        )
