from datetime import timedelta
from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...core.security import BcryptPasswordHasher
from ...domain.repositories.otp_registry import OtpRegistry
from ...domain.services.notifier import Notifier
from ...domain.services.password_hasher import PasswordHasher
from ...infrastructure.cache.in_memory_otp_registry import InMemoryOtpRegistry
from ...infrastructure.notifications.factory import create_notifier

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class SecurityProvider:
    """Registers the password hasher, the reset-code registry and the notifier"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        All three are singletons. The registry in particular must be one
        instance per process: every reset use case has to see the same codes.
        """
        settings = get_settings()

        container.register_singleton(
            PasswordHasher,
            BcryptPasswordHasher(rounds=settings.bcrypt_rounds)
        )

        ttl = timedelta(minutes=settings.otp_ttl_minutes) if settings.otp_ttl_minutes > 0 else None
        container.register_singleton(OtpRegistry, InMemoryOtpRegistry(ttl=ttl))

        container.register_singleton(Notifier, create_notifier(settings))
