# Standard library imports
import logging

# Local application imports
from ....core.exceptions import NoPendingRequestError
from ....domain.repositories.otp_registry import OtpRegistry
from ....domain.repositories.user_repository import UserRepository
from ....domain.services.password_hasher import PasswordHasher
from ....domain.models.user import normalize_email, validate_password

logger = logging.getLogger(__name__)


class ResetPasswordUseCase:
    """Step 3 of password recovery: replace the password and consume the code"""

    def __init__(
        self,
        user_repository: UserRepository,
        otp_registry: OtpRegistry,
        password_hasher: PasswordHasher,
    ) -> None:
        self.user_repository = user_repository
        self.otp_registry = otp_registry
        self.password_hasher = password_hasher

    async def execute(self, email: str, new_password: str) -> None:
        """
        Raises:
            ValidationError: The new password is too short
            NoPendingRequestError: No live reset code exists for ``email``
        """
        email = normalize_email(email)
        new_password = validate_password(new_password)

        if not await self.otp_registry.exists(email):
            raise NoPendingRequestError(f"Reset without pending request for {email[:3]}***")

        hashed_password = await self.password_hasher.hash(new_password)
        await self.user_repository.update_password_by_email(email, hashed_password)
        await self.otp_registry.consume(email)

        logger.info("Password reset completed for %s***", email[:3])
