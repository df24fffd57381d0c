# Standard library imports
import logging

# Local application imports
from ....core.exceptions import DependencyFailureError, NotFoundError
from ....domain.repositories.otp_registry import OtpRegistry
from ....domain.repositories.user_repository import UserRepository
from ....domain.services.notifier import NotificationMessage, Notifier
from ....domain.models.user import normalize_email

logger = logging.getLogger(__name__)

RESET_CODE_SUBJECT = "Your OTP for Password Reset"


def build_reset_code_message(code: str) -> NotificationMessage:
    return NotificationMessage(subject=RESET_CODE_SUBJECT, body=f"Your OTP is: {code}")


class RequestPasswordResetUseCase:
    """Step 1 of password recovery: issue a one-time code and send it to the user"""

    def __init__(
        self,
        user_repository: UserRepository,
        otp_registry: OtpRegistry,
        notifier: Notifier,
    ) -> None:
        self.user_repository = user_repository
        self.otp_registry = otp_registry
        self.notifier = notifier

    async def execute(self, email: str) -> None:
        """
        Issue a reset code for ``email`` and deliver it

        Raises:
            NotFoundError: No user has this email
            DependencyFailureError: The code was issued but could not be delivered
        """
        email = normalize_email(email)
        user = await self.user_repository.find_by_email(email)
        if user is None:
            raise NotFoundError(f"Reset requested for unknown email {email[:3]}***", user_message="Email not found")

        # Replaces any earlier code for this email
        code = await self.otp_registry.issue(email)

        # A failed delivery leaves the code in place; requesting again re-issues
        delivered = await self.notifier.deliver(email, build_reset_code_message(code))
        if not delivered:
            logger.warning(
                "Reset code delivery failed for %s*** via %s", email[:3], self.notifier.get_provider_name()
            )
            raise DependencyFailureError("Reset code delivery failed")

        logger.info("Reset code sent to %s*** via %s", email[:3], self.notifier.get_provider_name())
