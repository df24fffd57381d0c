# Local application imports
from ....core.exceptions import InvalidCodeError
from ....domain.repositories.otp_registry import OtpRegistry
from ....domain.models.user import normalize_email


class VerifyResetCodeUseCase:
    """Step 2 of password recovery: check a submitted code without consuming it"""

    def __init__(self, otp_registry: OtpRegistry) -> None:
        self.otp_registry = otp_registry

    async def execute(self, email: str, code: str) -> None:
        """
        Raises:
            InvalidCodeError: No live code for ``email`` or the code differs
        """
        email = normalize_email(email)
        if not await self.otp_registry.verify(email, code or ""):
            raise InvalidCodeError(f"Reset code mismatch for {email[:3]}***")
