# Standard library imports
from typing import Optional

# Local application imports
from ....core.exceptions import ValidationError
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import normalize_email


class VerifyUserExistsUseCase:
    """Use case for checking whether a user with the given email and/or phone exists"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, email: Optional[str] = None, phone: Optional[str] = None) -> bool:
        """
        Match on whichever of email/phone is supplied, both when both are.

        Raises:
            ValidationError: If neither email nor phone is supplied
        """
        email = normalize_email(email)
        phone = (phone or "").strip()

        if email and phone:
            user = await self.user_repository.find_by_email_and_phone(email, phone)
        elif email:
            user = await self.user_repository.find_by_email(email)
        elif phone:
            user = await self.user_repository.find_by_phone(phone)
        else:
            raise ValidationError("Provide an email or a phone number")

        return user is not None
