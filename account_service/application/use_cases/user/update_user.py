# Standard library imports
import logging
from typing import Any, Dict

# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.constants import UserFields
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import validate_phone, validate_profession, validate_username
from ...dto.user_dto import UserResponse, UserUpdateRequest

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Use case for updating a user's profile (username, phone, profession)"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str, request: UserUpdateRequest) -> UserResponse:
        """
        Update the profile fields present in ``request``

        Args:
            user_id: ID of the user to update
            request: Fields to change; None leaves a field as is

        Returns:
            UserResponse with the updated user

        Raises:
            ValidationError: If a supplied field breaks the account rules
            NotFoundError: If no user has this ID
            DuplicateKeyError: If the new username or phone belongs to someone else
        """
        fields: Dict[str, Any] = {}
        if request.username is not None:
            fields[UserFields.USERNAME] = validate_username(request.username)
        if request.phone is not None:
            fields[UserFields.PHONE] = validate_phone(request.phone)
        if request.profession is not None:
            fields[UserFields.PROFESSION] = validate_profession(request.profession)

        updated_user = await self.user_repository.update_by_id(user_id, fields)
        if updated_user is None:
            raise NotFoundError(f"User {user_id} not found for update")

        logger.info("Updated user %s (%s)", user_id, ", ".join(sorted(fields)) or "no fields")
        return UserResponse.from_user(updated_user)
