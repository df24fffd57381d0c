# Standard library imports
import logging

# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Use case for deleting a user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> None:
        """
        Raises:
            NotFoundError: If no user has this ID
        """
        deleted = await self.user_repository.delete_by_id(user_id)
        if not deleted:
            raise NotFoundError(f"User {user_id} not found for delete")
        logger.info("Deleted user %s", user_id)
