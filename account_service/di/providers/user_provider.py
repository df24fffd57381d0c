from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.user.list_users import ListUsersUseCase
from ...application.use_cases.user.update_user import UpdateUserUseCase
from ...application.use_cases.user.delete_user import DeleteUserUseCase
from ...application.use_cases.user.verify_user_exists import VerifyUserExistsUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User management use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        for use_case in (
            ListUsersUseCase,
            UpdateUserUseCase,
            DeleteUserUseCase,
            VerifyUserExistsUseCase,
        ):
            container.register_factory(
                use_case,
                lambda use_case=use_case: use_case(user_repository=container.get(UserRepository))
            )
