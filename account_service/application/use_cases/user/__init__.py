from .list_users import ListUsersUseCase
from .update_user import UpdateUserUseCase
from .delete_user import DeleteUserUseCase
from .verify_user_exists import VerifyUserExistsUseCase

__all__ = [
    "ListUsersUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "VerifyUserExistsUseCase",
]
