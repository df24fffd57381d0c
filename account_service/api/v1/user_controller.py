# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter

# Local application imports
from ...application.dto.auth_dto import MessageResponse
from ...application.dto.user_dto import (
    UserResponse,
    UserUpdateRequest,
    UserUpdateResponse,
    VerifyUserRequest,
    VerifyUserResponse,
)
from ...application.use_cases.user.list_users import ListUsersUseCase
from ...application.use_cases.user.update_user import UpdateUserUseCase
from ...application.use_cases.user.delete_user import DeleteUserUseCase
from ...application.use_cases.user.verify_user_exists import VerifyUserExistsUseCase
from ...di.container import get_container


router = APIRouter(tags=["users"])


@router.get("", response_model=List[UserResponse])
async def list_users() -> List[UserResponse]:
    """
    List all users

    Returns:
        List of UserResponse objects (no password field)
    """
    container = get_container()
    list_users_use_case = container.get(ListUsersUseCase)
    return await list_users_use_case.execute()


@router.post("/verify", response_model=VerifyUserResponse)
async def verify_user(request: VerifyUserRequest) -> VerifyUserResponse:
    """
    Check whether a user with this email and/or phone exists

    Args:
        request: Email, phone, or both

    Returns:
        VerifyUserResponse with the outcome
    """
    container = get_container()
    verify_use_case = container.get(VerifyUserExistsUseCase)

    found = await verify_use_case.execute(email=request.email, phone=request.phone)
    message = "User verified!" if found else "User not found or details incorrect."
    return VerifyUserResponse(found=found, message=message)


@router.put("/{user_id}", response_model=UserUpdateResponse)
async def update_user(user_id: str, request: UserUpdateRequest) -> UserUpdateResponse:
    """
    Update a user's username, phone or profession

    Args:
        user_id: ID of the user
        request: Fields to change

    Returns:
        UserUpdateResponse with the updated user
    """
    container = get_container()
    update_use_case = container.get(UpdateUserUseCase)

    user = await update_use_case.execute(user_id, request)
    return UserUpdateResponse(user=user)


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(user_id: str) -> MessageResponse:
    container = get_container()
    delete_use_case = container.get(DeleteUserUseCase)

    await delete_use_case.execute(user_id)
    return MessageResponse(message="User deleted successfully")
