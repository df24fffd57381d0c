# External package imports
from fastapi import APIRouter, status

# Local application imports
from ...application.dto.auth_dto import (
    LoginResponse,
    MessageResponse,
    PasswordResetRequest,
    ResetPasswordRequest,
    UserLoginRequest,
    UserRegistrationRequest,
    VerifyResetCodeRequest,
)
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.password_reset.request_password_reset import RequestPasswordResetUseCase
from ...application.use_cases.password_reset.verify_reset_code import VerifyResetCodeUseCase
from ...application.use_cases.password_reset.reset_password import ResetPasswordUseCase
from ...di.container import get_container


router = APIRouter(tags=["authentication"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(request: UserRegistrationRequest) -> UserResponse:
    """
    Register a new user

    Args:
        request: User registration request

    Returns:
        UserResponse with created user information
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)
    return await register_use_case.execute(request)


@router.post("/login", response_model=LoginResponse)
async def login_user(request: UserLoginRequest) -> LoginResponse:
    """
    Check a user's credentials

    Args:
        request: User login request

    Returns:
        LoginResponse with the authenticated user
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)

    user = await login_use_case.execute(request)
    return LoginResponse(user=user)


@router.post("/forgot-password", response_model=MessageResponse)
async def forgot_password(request: PasswordResetRequest) -> MessageResponse:
    """Send a one-time reset code to the user's email"""
    container = get_container()
    request_reset_use_case = container.get(RequestPasswordResetUseCase)

    await request_reset_use_case.execute(request.email)
    return MessageResponse(message="OTP sent to your email")


@router.post("/verify-otp", response_model=MessageResponse)
async def verify_otp(request: VerifyResetCodeRequest) -> MessageResponse:
    """Check a reset code; the code stays valid for the reset step"""
    container = get_container()
    verify_code_use_case = container.get(VerifyResetCodeUseCase)

    await verify_code_use_case.execute(request.email, request.otp)
    return MessageResponse(message="OTP verified")


@router.post("/reset-password", response_model=MessageResponse)
async def reset_password(request: ResetPasswordRequest) -> MessageResponse:
    """Set a new password for an email with a pending reset code"""
    container = get_container()
    reset_password_use_case = container.get(ResetPasswordUseCase)

    await reset_password_use_case.execute(request.email, request.password)
    return MessageResponse(message="Password reset successfully")
