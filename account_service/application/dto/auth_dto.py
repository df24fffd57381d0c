from pydantic import BaseModel, EmailStr, Field

from .user_dto import UserResponse


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request"""
    username: str = Field(min_length=3, max_length=100)
    email: EmailStr
    password: str = Field(min_length=5, max_length=256)
    phone: str = Field(min_length=10, max_length=32)
    profession: str = Field(min_length=1, max_length=200)


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    email: EmailStr
    password: str = Field(min_length=5, max_length=256)


class LoginResponse(BaseModel):
    """DTO for a successful login: the authenticated identity, no token"""
    message: str = "Login successful"
    user: UserResponse


class PasswordResetRequest(BaseModel):
    """DTO for step 1 of password recovery"""
    email: EmailStr


class VerifyResetCodeRequest(BaseModel):
    """DTO for step 2 of password recovery"""
    email: EmailStr
    otp: str = Field(min_length=1, max_length=16)


class ResetPasswordRequest(BaseModel):
    """DTO for step 3 of password recovery"""
    email: EmailStr
    password: str = Field(min_length=5, max_length=256)


class MessageResponse(BaseModel):
    """DTO for operations that only report an outcome"""
    message: str
