from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ...domain.models.user import User


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    username: str
    email: str
    phone: str
    profession: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        """Display projection of a domain user; the hash is left behind"""
        return cls(
            id=user.id or "",
            username=user.username,
            email=user.email,
            phone=user.phone,
            profession=user.profession,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UserUpdateRequest(BaseModel):
    """DTO for profile update; omitted fields are left unchanged"""
    username: Optional[str] = Field(default=None, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=32)
    profession: Optional[str] = Field(default=None, max_length=200)


class UserUpdateResponse(BaseModel):
    message: str = "User updated successfully"
    user: UserResponse


class VerifyUserRequest(BaseModel):
    """DTO for the existence check; at least one of email/phone is required"""
    email: Optional[str] = None
    phone: Optional[str] = None


class VerifyUserResponse(BaseModel):
    found: bool
    message: str
