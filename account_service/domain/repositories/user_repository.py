from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass

    @abstractmethod
    async def find_by_phone(self, phone: str) -> Optional[User]:
        """Find user by phone number"""
        pass

    @abstractmethod
    async def find_by_email_or_phone(self, email: str, phone: str) -> Optional[User]:
        """Find a user matching either the email or the phone"""
        pass

    @abstractmethod
    async def find_by_email_and_phone(self, email: str, phone: str) -> Optional[User]:
        """Find a user matching both the email and the phone"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass

    @abstractmethod
    async def find_all(self) -> List[User]:
        """Return every user"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user; raises DuplicateKeyError on a uniqueness clash"""
        pass

    @abstractmethod
    async def update_by_id(self, user_id: str, fields: Dict[str, Any]) -> Optional[User]:
        """Apply ``fields`` to the user and return it, or None if there is no such user"""
        pass

    @abstractmethod
    async def delete_by_id(self, user_id: str) -> bool:
        """Delete the user; False if there was nothing to delete"""
        pass

    @abstractmethod
    async def update_password_by_email(self, email: str, password_hash: str) -> None:
        """Replace the stored password hash of the user with this email"""
        pass
