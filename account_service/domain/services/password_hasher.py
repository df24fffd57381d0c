from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """One-way password hashing contract"""

    @abstractmethod
    async def hash(self, plain_password: str) -> str:
        """Return a salted one-way hash of ``plain_password``"""
        pass

    @abstractmethod
    async def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Check ``plain_password`` against a stored hash"""
        pass

    async def verify_dummy(self, plain_password: str) -> bool:
        """
        Spend the time of a failed verify when there is no stored hash to check,
        so callers take as long for an unknown account as for a wrong password.
        """
        return False
