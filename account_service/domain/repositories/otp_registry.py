from abc import ABC, abstractmethod


class OtpRegistry(ABC):
    """
    Pending password-reset codes keyed by email.

    At most one live code exists per email; issuing a new one replaces the
    old. Implementations must make each operation atomic for its key.
    """

    @abstractmethod
    async def issue(self, email: str) -> str:
        """Generate, store and return a fresh 6-digit code for ``email``"""
        pass

    @abstractmethod
    async def verify(self, email: str, code: str) -> bool:
        """True iff a live code exists for ``email`` and equals ``code``; never deletes"""
        pass

    @abstractmethod
    async def consume(self, email: str) -> None:
        """Remove the code for ``email``; no-op if absent"""
        pass

    @abstractmethod
    async def exists(self, email: str) -> bool:
        """True iff a live code exists for ``email``"""
        pass
