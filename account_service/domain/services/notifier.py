from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class NotificationMessage:
    """An out-of-band message (subject line plus plain-text body)"""
    subject: str
    body: str


class Notifier(ABC):
    """Out-of-band delivery channel (email in production)"""

    @abstractmethod
    async def deliver(self, destination: str, message: NotificationMessage) -> bool:
        """
        Deliver ``message`` to ``destination``

        Returns:
            True if delivery succeeded, False otherwise. Implementations log
            their own failures and do not raise.
        """
        pass

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return provider name for logging."""
        pass
