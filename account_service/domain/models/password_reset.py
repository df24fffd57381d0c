# Standard library imports
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional


@dataclass(frozen=True)
class PendingReset:
    """A one-time code waiting to authorize a password reset for ``email``"""
    email: str
    code: str
    created_at: datetime

    def is_expired(self, ttl: Optional[timedelta], now: Optional[datetime] = None) -> bool:
        """
        Check whether the code has outlived ``ttl``

        Args:
            ttl: Code lifetime; None means codes never expire
            now: Reference time (defaults to current UTC time)
        """
        if ttl is None:
            return False
        now = now or datetime.now(timezone.utc)
        return now - self.created_at >= ttl
