"""
Centralized DateTime Utilities
==============================

All timestamps the service writes (user createdAt/updatedAt, reset code
issue times) are timezone-aware UTC.
"""
from datetime import datetime, timezone


def now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime"""
    return datetime.now(timezone.utc)

