# Standard library imports
import asyncio
import logging
import secrets
from typing import Optional

# External package imports
import bcrypt

# Local application imports
from .config import get_settings
from ..domain.services.password_hasher import PasswordHasher

logger = logging.getLogger(__name__)

# bcrypt rejects longer input
BCRYPT_MAX_PASSWORD_BYTES = 72


def hash_password(plain_password: str, rounds: Optional[int] = None) -> str:
    """
    Hash a plain password using bcrypt

    Args:
        plain_password: The plain text password to hash
        rounds: bcrypt work factor (defaults to settings.bcrypt_rounds)

    Returns:
        Hashed password string
    """
    if rounds is None:
        rounds = get_settings().bcrypt_rounds
    salt = bcrypt.gensalt(rounds=rounds)
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise (including malformed hashes)
    """
    if not hashed_password:
        return False
    plain_bytes = plain_password.encode("utf-8")
    # Such a password could never have been stored
    if len(plain_bytes) > BCRYPT_MAX_PASSWORD_BYTES:
        return False
    try:
        return bcrypt.checkpw(
            plain_bytes,
            hashed_password.encode("utf-8")
        )
    except ValueError:
        logger.warning("Stored password hash is malformed; treating as mismatch")
        return False


class BcryptPasswordHasher(PasswordHasher):
    """bcrypt implementation of PasswordHasher; work runs off the event loop"""

    def __init__(self, rounds: Optional[int] = None) -> None:
        self.rounds = rounds if rounds is not None else get_settings().bcrypt_rounds
        self._dummy_hash: Optional[str] = None

    async def hash(self, plain_password: str) -> str:
        return await asyncio.to_thread(hash_password, plain_password, self.rounds)

    async def verify(self, plain_password: str, hashed_password: str) -> bool:
        return await asyncio.to_thread(verify_password, plain_password, hashed_password)

    async def verify_dummy(self, plain_password: str) -> bool:
        """Do the work of a verify against a hash no password matches; always False"""
        if self._dummy_hash is None:
            self._dummy_hash = await self.hash(secrets.token_urlsafe(16))
        await self.verify(plain_password, self._dummy_hash)
        return False
