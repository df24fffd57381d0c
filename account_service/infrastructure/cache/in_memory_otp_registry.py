"""In-process registry of pending password-reset codes."""
import hmac
import logging
import secrets
import threading
from datetime import timedelta
from typing import Callable, Dict, Optional

from ...domain.models.password_reset import PendingReset
from ...domain.repositories.otp_registry import OtpRegistry
from ...utils.datetime_utils import now

logger = logging.getLogger(__name__)

OTP_MIN = 100000
OTP_MAX = 999999


def generate_otp() -> str:
    """
    Generate a 6-digit numeric code, uniform over 100000-999999.

    Uses the secrets module so codes are not predictable.
    """
    return str(OTP_MIN + secrets.randbelow(OTP_MAX - OTP_MIN + 1))


class InMemoryOtpRegistry(OtpRegistry):
    """
    Process-lifetime OtpRegistry backed by a dict.

    Entries do not survive a restart and are not shared between processes;
    deployments with several workers need a shared implementation. Each
    operation holds the lock for its whole read-modify-write and never awaits
    inside it.
    """

    def __init__(
        self,
        ttl: Optional[timedelta] = None,
        code_factory: Callable[[], str] = generate_otp,
    ) -> None:
        """
        Args:
            ttl: Code lifetime; None keeps codes until consumed or replaced
            code_factory: Code generator (tests pin it)
        """
        self.ttl = ttl
        self._code_factory = code_factory
        self._entries: Dict[str, PendingReset] = {}
        self._lock = threading.Lock()

    def _live_entry(self, email: str) -> Optional[PendingReset]:
        """Return the live entry for email, purging it if expired. Caller holds the lock."""
        entry = self._entries.get(email)
        if entry is None:
            return None
        if entry.is_expired(self.ttl, now()):
            del self._entries[email]
            logger.info("Reset code expired for %s***", email[:3])
            return None
        return entry

    async def issue(self, email: str) -> str:
        code = self._code_factory()
        with self._lock:
            replaced = email in self._entries
            self._entries[email] = PendingReset(email=email, code=code, created_at=now())
        logger.info("Reset code issued for %s***%s", email[:3], " (replaced previous)" if replaced else "")
        return code

    async def verify(self, email: str, code: str) -> bool:
        with self._lock:
            entry = self._live_entry(email)
        if entry is None or code is None:
            return False
        return hmac.compare_digest(entry.code.encode("utf-8"), str(code).encode("utf-8"))

    async def consume(self, email: str) -> None:
        with self._lock:
            self._entries.pop(email, None)

    async def exists(self, email: str) -> bool:
        with self._lock:
            return self._live_entry(email) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
