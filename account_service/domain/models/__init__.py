from .user import User
from .password_reset import PendingReset

__all__ = ["User", "PendingReset"]
