from .notifier import NotificationMessage, Notifier
from .password_hasher import PasswordHasher

__all__ = ["NotificationMessage", "Notifier", "PasswordHasher"]
