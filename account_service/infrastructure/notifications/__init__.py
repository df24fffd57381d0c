"""Out-of-band message delivery (password-reset codes)"""

from .console_notifier import ConsoleNotifier
from .email_notifier import SmtpEmailNotifier
from .factory import create_notifier

__all__ = [
    "ConsoleNotifier",
    "SmtpEmailNotifier",
    "create_notifier",
]
