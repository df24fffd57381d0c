import logging
from typing import Optional

from ...core.config import Settings, get_settings
from ...domain.services.notifier import Notifier
from .console_notifier import ConsoleNotifier
from .email_notifier import SmtpEmailNotifier

logger = logging.getLogger(__name__)


def create_notifier(settings: Optional[Settings] = None) -> Notifier:
    """
    Build the notifier selected by NOTIFIER_PROVIDER.

    Providers:
    - "console" (default): logs messages
    - "smtp": sends email via aiosmtplib
    """
    settings = settings or get_settings()
    provider = settings.notifier_provider

    if provider == "smtp":
        return SmtpEmailNotifier(settings)
    if provider != "console":
        logger.warning("Unknown NOTIFIER_PROVIDER '%s', falling back to console", provider)
    return ConsoleNotifier()
