"""Development notifier that writes messages to the log instead of sending them."""
import logging

from ...domain.services.notifier import NotificationMessage, Notifier

logger = logging.getLogger(__name__)


class ConsoleNotifier(Notifier):
    """
    Logs the message (code included) instead of delivering it.

    Use in development. Never use in production.
    """

    async def deliver(self, destination: str, message: NotificationMessage) -> bool:
        logger.info("[DEV MODE] Message for %s | %s | %s", destination, message.subject, message.body)
        return True

    def get_provider_name(self) -> str:
        return "console"
