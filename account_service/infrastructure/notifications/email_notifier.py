"""
Email notifier (async).
=======================

Delivers password-reset codes over SMTP with aiosmtplib. Failures are logged
and reported as ``False``; the caller decides what a failed delivery means.
"""
import html
import logging
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional

import aiosmtplib

from ...core.config import Settings, get_settings
from ...domain.services.notifier import NotificationMessage, Notifier

logger = logging.getLogger(__name__)


def _build_html_body(message: NotificationMessage) -> str:
    """Wrap the plain-text body in a minimal HTML layout."""
    paragraphs = "".join(
        f'<p style="margin:0 0 12px;">{html.escape(line)}</p>'
        for line in message.body.splitlines()
        if line.strip()
    )
    return f"""
<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>{html.escape(message.subject)}</title>
</head>
<body style="font-family:Segoe UI,Helvetica,Arial,sans-serif;background:#f5f5f5;margin:0;padding:24px;">
  <div style="max-width:480px;margin:0 auto;background:#fff;border-radius:8px;padding:24px;color:#333;font-size:14px;">
    <h1 style="margin:0 0 16px;font-size:18px;">{html.escape(message.subject)}</h1>
    {paragraphs}
    <p style="margin-top:20px;font-size:12px;color:#888;">
      If you didn't request this, you can ignore this email.
    </p>
  </div>
</body>
</html>
"""


class SmtpEmailNotifier(Notifier):
    """Notifier that sends email through an SMTP relay"""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()
        if not self.is_configured():
            logger.warning("SMTP not configured. Set SMTP_HOST, SMTP_USER, SMTP_PASSWORD in .env")

    def is_configured(self) -> bool:
        return bool(self.settings.smtp_host and self.settings.smtp_user and self.settings.smtp_password)

    def _build_mime(self, destination: str, message: NotificationMessage) -> MIMEMultipart:
        settings = self.settings
        msg = MIMEMultipart("alternative")
        msg["Subject"] = message.subject
        msg["From"] = f"{settings.email_from_name} <{settings.email_from}>"
        msg["To"] = destination
        msg.attach(MIMEText(message.body, "plain", "utf-8"))
        msg.attach(MIMEText(_build_html_body(message), "html", "utf-8"))
        return msg

    async def deliver(self, destination: str, message: NotificationMessage) -> bool:
        if not destination:
            logger.warning("No recipient, skip send")
            return False

        if not self.is_configured():
            logger.error("Cannot send email to %s***: SMTP not configured", destination[:3])
            return False

        settings = self.settings
        try:
            await aiosmtplib.send(
                self._build_mime(destination, message),
                sender=settings.email_from,
                recipients=[destination],
                hostname=settings.smtp_host,
                port=settings.smtp_port,
                username=settings.smtp_user,
                password=settings.smtp_password,
                use_tls=settings.smtp_use_tls,
                start_tls=None if settings.smtp_use_tls else settings.smtp_start_tls,
                timeout=settings.smtp_timeout_seconds,
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.exception("Failed to send email to %s***: %s", destination[:3], e)
            return False

        logger.info("Email sent to %s*** via %s", destination[:3], settings.smtp_host)
        return True

    def get_provider_name(self) -> str:
        return "smtp"
