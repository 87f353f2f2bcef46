"""
Error notifications for the bulk endpoints, delivered by e-mail over SMTP.

Disabled unless EMAIL_NOTIFICATIONS_ENABLED is set. Delivery problems are
logged and never propagate: a lost notification must not turn a processed
request into a failed one.
"""

import asyncio
import smtplib
from email.message import EmailMessage
from typing import Any, Iterable, Mapping

from catalog_sync.core.config import settings
from catalog_sync.core.logging import get_logger

logger = get_logger(__name__)

SUBJECT = "Error in catalog synchronization"


def summarize_errors(entity: str, id_field: str, errors: Iterable[Mapping[str, Any]]) -> str:
    """One line per rejected record: ``<Entity> "<identifier>": <error>``."""
    lines = []
    for error in errors:
        record = error.get("record")
        identifier = None
        if isinstance(record, Mapping):
            identifier = record.get(id_field)
        lines.append(f'{entity} "{identifier or "unknown"}": {error.get("error")}')
    return "\n".join(lines)


class ErrorNotifier:
    def __init__(self, config=settings):
        self.config = config
        self.enabled = bool(config.EMAIL_NOTIFICATIONS_ENABLED)

    def build_message(self, error_message: str) -> EmailMessage:
        msg = EmailMessage()
        msg["From"] = f'"{self.config.SMTP_FROM_NAME}" <{self.config.SMTP_FROM_EMAIL}>'
        msg["To"] = self.config.EMAIL_RECIPIENT or self.config.SMTP_USER
        msg["Subject"] = SUBJECT
        msg.set_content(f"An error has been detected:\n\n{error_message}")
        return msg

    def _deliver(self, msg: EmailMessage) -> None:
        with smtplib.SMTP(self.config.SMTP_HOST, self.config.SMTP_PORT, timeout=30) as smtp:
            if self.config.SMTP_USE_TLS:
                smtp.starttls()
            if self.config.SMTP_USER:
                smtp.login(self.config.SMTP_USER, self.config.SMTP_PASSWORD or "")
            smtp.send_message(msg)

    async def send_error_email(self, error_message: str) -> bool:
        if not self.enabled:
            logger.debug("notification.skipped", reason="disabled")
            return False

        msg = self.build_message(error_message)
        try:
            await asyncio.to_thread(self._deliver, msg)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(
                "notification.send_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            return False

        logger.info("notification.sent", recipient=msg["To"])
        return True


def get_notifier() -> ErrorNotifier:
    return ErrorNotifier()
