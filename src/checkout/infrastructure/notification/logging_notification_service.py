"""Notification transport that writes emails to the log instead of sending them."""

from __future__ import annotations

import structlog

from checkout.domain.gateway.notification_service import NotificationService

logger = structlog.get_logger(__name__)


class LoggingNotificationService(NotificationService):

    async def send_email(self, to: str, subject: str, body: str) -> None:
        logger.info("Email sent", to=to, subject=subject, body=body)
