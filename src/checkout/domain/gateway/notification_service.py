"""Abstract customer notification transport."""

from __future__ import annotations

from abc import ABC, abstractmethod


class NotificationService(ABC):

    @abstractmethod
    async def send_email(self, to: str, subject: str, body: str) -> None:
        """Deliver an email.  Transport failures must raise."""
