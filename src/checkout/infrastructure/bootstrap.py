"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from checkout.application.process_order import ProcessOrderHandler
from checkout.infrastructure.config import get_settings
from checkout.infrastructure.notification.logging_notification_service import (
    LoggingNotificationService,
)
from checkout.infrastructure.payment.simulated_payment_gateway import (
    SimulatedPaymentGateway,
)
from checkout.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(get_settings().data_dir / "orders.json")


def payment_gateway() -> SimulatedPaymentGateway:
    return SimulatedPaymentGateway(get_settings().declined_tokens)


def notification_service() -> LoggingNotificationService:
    return LoggingNotificationService()


def process_order_handler() -> ProcessOrderHandler:
    return ProcessOrderHandler(
        payment_gateway=payment_gateway(),
        order_repo=order_repository(),
        notifier=notification_service(),
        locale=get_settings().locale,
    )
