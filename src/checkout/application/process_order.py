"""Application service: Process Order (checkout) use case.

Ties together pricing, payment, persistence and notification for one
cart.  Each step runs only if every previous step succeeded:

    START -> PRICED -> CHARGE_ATTEMPTED -> DECLINED
                                        -> CHARGED -> SAVED -> NOTIFIED

A declined payment is a normal outcome and yields None.  Failures from
the repository or the notifier propagate unchanged; if the email fails
after a successful save the order stays persisted.
"""

from __future__ import annotations

from enum import Enum

import structlog

from checkout.application.notification_messages import (
    Locale,
    approval_body,
    approval_subject,
)
from checkout.domain.gateway.notification_service import NotificationService
from checkout.domain.gateway.payment_gateway import PaymentGateway
from checkout.domain.model.cart import Cart
from checkout.domain.model.order import Order, OrderCandidate, OrderStatus
from checkout.domain.repository.order_repository import OrderRepository
from checkout.domain.service.discount_policy import apply_discount

logger = structlog.get_logger(__name__)


class CheckoutStage(str, Enum):
    PRICED = "PRICED"
    DECLINED = "DECLINED"
    SAVED = "SAVED"
    NOTIFIED = "NOTIFIED"


class ProcessOrderHandler:

    def __init__(
        self,
        payment_gateway: PaymentGateway,
        order_repo: OrderRepository,
        notifier: NotificationService,
        locale: Locale = Locale.EN,
    ) -> None:
        self._payment_gateway = payment_gateway
        self._order_repo = order_repo
        self._notifier = notifier
        self._locale = locale

    async def handle(self, cart: Cart, payment_token: str) -> Order | None:
        """Check out *cart*, charging the instrument behind *payment_token*.

        Returns the Order exactly as the repository returned it, or None
        when the gateway declines the charge.
        """
        owner = cart.owner
        final_total = apply_discount(cart.total, owner.tier)
        log = logger.bind(user_id=owner.id, tier=owner.tier.value)
        log.debug(
            "Cart priced",
            stage=CheckoutStage.PRICED.value,
            raw_total=str(cart.total),
            final_total=str(final_total),
            item_count=len(cart.items),
        )

        result = await self._payment_gateway.charge(final_total, payment_token)
        if not result.success:
            log.info(
                "Payment declined",
                stage=CheckoutStage.DECLINED.value,
                final_total=str(final_total),
                error=result.error,
            )
            return None

        candidate = OrderCandidate(
            cart=cart,
            final_total=final_total,
            status=OrderStatus.PROCESSED,
        )
        order = await self._order_repo.save(candidate)
        log = log.bind(order_id=order.id)
        log.info(
            "Order saved",
            stage=CheckoutStage.SAVED.value,
            final_total=str(order.final_total),
        )

        await self._notifier.send_email(
            owner.email,
            approval_subject(self._locale),
            approval_body(order, self._locale),
        )
        log.info("Customer notified", stage=CheckoutStage.NOTIFIED.value)

        return order
