"""Stand-in payment gateway for local runs of the CLI.

Approves every token except the configured decline list.
"""

from __future__ import annotations

import structlog

from checkout.domain.gateway.payment_gateway import ChargeResult, PaymentGateway
from checkout.domain.model.value_objects import Money

logger = structlog.get_logger(__name__)


class SimulatedPaymentGateway(PaymentGateway):

    def __init__(self, declined_tokens: list[str] | None = None) -> None:
        self._declined_tokens = frozenset(declined_tokens or [])

    async def charge(self, amount: Money, payment_token: str) -> ChargeResult:
        if payment_token in self._declined_tokens:
            logger.info("Simulated charge declined", amount=str(amount))
            return ChargeResult.declined("Payment declined")
        logger.info("Simulated charge approved", amount=str(amount))
        return ChargeResult.approved()
