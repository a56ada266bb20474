"""Abstract payment gateway."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from checkout.domain.model.value_objects import Money


@dataclass(frozen=True)
class ChargeResult:
    """Outcome of a charge attempt.  ``error`` is only set on a decline."""

    success: bool
    error: str | None = None

    @staticmethod
    def approved() -> ChargeResult:
        return ChargeResult(success=True)

    @staticmethod
    def declined(error: str) -> ChargeResult:
        return ChargeResult(success=False, error=error)


class PaymentGateway(ABC):

    @abstractmethod
    async def charge(self, amount: Money, payment_token: str) -> ChargeResult:
        """Attempt to charge *amount* to the instrument behind *payment_token*.

        An ordinary decline is reported through ``ChargeResult.success``,
        never raised.
        """
