"""Tests for the stand-in payment gateway."""

from checkout.domain.model.value_objects import Money
from checkout.infrastructure.payment.simulated_payment_gateway import (
    SimulatedPaymentGateway,
)


class TestSimulatedPaymentGateway:

    async def test_approves_unlisted_token(self):
        result = await SimulatedPaymentGateway(["0000-0000"]).charge(Money.of(10), "1234")
        assert result.success
        assert result.error is None

    async def test_declines_listed_token(self):
        result = await SimulatedPaymentGateway(["0000-0000"]).charge(Money.of(10), "0000-0000")
        assert not result.success
        assert result.error == "Payment declined"

    async def test_approves_everything_without_decline_list(self):
        result = await SimulatedPaymentGateway().charge(Money.zero(), "0000-0000")
        assert result.success
