"""Integration tests for the ProcessOrder (checkout) use case.

State checks use in-memory fakes; interaction checks use AsyncMock.
"""

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from checkout.application.notification_messages import Locale
from checkout.application.process_order import ProcessOrderHandler
from checkout.domain.gateway.payment_gateway import ChargeResult
from checkout.domain.model.cart import Item
from checkout.domain.model.order import Order, OrderStatus
from checkout.domain.model.value_objects import Money
from tests.builders import CartBuilder, UserMother
from tests.fakes import (
    FailingNotificationService,
    FailingOrderRepository,
    FakeNotificationService,
    FakeOrderRepository,
    FakePaymentGateway,
)


def _setup(
    result: ChargeResult | None = None,
    next_id: int = 1,
) -> tuple[ProcessOrderHandler, FakePaymentGateway, FakeOrderRepository, FakeNotificationService]:
    gateway = FakePaymentGateway(result)
    order_repo = FakeOrderRepository(next_id=next_id)
    notifier = FakeNotificationService()
    handler = ProcessOrderHandler(gateway, order_repo, notifier)
    return handler, gateway, order_repo, notifier


def _mocks(next_order: Order | None = None):
    gateway = AsyncMock()
    gateway.charge.return_value = ChargeResult.approved()
    order_repo = AsyncMock()
    order_repo.save.return_value = next_order
    notifier = AsyncMock()
    return gateway, order_repo, notifier


# ── Pricing ──────────────────────────────────────────────────────────────────


class TestPricing:

    async def test_standard_user_charged_full_total(self):
        handler, gateway, order_repo, _ = _setup()
        cart = CartBuilder().with_prices(50, 30).build()

        await handler.handle(cart, "1234")

        assert gateway.charges == [(Money.of(80), "1234")]
        assert order_repo.saved[0].final_total == Money.of(80)

    async def test_premium_user_gets_ten_percent_off(self):
        handler, gateway, order_repo, _ = _setup()
        cart = CartBuilder().with_owner(UserMother.premium()).with_prices(200).build()

        order = await handler.handle(cart, "4567-8901")

        assert gateway.charges == [(Money.of(180), "4567-8901")]
        assert order.final_total == Money.of(180)

    async def test_premium_discount_rounds_to_cents(self):
        handler, gateway, _, _ = _setup()
        cart = CartBuilder().with_owner(UserMother.premium()).with_prices("0.1", "0.2").build()

        await handler.handle(cart, "tok")

        assert gateway.charges[0][0].amount == Money.of("0.27").amount

    async def test_sub_cent_standard_total_matches_across_steps(self):
        handler, gateway, order_repo, notifier = _setup()
        cart = CartBuilder().with_prices("10.005").build()

        order = await handler.handle(cart, "tok")

        assert gateway.charges[0][0].amount == Decimal("10.01")
        assert order_repo.saved[0].final_total.amount == Decimal("10.01")
        assert order.final_total.amount == Decimal("10.01")
        assert notifier.sent[0][2] == "Order 1 in the amount of $10.01"

    async def test_gateway_called_with_exact_arguments(self):
        gateway, order_repo, notifier = _mocks()
        cart = CartBuilder().with_owner(UserMother.premium()).with_prices(200).build()
        order_repo.save.return_value = Order(2, cart, Money.of(180))
        handler = ProcessOrderHandler(gateway, order_repo, notifier)

        await handler.handle(cart, "4567-8901")

        gateway.charge.assert_awaited_once_with(Money.of(180), "4567-8901")


# ── Successful checkout ──────────────────────────────────────────────────────


class TestSuccessfulCheckout:

    async def test_returns_exact_object_from_repository(self):
        cart = CartBuilder().with_prices(50, 30).build()
        saved = Order(1, cart, Money.of(80), OrderStatus.PROCESSED)
        gateway, order_repo, notifier = _mocks(saved)
        handler = ProcessOrderHandler(gateway, order_repo, notifier)

        result = await handler.handle(cart, "1234")

        assert result is saved

    async def test_saves_processed_candidate_once(self):
        handler, _, order_repo, _ = _setup()
        cart = CartBuilder().with_prices(50, 30).build()

        await handler.handle(cart, "1234")

        assert len(order_repo.saved) == 1
        candidate = order_repo.saved[0]
        assert candidate.cart is cart
        assert candidate.status is OrderStatus.PROCESSED

    async def test_id_comes_from_repository(self):
        handler, _, _, _ = _setup(next_id=41)
        order = await handler.handle(CartBuilder().build(), "1234")
        assert order.id == 41

    async def test_sends_approval_email_to_owner(self):
        handler, _, _, notifier = _setup(next_id=99)
        cart = CartBuilder().with_owner(UserMother.standard()).with_prices(150).build()

        await handler.handle(cart, "1234")

        assert notifier.sent == [
            (
                "padrao@email.com",
                "Your Order has been Approved!",
                "Order 99 in the amount of $150.00",
            )
        ]

    async def test_email_body_uses_persisted_order(self):
        cart = CartBuilder().with_prices(150).build()
        saved = Order(99, cart, Money.of(150))
        gateway, order_repo, notifier = _mocks(saved)
        handler = ProcessOrderHandler(gateway, order_repo, notifier)

        await handler.handle(cart, "1234")

        notifier.send_email.assert_awaited_once()
        to, subject, body = notifier.send_email.await_args.args
        assert to == "padrao@email.com"
        assert subject == "Your Order has been Approved!"
        assert body.index("99") < body.index("150")

    async def test_portuguese_locale(self):
        gateway = FakePaymentGateway()
        notifier = FakeNotificationService()
        handler = ProcessOrderHandler(
            gateway, FakeOrderRepository(next_id=99), notifier, locale=Locale.PT_BR
        )
        cart = CartBuilder().with_prices(150).build()

        await handler.handle(cart, "1234")

        assert notifier.sent == [
            ("padrao@email.com", "Seu Pedido foi Aprovado!", "Pedido 99 no valor de R$150,00")
        ]

    async def test_steps_run_in_order(self):
        cart = CartBuilder().build()
        manager = AsyncMock()
        manager.gateway.charge.return_value = ChargeResult.approved()
        manager.repo.save.return_value = Order(5, cart, Money.of(100))
        handler = ProcessOrderHandler(manager.gateway, manager.repo, manager.notifier)

        await handler.handle(cart, "tok")

        assert [c[0] for c in manager.mock_calls] == [
            "gateway.charge",
            "repo.save",
            "notifier.send_email",
        ]

    async def test_cart_is_not_mutated(self):
        handler, _, _, _ = _setup(next_id=1)
        cart = CartBuilder().with_prices(10, 20).build()
        before = cart.items

        await handler.handle(cart, "tok")

        assert cart.items is before


# ── Empty cart ───────────────────────────────────────────────────────────────


class TestEmptyCart:

    async def test_empty_cart_charges_zero_and_completes(self):
        handler, gateway, order_repo, notifier = _setup()
        cart = CartBuilder().empty().build()

        order = await handler.handle(cart, "tok")

        assert gateway.charges == [(Money.zero(), "tok")]
        assert order is not None
        assert order.final_total == Money.zero()
        assert len(order_repo.saved) == 1
        assert len(notifier.sent) == 1

    async def test_empty_premium_cart_charges_zero(self):
        handler, gateway, _, _ = _setup()
        cart = CartBuilder().with_owner(UserMother.premium()).empty().build()

        await handler.handle(cart, "tok")

        assert gateway.charges[0][0].amount == 0


# ── Declined payment ─────────────────────────────────────────────────────────


class TestDeclinedPayment:

    async def test_returns_none(self):
        handler, _, _, _ = _setup(ChargeResult.declined("Payment refused"))
        assert await handler.handle(CartBuilder().build(), "1234-5678") is None

    async def test_decline_without_error_message(self):
        handler, _, _, _ = _setup(ChargeResult(success=False))
        assert await handler.handle(CartBuilder().build(), "1234") is None

    async def test_repository_and_notifier_never_called(self):
        gateway, order_repo, notifier = _mocks()
        gateway.charge.return_value = ChargeResult(success=False)
        handler = ProcessOrderHandler(gateway, order_repo, notifier)

        await handler.handle(CartBuilder().build(), "1234")

        gateway.charge.assert_awaited_once()
        order_repo.save.assert_not_called()
        notifier.send_email.assert_not_called()


# ── Collaborator failures ────────────────────────────────────────────────────


class TestCollaboratorFailures:

    async def test_save_failure_propagates_and_skips_email(self):
        gateway = FakePaymentGateway()
        notifier = FakeNotificationService()
        handler = ProcessOrderHandler(gateway, FailingOrderRepository(), notifier)

        with pytest.raises(ConnectionError, match="storage unavailable"):
            await handler.handle(CartBuilder().build(), "tok")

        assert notifier.sent == []

    async def test_email_failure_propagates_but_order_stays_saved(self):
        gateway = FakePaymentGateway()
        order_repo = FakeOrderRepository(next_id=3)
        handler = ProcessOrderHandler(gateway, order_repo, FailingNotificationService())

        with pytest.raises(ConnectionError, match="smtp unreachable"):
            await handler.handle(CartBuilder().build(), "tok")

        assert await order_repo.get_by_id(3) is not None

    async def test_gateway_exception_is_not_swallowed(self):
        gateway, order_repo, notifier = _mocks()
        gateway.charge.side_effect = TimeoutError("gateway timed out")
        handler = ProcessOrderHandler(gateway, order_repo, notifier)

        with pytest.raises(TimeoutError):
            await handler.handle(CartBuilder().build(), "tok")

        order_repo.save.assert_not_called()

    async def test_no_retry_on_failure(self):
        gateway, order_repo, notifier = _mocks()
        order_repo.save.side_effect = ConnectionError("down")
        handler = ProcessOrderHandler(gateway, order_repo, notifier)

        with pytest.raises(ConnectionError):
            await handler.handle(CartBuilder().build(), "tok")

        assert gateway.charge.await_count == 1
        assert order_repo.save.await_count == 1


# ── Independence between calls ───────────────────────────────────────────────


class TestStatelessness:

    async def test_sequential_checkouts_are_independent(self):
        handler, gateway, order_repo, notifier = _setup()

        first = await handler.handle(CartBuilder().with_prices(10).build(), "a")
        second = await handler.handle(
            CartBuilder().with_owner(UserMother.premium()).with_prices(10).build(), "b"
        )

        assert (first.id, second.id) == (1, 2)
        assert [amount for amount, _ in gateway.charges] == [Money.of(10), Money.of(9)]
        assert [to for to, _, _ in notifier.sent] == ["padrao@email.com", "premium@email.com"]
