"""Application service: Show Order use case (query)."""

from __future__ import annotations

from checkout.application.dto import OrderDTO, OrderItemDTO
from checkout.domain.exceptions import EntityNotFoundError
from checkout.domain.model.order import Order
from checkout.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    async def handle(self, order_id: int) -> OrderDTO:
        order = await self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return to_dto(order)


def to_dto(order: Order) -> OrderDTO:
    owner = order.cart.owner
    return OrderDTO(
        id=order.id,
        customer_name=owner.name,
        customer_email=owner.email,
        tier=owner.tier.value,
        status=order.status.value,
        items=[
            OrderItemDTO(name=item.name, price=str(item.price))
            for item in order.cart.items
        ],
        subtotal=str(order.cart.total),
        total=str(order.final_total),
    )
