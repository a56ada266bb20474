"""JSON-file-backed implementation of OrderRepository.

File access is blocking inside the coroutines; this store backs the
single-shot CLI and is not meant for a concurrent event loop.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from checkout.domain.model.cart import Cart, Item
from checkout.domain.model.customer import CustomerTier, User
from checkout.domain.model.order import Order, OrderCandidate, OrderStatus
from checkout.domain.model.value_objects import Money
from checkout.domain.repository.order_repository import OrderRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    async def save(self, candidate: OrderCandidate) -> Order:
        orders = self._load_raw()
        next_id = max((o["id"] for o in orders), default=0) + 1

        order = Order.from_candidate(next_id, candidate)
        orders.append(self._to_raw(order))
        self._persist_raw(orders)
        return order

    async def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        owner = order.cart.owner
        return {
            "id": order.id,
            "status": order.status.value,
            "final_total": str(order.final_total.amount),
            "currency": order.final_total.currency,
            "owner": {
                "id": owner.id,
                "name": owner.name,
                "email": owner.email,
                "tier": owner.tier.value,
            },
            "items": [
                {
                    "name": item.name,
                    "price": str(item.price.amount),
                    "currency": item.price.currency,
                }
                for item in order.cart.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        owner = User(
            id=raw["owner"]["id"],
            name=raw["owner"]["name"],
            email=raw["owner"]["email"],
            tier=CustomerTier(raw["owner"]["tier"]),
        )
        items = [
            Item(
                name=i["name"],
                price=Money(Decimal(i["price"]), i.get("currency", "USD")),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            cart=Cart(owner=owner, items=items),
            final_total=Money(Decimal(raw["final_total"]), raw.get("currency", "USD")),
            status=OrderStatus(raw["status"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
