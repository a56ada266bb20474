"""Order records produced by a successful checkout.

``OrderCandidate`` is what checkout hands to the repository.  Only the
repository turns it into an ``Order``, because only the repository may
assign an identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from checkout.domain.model.cart import Cart
from checkout.domain.model.value_objects import Money


class OrderStatus(Enum):
    PROCESSED = "PROCESSED"


@dataclass(frozen=True)
class OrderCandidate:
    """A charged cart that has not been persisted yet."""

    cart: Cart
    final_total: Money
    status: OrderStatus = OrderStatus.PROCESSED


@dataclass
class Order:
    """The persisted, authoritative record of a completed checkout."""

    id: int
    cart: Cart
    final_total: Money
    status: OrderStatus = OrderStatus.PROCESSED

    @staticmethod
    def from_candidate(order_id: int, candidate: OrderCandidate) -> Order:
        return Order(
            id=order_id,
            cart=candidate.cart,
            final_total=candidate.final_total,
            status=candidate.status,
        )
