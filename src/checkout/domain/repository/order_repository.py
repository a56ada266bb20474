"""Abstract repository for Order records.

Defined in the domain layer so checkout never depends on a storage
mechanism.  Concrete implementations live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from checkout.domain.model.order import Order, OrderCandidate


class OrderRepository(ABC):

    @abstractmethod
    async def save(self, candidate: OrderCandidate) -> Order:
        """Persist a candidate and return the stored Order with its new ID.

        Storage failures must raise; returning None is not allowed.
        """

    @abstractmethod
    async def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""
