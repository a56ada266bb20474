"""Cart and its priced items.

A Cart is assembled by the caller and handed to checkout once.  Nothing
in this package mutates it, so both types are frozen.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from checkout.domain.model.customer import User
from checkout.domain.model.value_objects import Money


@dataclass(frozen=True)
class Item:
    """A priced line in the cart.  Price invariants live in ``Money``."""

    name: str
    price: Money


@dataclass(frozen=True)
class Cart:
    owner: User
    items: tuple[Item, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable but store an immutable, ordered copy
        object.__setattr__(self, "items", tuple(self.items))

    @property
    def total(self) -> Money:
        """Sum of item prices; an empty cart totals zero."""
        result = Money.zero()
        for item in self.items:
            result = result + item.price
        return result
