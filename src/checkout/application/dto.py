"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderItemDTO:
    name: str
    price: str  # formatted, e.g. "$15.00"


@dataclass(frozen=True)
class OrderDTO:
    """Output: a persisted order as displayed to the user."""

    id: int
    customer_name: str
    customer_email: str
    tier: str
    status: str
    items: list[OrderItemDTO]
    subtotal: str
    total: str
