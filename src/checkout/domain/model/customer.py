"""Customer as seen by checkout.

Users are owned by an external identity source; checkout only reads
the email (for the approval notice) and the tier (for the discount).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CustomerTier(Enum):
    STANDARD = "STANDARD"
    PREMIUM = "PREMIUM"


@dataclass(frozen=True)
class User:
    id: int
    name: str
    email: str
    tier: CustomerTier = CustomerTier.STANDARD
