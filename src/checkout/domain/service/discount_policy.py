"""Domain service: tier-based discount policy.

Premium customers pay 90% of the cart total; everyone else pays the
full amount.  Every amount to charge is rounded half-up to whole cents.
"""

from __future__ import annotations

from decimal import Decimal

from checkout.domain.exceptions import ValidationError
from checkout.domain.model.customer import CustomerTier
from checkout.domain.model.value_objects import Money

DISCOUNT_RATES: dict[CustomerTier, Decimal] = {
    CustomerTier.STANDARD: Decimal("0"),
    CustomerTier.PREMIUM: Decimal("0.10"),
}


def discount_rate(tier: CustomerTier) -> Decimal:
    try:
        return DISCOUNT_RATES[tier]
    except KeyError:
        raise ValidationError(f"No discount rule for tier {tier!r}") from None


def apply_discount(total: Money, tier: CustomerTier) -> Money:
    """Return the amount to charge for *total* given the owner's *tier*.

    Every tier goes through the same cent rounding, so the amount charged,
    persisted and shown in the approval email is always the same figure.
    """
    return total.scale(Decimal("1") - discount_rate(tier))
