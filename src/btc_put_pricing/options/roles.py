"""Buyer/seller presentation of a priced put position."""

from __future__ import annotations

from dataclasses import replace
from enum import StrEnum

from btc_put_pricing.options.types import PremiumCalculationResult


class Role(StrEnum):
    """Calculator perspective: protection buyer or liquidity seller."""

    BUYER = "buyer"
    SELLER = "seller"


def apply_role(
    result: PremiumCalculationResult, role: Role | str
) -> PremiumCalculationResult:
    """Return `result` as seen by `role`.

    Sellers are short the put, so delta and theta flip sign. Premium, gamma,
    vega and break-even are reported unchanged for both sides.
    """
    role = Role(role)
    if role is Role.BUYER:
        return result
    return replace(result, delta=-result.delta, theta=-result.theta)
