"""Interface for premium-pricing engines."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from btc_put_pricing.options.types import OptionParameters, PremiumCalculationResult


@runtime_checkable
class PremiumModel(Protocol):
    """Pricing capability required by the simulation generator and apps."""

    def calculate(self, params: OptionParameters) -> PremiumCalculationResult:
        """Return premium economics and per-unit Greeks for one position."""
