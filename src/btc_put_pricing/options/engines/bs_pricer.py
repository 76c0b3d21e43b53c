"""Black-Scholes premium engine for BTC put positions."""

from __future__ import annotations

import logging

from btc_put_pricing.options.models.black_scholes import (
    apy_equivalent,
    ensure_finite,
    put_break_even,
    put_greeks,
)
from btc_put_pricing.options.types import OptionParameters, PremiumCalculationResult

logger = logging.getLogger(__name__)


class BlackScholesPutPricer:
    """Exact Black-Scholes put pricer backed by analytical formulas.

    Role-agnostic: returns long-put Greeks. Seller views are derived with
    `btc_put_pricing.options.roles.apply_role`.
    """

    def calculate(self, params: OptionParameters) -> PremiumCalculationResult:
        out = put_greeks(
            S=params.current_price,
            K=params.strike_price,
            T=params.time_to_expiry,
            sigma=params.sigma,
            r=params.rate,
        )
        premium_per_unit = out["price"]
        premium = ensure_finite("premium", premium_per_unit * params.amount)

        result = PremiumCalculationResult(
            premium=premium,
            premium_usd=ensure_finite("premium_usd", premium * params.current_price),
            premium_rate=ensure_finite(
                "premium_rate", premium_per_unit / params.current_price * 100.0
            ),
            apy_equivalent=apy_equivalent(
                premium_per_unit, params.current_price, params.time_to_expiry
            ),
            delta=out["delta"],
            gamma=out["gamma"],
            theta=out["theta"],
            vega=out["vega"],
            break_even_price=put_break_even(params.strike_price, premium_per_unit),
        )
        logger.debug(
            "Priced put S=%.2f K=%.2f T=%.4f vol=%.2f%% r=%.2f%% -> unit=%.6f",
            params.current_price,
            params.strike_price,
            params.time_to_expiry,
            params.volatility,
            params.risk_free_rate,
            premium_per_unit,
        )
        return result


_DEFAULT_PRICER = BlackScholesPutPricer()


def calculate_option_premium(params: OptionParameters) -> PremiumCalculationResult:
    """Price a put position with the default Black-Scholes engine."""
    return _DEFAULT_PRICER.calculate(params)
