"""Payoff curves of a protective put position at expiry.

The premium is priced once at the current parameters and held constant over
the grid: each point is the terminal value for a different expiry price, not
a mark-to-market revaluation.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import pandas as pd

from btc_put_pricing.options.engines.base import PremiumModel
from btc_put_pricing.options.engines.bs_pricer import BlackScholesPutPricer
from btc_put_pricing.options.types import OptionParameters, SimulationPoint

logger = logging.getLogger(__name__)

SIMULATION_COLUMNS = ["price", "unprotected_value", "protected_value"]


@dataclass(frozen=True)
class PayoffGrid:
    """Evenly spaced terminal prices expressed as fractions of spot.

    `steps` intervals yield `steps + 1` points including both ends.
    """

    lower_pct: float = 0.7
    upper_pct: float = 1.3
    steps: int = 30

    def __post_init__(self) -> None:
        if self.steps < 1:
            raise ValueError("steps must be >= 1")
        if not 0 < self.lower_pct < self.upper_pct:
            raise ValueError("grid bounds must satisfy 0 < lower_pct < upper_pct")

    def prices(self, spot: float) -> list[float]:
        min_price = spot * self.lower_pct
        max_price = spot * self.upper_pct
        step = (max_price - min_price) / self.steps
        # Index-based to avoid drift from repeated addition.
        return [min_price + i * step for i in range(self.steps + 1)]


DEFAULT_GRID = PayoffGrid()


def protected_value(
    price: float, strike_price: float, amount: float, premium: float
) -> float:
    """Value of `amount` BTC plus a long put at expiry, net of total premium."""
    if price < strike_price:
        return strike_price * amount - premium
    return price * amount - premium


def generate_simulation_points(
    params: OptionParameters,
    *,
    pricer: PremiumModel | None = None,
    grid: PayoffGrid = DEFAULT_GRID,
) -> list[SimulationPoint]:
    """Return protected vs. unprotected portfolio values, ascending by price."""
    pricer = pricer or BlackScholesPutPricer()
    premium = pricer.calculate(params).premium

    points = [
        SimulationPoint(
            price=price,
            unprotected_value=price * params.amount,
            protected_value=protected_value(
                price, params.strike_price, params.amount, premium
            ),
        )
        for price in grid.prices(params.current_price)
    ]
    logger.debug(
        "Generated %d payoff points over [%.2f, %.2f] with premium %.6f",
        len(points),
        points[0].price,
        points[-1].price,
        premium,
    )
    return points


def simulation_frame(points: Sequence[SimulationPoint]) -> pd.DataFrame:
    """Tabulate simulation points for export and plotting."""
    return pd.DataFrame(
        [(p.price, p.unprotected_value, p.protected_value) for p in points],
        columns=SIMULATION_COLUMNS,
    )
