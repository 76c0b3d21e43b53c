"""Black-Scholes premium estimates and payoff curves for BTC put options."""

from .exceptions import InvalidParameter, NumericInstability, PricingError
from .options import (
    OptionParameters,
    PremiumCalculationResult,
    SimulationPoint,
    calculate_option_premium,
    generate_simulation_points,
)

__all__ = [
    "OptionParameters",
    "PremiumCalculationResult",
    "SimulationPoint",
    "calculate_option_premium",
    "generate_simulation_points",
    "PricingError",
    "InvalidParameter",
    "NumericInstability",
]
