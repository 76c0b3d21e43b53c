"""Put pricing models, engines, payoff simulation, and shared types."""

from .engines import BlackScholesPutPricer, PremiumModel, calculate_option_premium
from .inputs import (
    expiry_date,
    reference_volatility,
    strike_from_percentage,
    years_from_days,
)
from .models.black_scholes import (
    apy_equivalent,
    bs_d1_d2,
    bs_gamma,
    bs_vega,
    norm_cdf,
    put_break_even,
    put_delta,
    put_greeks,
    put_premium_per_unit,
    put_theta,
)
from .roles import Role, apply_role
from .simulation import (
    DEFAULT_GRID,
    PayoffGrid,
    generate_simulation_points,
    protected_value,
    simulation_frame,
)
from .types import (
    Greeks,
    OptionParameters,
    PremiumCalculationResult,
    SimulationPoint,
)

__all__ = [
    "OptionParameters",
    "PremiumCalculationResult",
    "SimulationPoint",
    "Greeks",
    "PremiumModel",
    "BlackScholesPutPricer",
    "calculate_option_premium",
    "PayoffGrid",
    "DEFAULT_GRID",
    "generate_simulation_points",
    "protected_value",
    "simulation_frame",
    "Role",
    "apply_role",
    "years_from_days",
    "expiry_date",
    "strike_from_percentage",
    "reference_volatility",
    "bs_d1_d2",
    "norm_cdf",
    "put_premium_per_unit",
    "put_delta",
    "bs_gamma",
    "put_theta",
    "bs_vega",
    "put_break_even",
    "apy_equivalent",
    "put_greeks",
]
