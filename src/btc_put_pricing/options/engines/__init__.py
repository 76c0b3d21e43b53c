"""Pricing engines used by the simulation generator and apps."""

from .base import PremiumModel
from .bs_pricer import BlackScholesPutPricer, calculate_option_premium

__all__ = [
    "PremiumModel",
    "BlackScholesPutPricer",
    "calculate_option_premium",
]
