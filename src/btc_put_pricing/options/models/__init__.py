"""Analytical option-pricing models."""

from .black_scholes import (
    apy_equivalent,
    bs_d1_d2,
    bs_gamma,
    bs_vega,
    ensure_finite,
    norm_cdf,
    norm_pdf,
    put_break_even,
    put_delta,
    put_greeks,
    put_premium_per_unit,
    put_theta,
)

__all__ = [
    "bs_d1_d2",
    "ensure_finite",
    "norm_cdf",
    "norm_pdf",
    "put_premium_per_unit",
    "put_delta",
    "bs_gamma",
    "put_theta",
    "bs_vega",
    "put_break_even",
    "apy_equivalent",
    "put_greeks",
]
