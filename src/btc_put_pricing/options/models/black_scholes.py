"""Black-Scholes put pricing and Greeks for European options.

All functions take decimal-unit inputs (`sigma=0.6`, `r=0.045`). Percent-unit
conversion happens once in `OptionParameters.sigma` / `OptionParameters.rate`.
"""

from __future__ import annotations

import math

import numpy as np
from scipy.stats import norm

from btc_put_pricing.exceptions import InvalidParameter, NumericInstability

DAYS_PER_YEAR = 365.0
VOL_POINT = 100.0


def _validate_inputs(S: float, K: float, T: float, sigma: float, r: float) -> None:
    for name, value in (("S", S), ("K", K), ("T", T), ("sigma", sigma)):
        if not math.isfinite(value):
            raise InvalidParameter(name, value, "must be finite")
        if value <= 0:
            raise InvalidParameter(name, value, "must be > 0")
    if not math.isfinite(r):
        raise InvalidParameter("r", r, "must be finite")
    if r < 0:
        raise InvalidParameter("r", r, "must be >= 0")


def ensure_finite(name: str, value: float) -> float:
    """Return `value` as a float, raising `NumericInstability` if non-finite."""
    if not np.isfinite(value):
        raise NumericInstability(f"{name} is not finite ({value!r})")
    return float(value)


def norm_cdf(x: float) -> float:
    """Standard normal cumulative distribution function."""
    return float(norm.cdf(x))


def norm_pdf(x: float) -> float:
    """Standard normal probability density function."""
    return float(norm.pdf(x))


def bs_d1_d2(
    S: float,
    K: float,
    T: float,
    sigma: float,
    r: float = 0.0,
) -> tuple[float, float]:
    """Compute d1 and d2 for Black-Scholes without dividends."""
    _validate_inputs(S, K, T, sigma, r)
    vol_sqrt_t = sigma * np.sqrt(T)
    d1 = (np.log(S / K) + (r + 0.5 * sigma**2) * T) / vol_sqrt_t
    d2 = d1 - vol_sqrt_t
    return ensure_finite("d1", d1), ensure_finite("d2", d2)


def put_premium_per_unit(
    S: float,
    K: float,
    T: float,
    sigma: float,
    r: float = 0.0,
) -> float:
    """Black-Scholes European put value for one unit of underlying."""
    d1, d2 = bs_d1_d2(S, K, T, sigma, r)
    price = K * np.exp(-r * T) * norm.cdf(-d2) - S * norm.cdf(-d1)
    return ensure_finite("put premium", price)


def put_delta(
    S: float,
    K: float,
    T: float,
    sigma: float,
    r: float = 0.0,
) -> float:
    """Put delta as quoted by the calculator: `N(-d1) - 1`, in [-1, 0].

    This is the calculator's published convention, not the textbook
    `N(d1) - 1`; at the money it reads about 0.09 more negative.
    """
    d1, _ = bs_d1_d2(S, K, T, sigma, r)
    return ensure_finite("delta", norm.cdf(-d1) - 1.0)


def bs_gamma(
    S: float,
    K: float,
    T: float,
    sigma: float,
    r: float = 0.0,
) -> float:
    """Black-Scholes gamma (identical for puts and calls)."""
    d1, _ = bs_d1_d2(S, K, T, sigma, r)
    return ensure_finite("gamma", norm.pdf(d1) / (S * sigma * np.sqrt(T)))


def put_theta(
    S: float,
    K: float,
    T: float,
    sigma: float,
    r: float = 0.0,
) -> float:
    """Put theta per calendar day as quoted by the calculator.

    The rate carry `r·K·e^(-rT)·N(-d2)` is subtracted from the decay term;
    the textbook put theta adds it. The two agree when `r = 0`.
    """
    d1, d2 = bs_d1_d2(S, K, T, sigma, r)
    term1 = -(S * norm.pdf(d1) * sigma) / (2 * np.sqrt(T))
    term2 = r * K * np.exp(-r * T) * norm.cdf(-d2)
    return ensure_finite("theta", (term1 - term2) / DAYS_PER_YEAR)


def bs_vega(
    S: float,
    K: float,
    T: float,
    sigma: float,
    r: float = 0.0,
) -> float:
    """Black-Scholes vega per 1 volatility point (0.01 in decimals)."""
    d1, _ = bs_d1_d2(S, K, T, sigma, r)
    return ensure_finite("vega", S * np.sqrt(T) * norm.pdf(d1) / VOL_POINT)


def put_break_even(K: float, premium_per_unit: float) -> float:
    """Terminal price at which a long put position recovers its premium."""
    return K - premium_per_unit


def apy_equivalent(premium_per_unit: float, S: float, T: float) -> float:
    """Premium as an annualized percentage of spot."""
    if T <= 0:
        raise InvalidParameter("T", T, "must be > 0")
    if S <= 0:
        raise InvalidParameter("S", S, "must be > 0")
    return ensure_finite("apy", premium_per_unit / S / T * 100.0)


def put_greeks(
    S: float,
    K: float,
    T: float,
    sigma: float,
    r: float = 0.0,
) -> dict[str, float]:
    """Return per-unit put premium and Greeks for one option."""
    return {
        "price": put_premium_per_unit(S, K, T, sigma, r),
        "delta": put_delta(S, K, T, sigma, r),
        "gamma": bs_gamma(S, K, T, sigma, r),
        "theta": put_theta(S, K, T, sigma, r),
        "vega": bs_vega(S, K, T, sigma, r),
    }
