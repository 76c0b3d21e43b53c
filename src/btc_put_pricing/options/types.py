"""Shared option-pricing dataclasses for premium and payoff calculations."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from btc_put_pricing.exceptions import InvalidParameter

# Wire names used by JSON callers, keyed by the dataclass attribute.
PARAMETER_FIELDS: dict[str, str] = {
    "current_price": "currentPrice",
    "strike_price": "strikePrice",
    "time_to_expiry": "timeToExpiry",
    "volatility": "volatility",
    "risk_free_rate": "riskFreeRate",
    "amount": "amount",
}


def _require_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise InvalidParameter(name, value, "must be finite")


def _require_positive(name: str, value: float) -> None:
    _require_finite(name, value)
    if value <= 0:
        raise InvalidParameter(name, value, "must be > 0")


@dataclass(frozen=True)
class OptionParameters:
    """Inputs for pricing one BTC put position.

    Units:
    - `current_price`, `strike_price`: USD per BTC
    - `time_to_expiry`: years (30-day period -> 30 / 365)
    - `volatility`, `risk_free_rate`: percent (42.5 means 42.5%)
    - `amount`: BTC covered by the position
    """

    current_price: float
    strike_price: float
    time_to_expiry: float
    volatility: float
    risk_free_rate: float
    amount: float

    def __post_init__(self) -> None:
        _require_positive("current_price", self.current_price)
        _require_positive("strike_price", self.strike_price)
        _require_positive("time_to_expiry", self.time_to_expiry)
        _require_positive("volatility", self.volatility)
        _require_finite("risk_free_rate", self.risk_free_rate)
        if self.risk_free_rate < 0:
            raise InvalidParameter(
                "risk_free_rate", self.risk_free_rate, "must be >= 0"
            )
        _require_positive("amount", self.amount)

    @property
    def sigma(self) -> float:
        """Annualized volatility in decimals."""
        return self.volatility / 100.0

    @property
    def rate(self) -> float:
        """Annualized risk-free rate in decimals."""
        return self.risk_free_rate / 100.0

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> OptionParameters:
        """Build parameters from a request-style mapping.

        Accepts both camelCase wire keys and snake_case attribute names.
        """
        values: dict[str, float] = {}
        for attr, wire in PARAMETER_FIELDS.items():
            raw = data.get(wire, data.get(attr))
            if raw is None:
                raise InvalidParameter(
                    wire,
                    None,
                    "is required",
                    message=f"Missing required parameter: {wire}",
                )
            if isinstance(raw, bool):
                raise InvalidParameter(wire, raw, "must be numeric")
            try:
                values[attr] = float(raw)
            except (TypeError, ValueError) as e:
                raise InvalidParameter(wire, raw, "must be numeric") from e
        return cls(**values)

    def to_dict(self) -> dict[str, float]:
        return {wire: getattr(self, attr) for attr, wire in PARAMETER_FIELDS.items()}


@dataclass(frozen=True, slots=True)
class Greeks:
    """Per-unit put sensitivities.

    `theta` is daily decay and `vega` is the change for a 1-point volatility
    move.
    """

    delta: float
    gamma: float
    theta: float
    vega: float

    def scaled(self, factor: float) -> Greeks:
        """Return Greeks scaled by a scalar position multiplier."""
        return Greeks(
            delta=self.delta * factor,
            gamma=self.gamma * factor,
            theta=self.theta * factor,
            vega=self.vega * factor,
        )


@dataclass(frozen=True, slots=True)
class PremiumCalculationResult:
    """Premium economics for one put position.

    `premium` covers the whole `amount`; Greeks stay per unit.
    """

    premium: float
    premium_usd: float
    premium_rate: float
    apy_equivalent: float
    delta: float
    gamma: float
    theta: float
    vega: float
    break_even_price: float

    @property
    def greeks(self) -> Greeks:
        return Greeks(
            delta=self.delta, gamma=self.gamma, theta=self.theta, vega=self.vega
        )

    def to_dict(self) -> dict[str, float]:
        """Return the camelCase payload consumed by the UI."""
        return {
            "premium": self.premium,
            "premiumUsd": self.premium_usd,
            "premiumRate": self.premium_rate,
            "apyEquivalent": self.apy_equivalent,
            "delta": self.delta,
            "gamma": self.gamma,
            "theta": self.theta,
            "vega": self.vega,
            "breakEvenPrice": self.break_even_price,
        }


@dataclass(frozen=True, slots=True)
class SimulationPoint:
    """Portfolio value at one terminal BTC price."""

    price: float
    unprotected_value: float
    protected_value: float

    def to_dict(self) -> dict[str, float]:
        return {
            "price": self.price,
            "unprotectedValue": self.unprotected_value,
            "protectedValue": self.protected_value,
        }
