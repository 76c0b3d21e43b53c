"""Helpers that turn calculator selections into pricing inputs."""

from __future__ import annotations

import datetime as dt
import logging

from btc_put_pricing.config.constants import (
    DAYS_PER_YEAR,
    DEFAULT_EXPIRY_DAYS,
    REFERENCE_VOLATILITY,
)
from btc_put_pricing.exceptions import InvalidParameter

logger = logging.getLogger(__name__)


def years_from_days(days: float) -> float:
    """Convert a calendar-day period to `time_to_expiry` in years."""
    if days <= 0:
        raise InvalidParameter("days", days, "must be > 0")
    return days / DAYS_PER_YEAR


def expiry_date(days: int, today: dt.date | None = None) -> dt.date:
    """Return the calendar expiry date `days` after `today`."""
    today = today or dt.date.today()
    return today + dt.timedelta(days=days)


def strike_from_percentage(current_price: float, percentage: float) -> float:
    """Strike at `percentage` of spot (100 -> at-the-money)."""
    if percentage <= 0:
        raise InvalidParameter("strike_pct", percentage, "must be > 0")
    return percentage / 100.0 * current_price


def reference_volatility(days: int) -> float:
    """Return the reference annualized volatility (percent) for a period.

    Unsupported periods fall back to the 30-day value.
    """
    if days not in REFERENCE_VOLATILITY:
        logger.warning(
            "No reference volatility for %s days; using %s-day value",
            days,
            DEFAULT_EXPIRY_DAYS,
        )
        days = DEFAULT_EXPIRY_DAYS
    return REFERENCE_VOLATILITY[days]
