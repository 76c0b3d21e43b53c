import datetime as dt
import logging

import pytest

from btc_put_pricing.exceptions import InvalidParameter
from btc_put_pricing.options import (
    OptionParameters,
    Role,
    apply_role,
    calculate_option_premium,
    expiry_date,
    reference_volatility,
    strike_from_percentage,
    years_from_days,
)


@pytest.fixture
def result():
    params = OptionParameters(
        current_price=60_000.0,
        strike_price=57_000.0,
        time_to_expiry=90 / 365.0,
        volatility=52.7,
        risk_free_rate=4.5,
        amount=0.25,
    )
    return calculate_option_premium(params)


def test_buyer_view_is_unchanged(result):
    assert apply_role(result, Role.BUYER) is result
    assert apply_role(result, "buyer") is result


def test_seller_view_flips_delta_and_theta_only(result):
    seller = apply_role(result, Role.SELLER)

    assert seller.delta == -result.delta
    assert seller.theta == -result.theta
    assert seller.delta > 0
    assert seller.theta > 0
    assert seller.premium == result.premium
    assert seller.gamma == result.gamma
    assert seller.vega == result.vega
    assert seller.break_even_price == result.break_even_price


def test_unknown_role_is_rejected(result):
    with pytest.raises(ValueError):
        apply_role(result, "market-maker")


def test_years_from_days():
    assert years_from_days(30) == pytest.approx(30 / 365)
    assert years_from_days(360) == pytest.approx(360 / 365)
    with pytest.raises(InvalidParameter):
        years_from_days(0)


def test_expiry_date_counts_calendar_days():
    assert expiry_date(30, today=dt.date(2024, 1, 15)) == dt.date(2024, 2, 14)


def test_strike_from_percentage():
    assert strike_from_percentage(50_000.0, 90.0) == pytest.approx(45_000.0)
    assert strike_from_percentage(50_000.0, 100.0) == pytest.approx(50_000.0)
    with pytest.raises(InvalidParameter):
        strike_from_percentage(50_000.0, 0.0)


@pytest.mark.parametrize(
    ("days", "expected"),
    [(30, 42.5), (60, 48.2), (90, 52.7), (180, 65.3), (360, 78.9)],
)
def test_reference_volatility_table(days, expected):
    assert reference_volatility(days) == expected


def test_reference_volatility_falls_back_to_30_days(caplog):
    with caplog.at_level(logging.WARNING):
        assert reference_volatility(45) == 42.5
    assert "45 days" in caplog.text
