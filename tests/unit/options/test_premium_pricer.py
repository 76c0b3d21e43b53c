import pytest

from btc_put_pricing import (
    InvalidParameter,
    NumericInstability,
    calculate_option_premium,
)
from btc_put_pricing.options import (
    BlackScholesPutPricer,
    OptionParameters,
    PremiumModel,
    put_greeks,
)


def _params(**overrides) -> OptionParameters:
    base = {
        "current_price": 50_000.0,
        "strike_price": 50_000.0,
        "time_to_expiry": 30 / 365.0,
        "volatility": 60.0,
        "risk_free_rate": 4.5,
        "amount": 1.0,
    }
    base.update(overrides)
    return OptionParameters(**base)


def test_pricer_converts_percent_inputs_once():
    params = _params(strike_price=48_000.0)
    ref = put_greeks(S=50_000.0, K=48_000.0, T=30 / 365.0, sigma=0.60, r=0.045)

    out = calculate_option_premium(params)

    assert out.premium == pytest.approx(ref["price"])
    assert out.delta == pytest.approx(ref["delta"])
    assert out.gamma == pytest.approx(ref["gamma"])
    assert out.theta == pytest.approx(ref["theta"])
    assert out.vega == pytest.approx(ref["vega"])


def test_aggregate_fields_follow_premium_per_unit():
    params = _params(amount=2.5)
    out = calculate_option_premium(params)
    per_unit = out.premium / params.amount

    assert out.premium_usd == pytest.approx(out.premium * params.current_price)
    assert out.premium_rate == pytest.approx(per_unit / params.current_price * 100)
    assert out.apy_equivalent == pytest.approx(
        per_unit / params.current_price / params.time_to_expiry * 100
    )
    assert out.break_even_price == pytest.approx(params.strike_price - per_unit)


def test_break_even_is_exact_identity():
    params = _params()
    out = calculate_option_premium(params)
    per_unit = put_greeks(
        S=params.current_price,
        K=params.strike_price,
        T=params.time_to_expiry,
        sigma=params.sigma,
        r=params.rate,
    )["price"]
    assert out.break_even_price == params.strike_price - per_unit


def test_greeks_are_per_unit_not_scaled_by_amount():
    one = calculate_option_premium(_params(amount=1.0))
    many = calculate_option_premium(_params(amount=10.0))

    assert many.premium == pytest.approx(one.premium * 10)
    assert many.greeks == one.greeks
    assert many.premium_rate == pytest.approx(one.premium_rate)


def test_greeks_scaled_multiplies_every_sensitivity():
    greeks = calculate_option_premium(_params()).greeks
    scaled = greeks.scaled(3.0)
    assert scaled.delta == pytest.approx(3 * greeks.delta)
    assert scaled.gamma == pytest.approx(3 * greeks.gamma)
    assert scaled.theta == pytest.approx(3 * greeks.theta)
    assert scaled.vega == pytest.approx(3 * greeks.vega)


def test_result_to_dict_uses_wire_names():
    payload = calculate_option_premium(_params()).to_dict()
    assert set(payload) == {
        "premium",
        "premiumUsd",
        "premiumRate",
        "apyEquivalent",
        "delta",
        "gamma",
        "theta",
        "vega",
        "breakEvenPrice",
    }


def test_pricer_is_protocol_compatible():
    assert isinstance(BlackScholesPutPricer(), PremiumModel)


@pytest.mark.parametrize(
    "overrides",
    [
        {"volatility": 0.0},
        {"volatility": -5.0},
        {"time_to_expiry": 0.0},
        {"current_price": 0.0},
        {"strike_price": -1.0},
        {"amount": 0.0},
        {"risk_free_rate": -0.5},
        {"current_price": float("nan")},
        {"volatility": float("inf")},
    ],
)
def test_invalid_parameters_are_rejected(overrides):
    with pytest.raises(InvalidParameter):
        _params(**overrides)


def test_zero_volatility_never_returns_nan():
    with pytest.raises(InvalidParameter) as exc:
        calculate_option_premium(_params(volatility=0.0))
    assert exc.value.name == "volatility"


def test_zero_risk_free_rate_is_allowed():
    out = calculate_option_premium(_params(risk_free_rate=0.0))
    assert out.premium > 0


def test_from_mapping_accepts_wire_and_attribute_names():
    wire = OptionParameters.from_mapping(
        {
            "currentPrice": "50000",
            "strikePrice": 45_000,
            "timeToExpiry": 30 / 365.0,
            "volatility": 42.5,
            "riskFreeRate": 4.5,
            "amount": 0.5,
        }
    )
    attrs = OptionParameters.from_mapping(
        {
            "current_price": 50_000.0,
            "strike_price": 45_000.0,
            "time_to_expiry": 30 / 365.0,
            "volatility": 42.5,
            "risk_free_rate": 4.5,
            "amount": 0.5,
        }
    )
    assert wire == attrs
    assert wire.to_dict()["currentPrice"] == 50_000.0
    assert wire.sigma == pytest.approx(0.425)
    assert wire.rate == pytest.approx(0.045)


def test_from_mapping_reports_missing_field():
    with pytest.raises(InvalidParameter, match="Missing required parameter: amount"):
        OptionParameters.from_mapping(
            {
                "currentPrice": 50_000.0,
                "strikePrice": 45_000.0,
                "timeToExpiry": 0.1,
                "volatility": 42.5,
                "riskFreeRate": 4.5,
            }
        )


@pytest.mark.parametrize("bad", ["abc", [1, 2], True])
def test_from_mapping_rejects_non_numeric(bad):
    data = {
        "currentPrice": 50_000.0,
        "strikePrice": 45_000.0,
        "timeToExpiry": 0.1,
        "volatility": bad,
        "riskFreeRate": 4.5,
        "amount": 1.0,
    }
    with pytest.raises(InvalidParameter, match="volatility"):
        OptionParameters.from_mapping(data)


def test_overflowing_position_size_raises_numeric_instability():
    with pytest.raises(NumericInstability, match="premium"):
        calculate_option_premium(_params(amount=1e305))


def test_vanishing_expiry_apy_raises_numeric_instability():
    params = _params(strike_price=55_000.0, time_to_expiry=5e-324)
    with pytest.raises(NumericInstability, match="apy"):
        calculate_option_premium(params)
