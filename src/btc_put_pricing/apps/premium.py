#!/usr/bin/env python
"""Estimate a BTC put premium and optionally export its payoff simulation."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Mapping
from typing import Any

import matplotlib.pyplot as plt

from btc_put_pricing.apps._cli import add_run_mode_args, log_dry_run
from btc_put_pricing.cli import (
    DEFAULT_LOGGING,
    add_config_arg,
    add_logging_args,
    build_config,
    logging_overrides,
    resolve_path,
    setup_logging_from_config,
)
from btc_put_pricing.config.constants import (
    DEFAULT_AMOUNT,
    DEFAULT_EXPIRY_DAYS,
    DEFAULT_RISK_FREE_RATE,
    DEFAULT_STRIKE_PCT,
)
from btc_put_pricing.exceptions import InvalidParameter, PricingError
from btc_put_pricing.options import (
    OptionParameters,
    Role,
    apply_role,
    calculate_option_premium,
    expiry_date,
    generate_simulation_points,
    reference_volatility,
    strike_from_percentage,
    years_from_days,
)
from btc_put_pricing.reporting import (
    format_json,
    plot_payoff,
    write_result_json,
    write_simulation_csv,
)

EXIT_INVALID_INPUT = 2

DEFAULT_CONFIG: dict[str, Any] = {
    "logging": DEFAULT_LOGGING,
    "dry_run": False,
    "role": Role.BUYER.value,
    "market": {
        "current_price": None,
        "volatility": None,
        "risk_free_rate": DEFAULT_RISK_FREE_RATE,
    },
    "option": {
        "strike_price": None,
        "strike_pct": DEFAULT_STRIKE_PCT,
        "days": DEFAULT_EXPIRY_DAYS,
        "amount": DEFAULT_AMOUNT,
    },
    "simulate": False,
    "outputs": {
        "json": None,
        "csv": None,
        "plot": None,
    },
}


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Estimate BTC put option premiums with Black-Scholes."
    )
    add_config_arg(parser)
    add_logging_args(parser)
    add_run_mode_args(parser)

    parser.add_argument(
        "--role", choices=[r.value for r in Role], default=None
    )
    parser.add_argument("--current-price", type=float, default=None)
    parser.add_argument("--strike-price", type=float, default=None)
    parser.add_argument(
        "--strike-pct",
        type=float,
        default=None,
        help="Strike as percent of spot; ignored when --strike-price is set.",
    )
    parser.add_argument("--days", type=int, default=None)
    parser.add_argument(
        "--volatility",
        type=float,
        default=None,
        help="Annualized volatility in percent; defaults to the reference "
        "value for --days.",
    )
    parser.add_argument(
        "--risk-free-rate",
        type=float,
        default=None,
        help="Annualized risk-free rate in percent.",
    )
    parser.add_argument("--amount", type=float, default=None)
    parser.add_argument(
        "--simulate",
        dest="simulate",
        action="store_true",
        help="Include the payoff simulation in the output.",
    )
    parser.set_defaults(simulate=None)
    parser.add_argument("--output-json", type=str, default=None)
    parser.add_argument("--output-csv", type=str, default=None)
    parser.add_argument("--plot", type=str, default=None, help="PNG output path.")
    return parser.parse_args(argv)


def _build_overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    market: dict[str, Any] = {}
    option: dict[str, Any] = {}
    outputs: dict[str, Any] = {}

    if args.role is not None:
        overrides["role"] = args.role

    if args.current_price is not None:
        market["current_price"] = args.current_price
    if args.volatility is not None:
        market["volatility"] = args.volatility
    if args.risk_free_rate is not None:
        market["risk_free_rate"] = args.risk_free_rate
    if market:
        overrides["market"] = market

    if args.strike_price is not None:
        option["strike_price"] = args.strike_price
    if args.strike_pct is not None:
        option["strike_pct"] = args.strike_pct
    if args.days is not None:
        option["days"] = args.days
    if args.amount is not None:
        option["amount"] = args.amount
    if option:
        overrides["option"] = option

    if args.simulate is not None:
        overrides["simulate"] = args.simulate

    if args.output_json:
        outputs["json"] = args.output_json
    if args.output_csv:
        outputs["csv"] = args.output_csv
    if args.plot:
        outputs["plot"] = args.plot
    if outputs:
        overrides["outputs"] = outputs

    if args.dry_run:
        overrides["dry_run"] = True

    log_cfg = logging_overrides(args)
    if log_cfg:
        overrides["logging"] = log_cfg

    return overrides


def _as_float(name: str, raw: Any) -> float:
    if isinstance(raw, bool):
        raise InvalidParameter(name, raw, "must be numeric")
    try:
        return float(raw)
    except (TypeError, ValueError) as e:
        raise InvalidParameter(name, raw, "must be numeric") from e


def _as_days(raw: Any) -> int:
    days = _as_float("days", raw)
    if not days.is_integer():
        raise InvalidParameter("days", raw, "must be a whole number of days")
    return int(days)


def _as_role(raw: Any) -> Role:
    try:
        return Role(raw)
    except ValueError as e:
        choices = ", ".join(r.value for r in Role)
        raise InvalidParameter("role", raw, f"must be one of: {choices}") from e


def build_parameters(config: Mapping[str, Any]) -> OptionParameters:
    """Resolve merged config into validated pricing parameters."""
    market = config.get("market", {})
    option = config.get("option", {})

    current_price = market.get("current_price")
    if current_price is None:
        raise InvalidParameter(
            "currentPrice",
            None,
            "is required",
            message="Missing required parameter: currentPrice",
        )
    current_price = _as_float("currentPrice", current_price)

    days = _as_days(option.get("days", DEFAULT_EXPIRY_DAYS))
    strike_price = option.get("strike_price")
    if strike_price is None:
        strike_price = strike_from_percentage(
            current_price,
            _as_float("strike_pct", option.get("strike_pct", DEFAULT_STRIKE_PCT)),
        )

    volatility = market.get("volatility")
    if volatility is None:
        volatility = reference_volatility(days)

    return OptionParameters.from_mapping(
        {
            "currentPrice": current_price,
            "strikePrice": strike_price,
            "timeToExpiry": years_from_days(days),
            "volatility": volatility,
            "riskFreeRate": market.get("risk_free_rate", DEFAULT_RISK_FREE_RATE),
            "amount": option.get("amount", DEFAULT_AMOUNT),
        }
    )


def _run(config: Mapping[str, Any], logger: logging.Logger) -> None:
    role = _as_role(config.get("role", Role.BUYER.value))
    params = build_parameters(config)
    days = _as_days(config["option"].get("days", DEFAULT_EXPIRY_DAYS))
    outputs = config.get("outputs", {})
    json_path = resolve_path(outputs.get("json"))
    csv_path = resolve_path(outputs.get("csv"))
    plot_path = resolve_path(outputs.get("plot"))
    simulate = bool(config.get("simulate")) or csv_path is not None or plot_path is not None

    logger.info("Role:       %s", role.value)
    logger.info("Spot:       %.2f USD", params.current_price)
    logger.info("Strike:     %.2f USD", params.strike_price)
    logger.info("Expiry:     %s (%d days)", expiry_date(days).isoformat(), days)
    logger.info("Volatility: %.2f%%", params.volatility)
    logger.info("Rate:       %.2f%%", params.risk_free_rate)
    logger.info("Amount:     %s BTC", params.amount)

    if config.get("dry_run"):
        log_dry_run(
            logger,
            {
                "action": "price_put",
                "role": role.value,
                "parameters": params.to_dict(),
                "simulate": simulate,
                "outputs": {"json": json_path, "csv": csv_path, "plot": plot_path},
            },
        )
        return

    result = apply_role(calculate_option_premium(params), role)
    payload: dict[str, Any] = {
        "role": role.value,
        "parameters": params.to_dict(),
        "result": result.to_dict(),
    }
    logger.info(
        "Premium %.6f (%.2f%% of spot, APY %.2f%%), break-even %.2f",
        result.premium,
        result.premium_rate,
        result.apy_equivalent,
        result.break_even_price,
    )

    if simulate:
        points = generate_simulation_points(params)
        payload["simulation"] = [p.to_dict() for p in points]
        if csv_path is not None:
            logger.info("Simulation CSV -> %s", write_simulation_csv(csv_path, points))
        if plot_path is not None:
            fig = plot_payoff(
                points,
                params.strike_price,
                current_price=params.current_price,
                title=f"BTC put ({role.value}) payoff, {days}-day expiry",
            )
            plot_path.parent.mkdir(parents=True, exist_ok=True)
            fig.savefig(plot_path, dpi=120)
            plt.close(fig)
            logger.info("Payoff chart -> %s", plot_path)

    if json_path is not None:
        logger.info("Result JSON -> %s", write_result_json(json_path, payload))

    print(format_json(payload))


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    try:
        config = build_config(DEFAULT_CONFIG, args.config, _build_overrides(args))
    except (OSError, ValueError) as e:
        raise SystemExit(f"error: {e}") from e
    if args.print_config:
        print(format_json(config))
        return

    setup_logging_from_config(config.get("logging"))
    logger = logging.getLogger(__name__)

    try:
        _run(config, logger)
    except PricingError as e:
        logger.error("Invalid pricing input: %s", e)
        raise SystemExit(EXIT_INVALID_INPUT) from e


if __name__ == "__main__":
    main()
