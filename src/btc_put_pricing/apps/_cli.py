"""Run-mode flags shared by app entrypoints."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from btc_put_pricing.reporting import format_json


def add_run_mode_args(parser) -> None:
    """Add the mutually exclusive `--print-config` / `--dry-run` flags."""
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--print-config",
        action="store_true",
        help="Print merged config (JSON) and exit.",
    )
    group.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate inputs and log the pricing plan without computing.",
    )


def log_dry_run(logger: logging.Logger, plan: Mapping[str, Any]) -> None:
    logger.info("DRY RUN: no prices were computed.")
    logger.info("DRY RUN plan:\n%s", format_json(plan))
