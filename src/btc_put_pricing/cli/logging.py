from __future__ import annotations

import argparse
from collections.abc import Mapping
from typing import Any

from btc_put_pricing.utils.logging_config import setup_logging

DEFAULT_LOGGING: dict[str, Any] = {
    "level": "INFO",
    "format": "%(asctime)s %(levelname)s %(shortname)s - %(message)s",
    "file": None,
    "color": True,
    "modules": None,
}

# argparse dest -> key in the `logging` config section.
_FLAG_KEYS: dict[str, str] = {
    "log_level": "level",
    "log_file": "file",
    "log_format": "format",
    "log_color": "color",
}


def _module_level(text: str) -> tuple[str, str]:
    name, sep, level = text.partition("=")
    if not sep or not name or not level:
        raise argparse.ArgumentTypeError(
            f"expected LOGGER=LEVEL, got {text!r}"
        )
    return name, level


def add_logging_args(parser) -> None:
    group = parser.add_argument_group("logging")
    group.add_argument("--log-level", default=None, help="Root level (INFO, DEBUG, ...).")
    group.add_argument("--log-file", default=None, help="Also write logs to this file.")
    group.add_argument("--log-format", default=None, help="Console format string.")
    group.add_argument(
        "--log-module",
        dest="log_modules",
        type=_module_level,
        action="append",
        default=None,
        metavar="LOGGER=LEVEL",
        help="Per-logger level, e.g. btc_put_pricing.options=DEBUG. Repeatable.",
    )
    color = group.add_mutually_exclusive_group()
    color.add_argument("--color", dest="log_color", action="store_true")
    color.add_argument("--no-color", dest="log_color", action="store_false")
    parser.set_defaults(log_color=None)


def logging_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Return the `logging` config entries set on the command line."""
    overrides = {
        key: getattr(args, dest)
        for dest, key in _FLAG_KEYS.items()
        if getattr(args, dest, None) is not None
    }
    modules = getattr(args, "log_modules", None)
    if modules:
        overrides["modules"] = dict(modules)
    return overrides


def _normalize_logging_config(config: Mapping[str, Any] | None) -> dict[str, Any]:
    merged = dict(DEFAULT_LOGGING)
    if not config:
        return merged

    for key in DEFAULT_LOGGING:
        if config.get(key) is not None:
            merged[key] = config[key]
    return merged


def setup_logging_from_config(config: Mapping[str, Any] | None) -> None:
    log_cfg = _normalize_logging_config(config)
    setup_logging(
        log_cfg["level"],
        fmt_console=log_cfg["format"],
        log_file=log_cfg["file"],
        colored=log_cfg["color"],
        module_levels=log_cfg["modules"],
    )
