"""Logging configuration for command-line entrypoints.

Library modules never configure handlers; they only do
`logger = logging.getLogger(__name__)`. Entrypoints call `setup_logging(...)`
once.

The console handler injects `record.shortname` (last dotted component of the
logger name), so console formats may use `%(shortname)s`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

# Chatty third-party loggers pulled in by plotting.
NOISY_LOGGERS = ("matplotlib", "PIL")

_LEVELS: dict[str, int] = {
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}


class _AddShortNameFilter(logging.Filter):
    """Inject `record.shortname` without mutating `record.name`."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.shortname = record.name.rsplit(".", 1)[-1]
        return True


class _ColorFormatter(logging.Formatter):
    """Color only the level name with ANSI codes; console use only."""

    _RESET = "\033[0m"
    _LEVEL_COLOR: dict[int, str] = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[1;31m",
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self._LEVEL_COLOR.get(record.levelno)
        if not color:
            return super().format(record)

        original = record.levelname
        record.levelname = f"{color}{original}{self._RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def coerce_level(level: int | str) -> int:
    """Coerce a logging level given as int or name into an int."""
    if isinstance(level, int):
        return level

    s = str(level).strip().upper()
    if not s:
        raise ValueError("Empty logging level")
    if s.isdigit():
        return int(s)

    try:
        return _LEVELS[s]
    except KeyError as e:
        raise ValueError(f"Unknown logging level: {level!r}") from e


def setup_logging(
    level: int | str = "INFO",
    *,
    fmt_console: str = "%(asctime)s %(levelname)s %(name)s - %(message)s",
    fmt_file: str = "%(asctime)s %(levelname)s %(name)s - %(message)s",
    datefmt: str = "%Y-%m-%d %H:%M:%S",
    log_file: str | Path | None = None,
    module_levels: Mapping[str, int | str] | None = None,
    colored: bool = False,
    quiet_third_party: bool = True,
) -> None:
    """Configure root logging for a CLI run.

    Parameters
    - level: Root log level (int or name).
    - fmt_console: Console format; may use `%(shortname)s`.
    - fmt_file: File format, used only when `log_file` is set.
    - log_file: Also write uncolored logs to this file.
    - module_levels: Per-logger level overrides, e.g.
      `{"btc_put_pricing.options": "DEBUG"}`.
    - colored: Colorize console level names.
    - quiet_third_party: Cap plotting-library loggers at WARNING.

    Uses `force=True` so repeated calls replace handlers instead of stacking.
    """
    handlers: list[logging.Handler] = []

    console = logging.StreamHandler()
    console.addFilter(_AddShortNameFilter())
    formatter_cls = _ColorFormatter if colored else logging.Formatter
    console.setFormatter(formatter_cls(fmt=fmt_console, datefmt=datefmt))
    handlers.append(console)

    if log_file is not None:
        p = Path(log_file)
        p.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(p, encoding="utf-8")
        fh.setFormatter(logging.Formatter(fmt=fmt_file, datefmt=datefmt))
        handlers.append(fh)

    logging.basicConfig(level=coerce_level(level), handlers=handlers, force=True)

    if module_levels:
        for name, lvl in module_levels.items():
            logging.getLogger(name).setLevel(coerce_level(lvl))

    if quiet_third_party:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
