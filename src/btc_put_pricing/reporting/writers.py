"""Filesystem writers for pricing outputs."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import numpy as np

from btc_put_pricing.options.simulation import simulation_frame
from btc_put_pricing.options.types import SimulationPoint


def _json_default(obj: Any) -> Any:
    if isinstance(obj, (np.floating, np.integer)):
        return obj.item()
    if isinstance(obj, Path):
        return str(obj)
    raise TypeError(f"Object of type {type(obj)!r} is not JSON serializable")


def format_json(payload: Mapping[str, Any]) -> str:
    """Serialize a payload as sorted, indented JSON (numpy scalars and paths allowed)."""
    return json.dumps(payload, indent=2, sort_keys=True, default=_json_default)


def write_result_json(path: Path, payload: Mapping[str, Any]) -> Path:
    """Write a JSON payload and return its path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_json(payload) + "\n", encoding="utf-8")
    return path


def write_simulation_csv(path: Path, points: Sequence[SimulationPoint]) -> Path:
    """Write simulation points as CSV and return its path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    simulation_frame(points).to_csv(path, index=False)
    return path
