"""Plot builders for payoff simulation charts."""

from __future__ import annotations

from collections.abc import Sequence

import matplotlib.pyplot as plt
import pandas as pd
from matplotlib.figure import Figure

from btc_put_pricing.options.simulation import simulation_frame
from btc_put_pricing.options.types import SimulationPoint


def _require_points(points: Sequence[SimulationPoint]) -> pd.DataFrame:
    if not points:
        raise ValueError("points must not be empty")
    return simulation_frame(points)


def _plot_payoff_panel(
    *,
    ax: plt.Axes,
    frame: pd.DataFrame,
    strike_price: float,
    current_price: float | None,
) -> None:
    ax.plot(
        frame["price"],
        frame["unprotected_value"],
        color="tab:orange",
        linestyle="--",
        label="Unprotected",
    )
    ax.plot(
        frame["price"],
        frame["protected_value"],
        color="tab:blue",
        label="Protected",
    )
    ax.axvline(strike_price, color="tab:red", alpha=0.6, label="Strike")
    if current_price is not None:
        ax.axvline(current_price, color="grey", linestyle=":", label="Spot")
    ax.set_xlabel("BTC price at expiry (USD)")
    ax.set_ylabel("Portfolio value (USD)")
    ax.legend(loc="upper left")
    ax.grid(True)


def plot_payoff(
    points: Sequence[SimulationPoint],
    strike_price: float,
    *,
    current_price: float | None = None,
    title: str | None = None,
) -> Figure:
    """Return a protected-vs-unprotected payoff figure."""
    frame = _require_points(points)

    fig, ax = plt.subplots(figsize=(10, 5))
    _plot_payoff_panel(
        ax=ax,
        frame=frame,
        strike_price=strike_price,
        current_price=current_price,
    )
    ax.set_title(title or "Protective put payoff at expiry")
    fig.tight_layout()
    return fig
