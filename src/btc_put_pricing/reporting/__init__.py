"""Public API for payoff reporting artifacts."""

from .plots import plot_payoff
from .writers import format_json, write_result_json, write_simulation_csv

__all__ = [
    "format_json",
    "plot_payoff",
    "write_result_json",
    "write_simulation_csv",
]
