from __future__ import annotations

import importlib
from pathlib import Path

import pytest


def test_load_yaml_config_none_returns_empty() -> None:
    mod = importlib.import_module("btc_put_pricing.cli.config")
    assert mod.load_yaml_config(None) == {}


def test_load_yaml_config_missing_file_raises(tmp_path: Path) -> None:
    mod = importlib.import_module("btc_put_pricing.cli.config")
    with pytest.raises(FileNotFoundError):
        mod.load_yaml_config(tmp_path / "missing.yml")


def test_load_yaml_config_non_mapping_raises(write_yaml) -> None:
    mod = importlib.import_module("btc_put_pricing.cli.config")
    path = write_yaml("bad.yml", [50_000, 45_000])
    with pytest.raises(ValueError, match="YAML mapping"):
        mod.load_yaml_config(path)


def test_load_yaml_config_reads_pricing_sections(write_yaml) -> None:
    mod = importlib.import_module("btc_put_pricing.cli.config")
    path = write_yaml(
        "ok.yml", {"market": {"current_price": 50_000.0}, "option": {"days": 90}}
    )
    assert mod.load_yaml_config(str(path)) == {
        "market": {"current_price": 50_000.0},
        "option": {"days": 90},
    }


def test_deep_merge_merges_nested_and_overrides() -> None:
    mod = importlib.import_module("btc_put_pricing.cli.config")
    base = {"role": "buyer", "market": {"volatility": None, "risk_free_rate": 4.5}}
    updates = {"market": {"volatility": 42.5}, "simulate": True}
    merged = mod.deep_merge(base, updates)
    assert merged == {
        "role": "buyer",
        "market": {"volatility": 42.5, "risk_free_rate": 4.5},
        "simulate": True,
    }
    assert base["market"]["volatility"] is None


def test_build_config_precedence_defaults_yaml_overrides(write_yaml) -> None:
    mod = importlib.import_module("btc_put_pricing.cli.config")
    defaults = {"role": "buyer", "option": {"days": 30, "amount": 1.0}}
    yaml_path = write_yaml("cfg.yml", {"role": "seller", "option": {"days": 90}})
    overrides = {"option": {"amount": 0.5}}
    config = mod.build_config(defaults, yaml_path, overrides)
    assert config == {"role": "seller", "option": {"days": 90, "amount": 0.5}}


def test_resolve_path_expands_home_and_env(monkeypatch, tmp_path: Path) -> None:
    mod = importlib.import_module("btc_put_pricing.cli.config")
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("REPORT_ROOT", str(tmp_path / "reports"))

    assert mod.resolve_path("~/sim.csv") == tmp_path / "sim.csv"
    assert mod.resolve_path("$REPORT_ROOT/payoff.png") == tmp_path / "reports" / "payoff.png"


def test_resolve_path_passthrough_and_none(tmp_path: Path) -> None:
    mod = importlib.import_module("btc_put_pricing.cli.config")
    assert mod.resolve_path(None) is None
    assert mod.resolve_path(tmp_path) == tmp_path
