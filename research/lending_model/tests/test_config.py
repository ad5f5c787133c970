"""Unit tests for market config loading, env interpolation, and validation."""
from __future__ import annotations

from pathlib import Path

import pytest

from lending_model.src.config import (
    DailyCapConfig,
    MarketConfig,
    _interpolate_env,
    load_market_config,
)
from lending_model.src.constants import DEFAULT_RESET_WINDOW
from lending_model.src.state import InterestRateParams

SAMPLE_YAML = """\
name: usdc-main
reserve_percentage: 0.1
interest_rate:
  ur_kink: 0.8
  base_ir: 0.02
  slope1: 0.1
  slope2: 1.5
collaterals:
  - name: wbtc
    amount: 2
    price: 60000
    max_ltv: 0.7
    liquidation_ltv: 0.8
    liquidation_premium: 0.05
  - name: meme
    amount: 1000
    price: 0.1
daily_caps:
  cap_factor: 0.1
  reset_window: 3600
safety_module:
  slope1: -0.05
  slope2: -0.3
  base_reward_rate: 0.15
  staked_percentage_kink: 0.4
"""


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    path = tmp_path / "market.yaml"
    path.write_text(SAMPLE_YAML)
    return path


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "market.yaml"
    path.write_text(content)
    return path


class TestInterpolateEnv:
    def test_simple_substitution(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESERVE", "0.2")
        assert _interpolate_env("${RESERVE}") == "0.2"

    def test_missing_var_becomes_empty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NONEXISTENT_VAR_XYZ", raising=False)
        assert _interpolate_env("${NONEXISTENT_VAR_XYZ}") == ""

    def test_nested(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PRICE", "42")
        result = _interpolate_env({"collaterals": [{"price": "${PRICE}", "amount": 1}]})
        assert result == {"collaterals": [{"price": "42", "amount": 1}]}


class TestLoadMarketConfig:
    def test_loads_valid_yaml(self, sample_yaml_path: Path) -> None:
        cfg = load_market_config(sample_yaml_path)
        assert isinstance(cfg, MarketConfig)
        assert cfg.name == "usdc-main"
        assert cfg.interest_rate == InterestRateParams(0.8, 0.02, 0.1, 1.5)
        assert cfg.reserve_percentage == 0.1
        assert cfg.daily_caps == DailyCapConfig(cap_factor=0.1, reset_window=3600)
        assert cfg.safety_module.staked_percentage_kink == 0.4

    def test_collaterals(self, sample_yaml_path: Path) -> None:
        wbtc, meme = load_market_config(sample_yaml_path).collaterals
        assert wbtc.name == "wbtc"
        assert wbtc.value == 120000
        assert wbtc.liquidation_premium == 0.05
        assert meme.max_ltv is None
        assert meme.liquidation_ltv is None

    def test_defaults(self, tmp_path: Path) -> None:
        cfg = load_market_config(_write(tmp_path, "interest_rate: {}\n"))
        assert cfg.name == "market"
        assert cfg.interest_rate == InterestRateParams()
        assert cfg.collaterals == ()
        assert cfg.daily_caps.reset_window == DEFAULT_RESET_WINDOW
        assert cfg.safety_module is None

    def test_env_interpolation_in_yaml(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("BASE_IR", "0.05")
        monkeypatch.setenv("WBTC_PRICE", "65000")
        yaml_content = """\
interest_rate:
  base_ir: "${BASE_IR}"
collaterals:
  - name: wbtc
    amount: 1
    price: "${WBTC_PRICE}"
"""
        cfg = load_market_config(_write(tmp_path, yaml_content))
        assert cfg.interest_rate.base_ir == 0.05
        assert cfg.collaterals[0].price == 65000

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_market_config(tmp_path / "nonexistent.yaml")

    def test_missing_interest_rate_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="interest_rate"):
            load_market_config(_write(tmp_path, "name: broken\n"))

    def test_reserve_out_of_range(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "interest_rate: {}\nreserve_percentage: 1.5\n")
        with pytest.raises(ValueError, match="reserve_percentage"):
            load_market_config(path)

    def test_bad_reset_window(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "interest_rate: {}\ndaily_caps:\n  reset_window: 0\n")
        with pytest.raises(ValueError, match="reset_window"):
            load_market_config(path)

    def test_negative_collateral(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            "interest_rate: {}\ncollaterals:\n  - name: bad\n    amount: -1\n    price: 1\n",
        )
        with pytest.raises(ValueError, match="'bad'"):
            load_market_config(path)

    def test_repository_sample(self) -> None:
        cfg = load_market_config()
        assert cfg.collaterals
        assert 0 <= cfg.reserve_percentage <= 1
