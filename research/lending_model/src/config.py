"""Market configuration loader: reads a YAML market file, interpolates env vars, validates."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

from .constants import (
    DEFAULT_CAP_FACTOR,
    DEFAULT_RESERVE_PERCENTAGE,
    DEFAULT_RESET_WINDOW,
)
from .state.collateral import Collateral
from .state.market_params import InterestRateParams, SafetyModuleParams

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Frozen config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DailyCapConfig:
    cap_factor: float = DEFAULT_CAP_FACTOR
    reset_window: int = DEFAULT_RESET_WINDOW


@dataclass(frozen=True)
class MarketConfig:
    name: str = ""
    interest_rate: InterestRateParams = field(default_factory=InterestRateParams)
    reserve_percentage: float = DEFAULT_RESERVE_PERCENTAGE
    collaterals: tuple[Collateral, ...] = ()
    daily_caps: DailyCapConfig = field(default_factory=DailyCapConfig)
    safety_module: Optional[SafetyModuleParams] = None


# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


def _optional_float(raw: dict[str, Any], key: str) -> Optional[float]:
    value = raw.get(key)
    if value is None or value == "":
        return None
    return float(value)


# ---------------------------------------------------------------------------
# Section builders
# ---------------------------------------------------------------------------


def _build_interest_rate(raw: dict[str, Any]) -> InterestRateParams:
    defaults = InterestRateParams()
    return InterestRateParams(
        ur_kink=float(raw.get("ur_kink", defaults.ur_kink)),
        base_ir=float(raw.get("base_ir", defaults.base_ir)),
        slope1=float(raw.get("slope1", defaults.slope1)),
        slope2=float(raw.get("slope2", defaults.slope2)),
    )


def _build_collaterals(raw: list[dict[str, Any]]) -> tuple[Collateral, ...]:
    collaterals = []
    for entry in raw:
        collaterals.append(
            Collateral(
                name=entry.get("name"),
                amount=float(entry.get("amount", 0.0)),
                price=float(entry.get("price", 0.0)),
                max_ltv=_optional_float(entry, "max_ltv"),
                liquidation_ltv=_optional_float(entry, "liquidation_ltv"),
                liquidation_premium=_optional_float(entry, "liquidation_premium"),
                cap=_optional_float(entry, "cap"),
            )
        )
    return tuple(collaterals)


def _build_daily_caps(raw: dict[str, Any]) -> DailyCapConfig:
    return DailyCapConfig(
        cap_factor=float(raw.get("cap_factor", DEFAULT_CAP_FACTOR)),
        reset_window=int(raw.get("reset_window", DEFAULT_RESET_WINDOW)),
    )


def _build_safety_module(raw: Optional[dict[str, Any]]) -> Optional[SafetyModuleParams]:
    if not raw:
        return None
    return SafetyModuleParams(
        slope1=float(raw["slope1"]),
        slope2=float(raw["slope2"]),
        base_reward_rate=float(raw["base_reward_rate"]),
        staked_percentage_kink=float(raw["staked_percentage_kink"]),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_market_config(config_path: str | Path | None = None) -> MarketConfig:
    """Load and validate a market description from YAML + .env.

    Args:
        config_path: Path to the market file. Defaults to ``market.yaml`` in
            the repository root.
    """
    load_dotenv()

    if config_path is None:
        config_path = Path(__file__).resolve().parents[3] / "market.yaml"
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    raw = _interpolate_env(raw)

    if "interest_rate" not in raw:
        raise ValueError("Market config must define an interest_rate section")

    cfg = MarketConfig(
        name=raw.get("name", config_path.stem),
        interest_rate=_build_interest_rate(raw["interest_rate"]),
        reserve_percentage=float(raw.get("reserve_percentage", DEFAULT_RESERVE_PERCENTAGE)),
        collaterals=_build_collaterals(raw.get("collaterals", [])),
        daily_caps=_build_daily_caps(raw.get("daily_caps", {})),
        safety_module=_build_safety_module(raw.get("safety_module")),
    )

    _validate(cfg)
    logger.info("Market configuration loaded from %s", config_path)
    return cfg


def _validate(cfg: MarketConfig) -> None:
    """Raise on invalid configuration."""
    if not 0 <= cfg.reserve_percentage <= 1:
        raise ValueError(
            f"reserve_percentage must be within [0, 1], got {cfg.reserve_percentage}"
        )
    if cfg.daily_caps.reset_window <= 0:
        raise ValueError("daily_caps.reset_window must be positive")

    for collateral in cfg.collaterals:
        if collateral.amount < 0 or collateral.price < 0:
            raise ValueError(
                f"Collateral '{collateral.name}' has a negative amount or price"
            )
