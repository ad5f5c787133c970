"""Interest rate and safety module curve parameters"""
from dataclasses import dataclass
from ..constants import (
    DEFAULT_UR_KINK,
    DEFAULT_BASE_IR,
    DEFAULT_SLOPE1,
    DEFAULT_SLOPE2,
)

@dataclass(frozen=True)
class InterestRateParams:
    """Two segment borrow rate curve, kinked at ur_kink"""
    ur_kink: float = DEFAULT_UR_KINK
    base_ir: float = DEFAULT_BASE_IR
    slope1: float = DEFAULT_SLOPE1
    slope2: float = DEFAULT_SLOPE2

@dataclass(frozen=True)
class SafetyModuleParams:
    """Same curve shape applied to the staked share of LP tokens.

    Slopes are usually negative: the reward rate decays as more is staked.
    """
    slope1: float
    slope2: float
    base_reward_rate: float
    staked_percentage_kink: float
