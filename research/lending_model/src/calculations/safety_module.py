"""Staking rewards for LPs who lock shares in the safety module.

Stakers are paid out of the LP yield, so the unstaked LP APY is the base LP
APY minus the stakers' APY.
"""
from ..state.market_params import InterestRateParams, SafetyModuleParams
from .rates import compound_per_second, kinked_rate, lp_apy

def staking_rate(staked_lp_shares: float, total_lp_shares: float) -> float:
    """Fraction of LP shares staked"""
    if total_lp_shares == 0:
        return 0
    return staked_lp_shares / total_lp_shares

def annualized_staker_rate(sr: float, params: SafetyModuleParams) -> float:
    """Reward rate at staking ratio sr. Usually decreasing, so slopes are negative."""
    return kinked_rate(sr, params.staked_percentage_kink, params.base_reward_rate,
                       params.slope1, params.slope2)

def stakers_apy(sr: float, params: SafetyModuleParams) -> float:
    if sr == 0:
        return 0
    return compound_per_second(annualized_staker_rate(sr, params))

def corrected_lp_apy(ur: float, ir_params: InterestRateParams, reserve_pct: float,
                     staked_lp_shares: float, total_lp_shares: float,
                     params: SafetyModuleParams) -> float:
    """LP APY left for unstaked LPs after stakers are paid"""
    sr = staking_rate(staked_lp_shares, total_lp_shares)
    return lp_apy(ur, ir_params, reserve_pct) - stakers_apy(sr, params)
