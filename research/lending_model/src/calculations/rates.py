"""Utilization and the kinked borrow rate curve"""
from ..constants import SECONDS_PER_YEAR
from ..state.market_params import InterestRateParams

def utilization_rate(open_interest: float, total_assets: float) -> float:
    """Share of deposited assets currently lent out.

    Never negative, but can exceed 1. An empty pool is simply unutilized.
    """
    if total_assets == 0:
        return 0
    return open_interest / total_assets

def kinked_rate(x: float, kink: float, base: float, slope1: float, slope2: float) -> float:
    """Two segment piecewise linear curve, continuous at the kink"""
    if x < kink:
        return slope1 * x + base
    return slope2 * (x - kink) + slope1 * kink + base

def annualized_rate(ur: float, params: InterestRateParams) -> float:
    """Annual borrow rate at utilization ur"""
    return kinked_rate(ur, params.ur_kink, params.base_ir, params.slope1, params.slope2)

def compound_per_second(apr: float) -> float:
    """APY of an APR compounded every second for a year"""
    return (1 + apr / SECONDS_PER_YEAR) ** SECONDS_PER_YEAR - 1

def borrow_apy(ur: float, params: InterestRateParams) -> float:
    """Effective yearly borrow cost including compounding"""
    return compound_per_second(annualized_rate(ur, params))

def lp_apy(ur: float, params: InterestRateParams, reserve_pct: float) -> float:
    """Yield for liquidity providers.

    Borrowers pay the curve rate on open interest only, so the LP rate is scaled
    by utilization, and the protocol reserve cut is taken first.
    """
    if ur == 0:
        return 0
    lp_apr = annualized_rate(ur, params) * (1 - reserve_pct) * ur
    return compound_per_second(lp_apr)
