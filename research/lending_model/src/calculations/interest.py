"""Per-second compounding of borrow interest"""
from ..constants import SECONDS_PER_YEAR
from ..state.market_params import InterestRateParams
from .rates import annualized_rate, utilization_rate

def growth_factor(open_interest: float, total_assets: float, params: InterestRateParams,
                  elapsed_seconds: float) -> float:
    """(1 + r / year) ^ t at the pool's current utilization"""
    rate = annualized_rate(utilization_rate(open_interest, total_assets), params)
    return (1 + rate / SECONDS_PER_YEAR) ** elapsed_seconds

def due_amount(principal: float, open_interest: float, total_assets: float,
               params: InterestRateParams, elapsed_seconds: float) -> float:
    """Principal plus interest after elapsed_seconds"""
    return principal * growth_factor(open_interest, total_assets, params, elapsed_seconds)

def accrued_interest(principal: float, open_interest: float, total_assets: float,
                     params: InterestRateParams, elapsed_seconds: float) -> float:
    """Interest only.

    due_amount - accrued_interest gives back principal exactly while the debt
    has at most doubled. Past that it is within one ulp of due_amount, since
    no float interest can land the difference on principal. Use the
    fixed_point path when exact agreement matters.
    """
    if elapsed_seconds == 0:
        return 0
    return due_amount(principal, open_interest, total_assets, params, elapsed_seconds) - principal
