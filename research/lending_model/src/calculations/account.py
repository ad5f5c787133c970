"""Account risk: collateral value, LTVs, health and borrow/withdraw limits.

Ratios a calculation depends on must be set on every collateral passed to it.
A missing ratio raises MissingParameterError on the first offending entry;
it is never replaced by a default.
"""
import logging
import math
from typing import Sequence
from ..constants import (
    REPAY_BUFFER_SECONDS,
    SECONDS_PER_YEAR,
    WITHDRAW_FUTURE_WINDOW_SECONDS,
)
from ..errors import InvalidDomainError
from ..state.collateral import Collateral
from ..state.market_params import InterestRateParams
from .rates import borrow_apy, utilization_rate
from .shares import debt_shares_to_assets

logger = logging.getLogger(__name__)

def total_collateral_value(collaterals: Sequence[Collateral]) -> float:
    """Sum of amount * price over all positions"""
    return sum((c.amount * c.price for c in collaterals), 0)

def _weighted_sum(collaterals: Sequence[Collateral], parameter: str) -> float:
    # value * ratio, summed
    total = 0
    for collateral in collaterals:
        ratio = collateral.require(parameter)
        total += collateral.amount * collateral.price * ratio
    return total

def secured_value(collaterals: Sequence[Collateral]) -> float:
    """Collateral value counted toward solvency: sum of value * liquidation LTV"""
    return _weighted_sum(collaterals, "liquidation_ltv")

def borrow_capacity(collaterals: Sequence[Collateral]) -> float:
    """Maximum debt the collaterals support: sum of value * max LTV"""
    return _weighted_sum(collaterals, "max_ltv")

def account_ltv(total_debt: float, collaterals: Sequence[Collateral]) -> float:
    """Current loan to value of an account"""
    collateral_value = total_collateral_value(collaterals)
    if collateral_value == 0:
        return 0
    return total_debt / collateral_value

def account_max_ltv(collaterals: Sequence[Collateral]) -> float:
    """Value weighted max LTV across all collaterals"""
    collateral_value = total_collateral_value(collaterals)
    # still validate every entry before returning the empty value
    weighted = borrow_capacity(collaterals)
    if collateral_value == 0:
        return 0
    return weighted / collateral_value

def account_liq_ltv(collaterals: Sequence[Collateral]) -> float:
    """Value weighted liquidation LTV across all collaterals"""
    collateral_value = total_collateral_value(collaterals)
    weighted = secured_value(collaterals)
    if collateral_value == 0:
        return 0
    return weighted / collateral_value

def account_health(collaterals: Sequence[Collateral], current_debt: float) -> float:
    """Secured value over debt. Below 1 the account can be liquidated.

    Zero debt is rejected rather than reported as infinite health.
    """
    secured = secured_value(collaterals)
    if current_debt == 0:
        raise InvalidDomainError("Current debt cannot be zero")
    return secured / current_debt

def is_liquidatable(collaterals: Sequence[Collateral], current_debt: float) -> bool:
    return account_health(collaterals, current_debt) < 1

def drop_to_liquidation(collaterals: Sequence[Collateral], current_debt: float) -> float:
    """Fractional fall in collateral value that would bring health to 1"""
    secured = secured_value(collaterals)
    if secured == 0:
        return 0
    return 1 - current_debt / secured

def liquidation_point(account_liq_ltv: float, debt_shares: float, open_interest: float,
                      total_debt_shares: float, total_assets: float,
                      params: InterestRateParams, dt: float) -> float:
    """Total collateral value at which the account becomes liquidatable"""
    account_debt = debt_shares_to_assets(
        debt_shares, open_interest, total_debt_shares, total_assets, params, dt
    )
    if account_liq_ltv == 0:
        return 0
    return account_debt / account_liq_ltv

def max_withdraw_amount(collateral_to_withdraw: Collateral, all_collaterals: Sequence[Collateral],
                        debt_shares: float, open_interest: float, total_debt_shares: float,
                        total_assets: float, params: InterestRateParams, dt: float,
                        decimals: int,
                        future_window_seconds: float = WITHDRAW_FUTURE_WINDOW_SECONDS) -> float:
    """Largest amount of one collateral that can leave without breaching max LTV.

    Debt is projected `future_window_seconds` ahead of `dt` so the answer
    still holds once the withdrawal lands.
    """
    if debt_shares == 0:
        return collateral_to_withdraw.amount

    max_ltv = collateral_to_withdraw.require("max_ltv")
    future_debt = debt_shares_to_assets(
        debt_shares, open_interest, total_debt_shares, total_assets, params,
        dt + future_window_seconds,
    )
    # required_value = debt / max_ltv
    required_value = future_debt / max_ltv
    excess_value = total_collateral_value(all_collaterals) - required_value
    if collateral_to_withdraw.price == 0 or excess_value <= 0:
        logger.debug("no withdrawable excess: excess_value=%s", excess_value)
        return 0

    step = 10 ** decimals
    scaled = excess_value / collateral_to_withdraw.price * step
    nearest = round(scaled)
    # float noise just under a whole unit still counts as that unit
    units = nearest if math.isclose(scaled, nearest, rel_tol=1e-12) else math.floor(scaled)
    amount = units / step
    return min(max(amount, 0), collateral_to_withdraw.amount)

def protocol_available_to_borrow(free_liquidity: float, reserve_balance: float) -> float:
    """Liquidity borrowers can draw once the reserve is set aside"""
    if reserve_balance >= free_liquidity:
        return 0
    return free_liquidity - reserve_balance

def user_available_to_borrow(collaterals: Sequence[Collateral], free_liquidity: float,
                             reserve_balance: float, current_debt: float) -> float:
    """What one account may still borrow, bounded by pool liquidity"""
    headroom = max(borrow_capacity(collaterals) - current_debt, 0)
    return min(protocol_available_to_borrow(free_liquidity, reserve_balance), headroom)

def max_repay_amount(debt_shares: float, open_interest: float, total_debt_shares: float,
                     total_assets: float, params: InterestRateParams, dt: float) -> float:
    """Debt plus a short forward buffer so a submitted repay still clears it"""
    apy = borrow_apy(utilization_rate(open_interest, total_assets), params)
    debt_assets = debt_shares_to_assets(
        debt_shares, open_interest, total_debt_shares, total_assets, params, dt
    )
    repay_multiplier = 1 + (apy / SECONDS_PER_YEAR) * REPAY_BUFFER_SECONDS
    return debt_assets * repay_multiplier
