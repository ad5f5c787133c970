"""Share accounting for the LP pool and the debt pool.

Both pools price a share as (anchor + accrued interest) / share count. LP
shares anchor on deposited assets and only earn the interest left after the
protocol reserve cut; debt shares anchor on open interest.
"""
from ..state.market_params import InterestRateParams
from .interest import accrued_interest

def _pending_interest(open_interest: float, total_assets: float, params: InterestRateParams,
                      dt: float) -> float:
    """Interest accrued on the whole loan book since the last accrual"""
    return accrued_interest(open_interest, open_interest, total_assets, params, dt)

def assets_to_lp_shares(assets: float, total_shares: float, total_assets: float,
                        open_interest: float, reserve_pct: float,
                        params: InterestRateParams, dt: float) -> float:
    """LP shares minted for a deposit of `assets`"""
    if total_assets == 0:
        return 0

    lp_interest = _pending_interest(open_interest, total_assets, params, dt) * (1 - reserve_pct)
    return assets * total_shares / (lp_interest + total_assets)

def lp_shares_to_assets(shares: float, total_shares: float, total_assets: float,
                        open_interest: float, reserve_pct: float,
                        params: InterestRateParams, dt: float) -> float:
    """Assets redeemable for `shares` LP shares"""
    if total_shares == 0:
        return 0

    lp_interest = _pending_interest(open_interest, total_assets, params, dt) * (1 - reserve_pct)
    return shares * (lp_interest + total_assets) / total_shares

def debt_assets_to_shares(debt_assets: float, total_debt_shares: float, total_assets: float,
                          open_interest: float, reserve_pct: float,
                          params: InterestRateParams, dt: float) -> float:
    """Debt shares issued for borrowing `debt_assets`"""
    if total_assets == 0:
        return 0

    # anchored on the loan book, not the deposit pool
    interest = _pending_interest(open_interest, total_assets, params, dt) * (1 - reserve_pct)
    return debt_assets * total_debt_shares / (interest + open_interest)

def debt_shares_to_assets(debt_shares: float, open_interest: float, total_debt_shares: float,
                          total_assets: float, params: InterestRateParams, dt: float) -> float:
    """Current debt, in assets, represented by `debt_shares`"""
    if total_debt_shares == 0:
        return 0

    interest = _pending_interest(open_interest, total_assets, params, dt)
    return debt_shares * (open_interest + interest) / total_debt_shares

def total_earning(shares: float, total_shares: float, total_assets: float,
                  open_interest: float, reserve_pct: float, params: InterestRateParams,
                  reserve_balance: float, dt: float) -> float:
    """LP position value net of the protocol reserve balance, never negative"""
    position = lp_shares_to_assets(
        shares, total_shares, total_assets, open_interest, reserve_pct, params, dt
    )
    return max(0, position - reserve_balance)
