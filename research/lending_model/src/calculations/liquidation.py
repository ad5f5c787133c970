"""Liquidation sizing.

A liquidator repays part of the debt and receives the equivalent value of one
collateral plus a premium. The repay is sized so the account returns to
health 1, measured against the secured value of *all* its collaterals.
"""
import logging
from typing import Sequence
from ..errors import InvalidDomainError
from ..state.collateral import Collateral
from ..state.market_params import InterestRateParams
from .account import secured_value
from .shares import debt_shares_to_assets

logger = logging.getLogger(__name__)

def liquidation_denominator(collateral: Collateral) -> float:
    """1 - (1 + premium) * liquidation LTV for the seized collateral"""
    liquidation_ltv = collateral.require("liquidation_ltv")
    premium = collateral.require("liquidation_premium")

    denominator = 1 - (1 + premium) * liquidation_ltv
    if denominator == 0:
        raise InvalidDomainError("Liquidation premium and LTV leave no repayable debt")
    return denominator

def repay_to_restore(debt_assets: float, total_secured_value: float,
                     collateral: Collateral) -> float:
    """Repay that brings health back to 1 when `collateral` is seized. Unclamped.

    Seizing value V*(1+p) of this collateral removes V*(1+p)*LTV of secured
    value while repaying V of debt, hence the denominator.
    """
    return (debt_assets - total_secured_value) / liquidation_denominator(collateral)

def liquidator_max_repay(debt_shares: float, open_interest: float, total_debt_shares: float,
                         total_assets: float, params: InterestRateParams, dt: float,
                         target_collateral: Collateral,
                         all_collaterals: Sequence[Collateral]) -> float:
    """Most debt a liquidator may repay against `target_collateral`.

    Zero for healthy accounts; never more than the target collateral can pay
    out once the premium is added.
    """
    premium = target_collateral.require("liquidation_premium")
    target_collateral.require("liquidation_ltv")

    debt_assets = debt_shares_to_assets(
        debt_shares, open_interest, total_debt_shares, total_assets, params, dt
    )
    total_secured = secured_value(all_collaterals)

    max_repay_calc = repay_to_restore(debt_assets, total_secured, target_collateral)
    # collateral_cap = amount * price / (1 + premium)
    collateral_cap = target_collateral.amount * target_collateral.price / (1 + premium)

    result = max(min(max_repay_calc, collateral_cap), 0)
    if result == 0:
        logger.debug("no liquidation: debt=%s secured=%s", debt_assets, total_secured)
    return result

def collateral_to_transfer(repay_amount: float, collateral: Collateral) -> float:
    """Collateral tokens paid to the liquidator for `repay_amount`, premium included"""
    premium = collateral.require("liquidation_premium")
    return (repay_amount + repay_amount * premium) / collateral.price
