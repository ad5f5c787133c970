"""Leverage helpers for looping a collateral through flash loans and swaps"""
from typing import Sequence
from ..errors import InvalidDomainError
from ..state.collateral import Collateral
from ..state.leverage import FlashLoanValues
from ..state.market_params import InterestRateParams
from .account import account_max_ltv, total_collateral_value
from .shares import debt_shares_to_assets

def absolute_max_leverage(max_ltv: float) -> float:
    """1 / (1 - max_ltv): the geometric limit of re-borrowing and re-depositing"""
    if not 0 < max_ltv < 1:
        raise InvalidDomainError(f"Max LTV must be in (0, 1), got {max_ltv}")
    return 1 / (1 - max_ltv)

def account_max_leverage(collaterals: Sequence[Collateral]) -> float:
    """Max leverage for the blended max LTV of an account, 1x when none is possible"""
    max_ltv = account_max_ltv(collaterals)
    if max_ltv >= 1 or max_ltv <= 0:
        return 1
    return absolute_max_leverage(max_ltv)

def corrected_max_ltv(collateral: Collateral, flash_loan_fee: float, slippage: float) -> float:
    """Max LTV after paying the flash loan fee and losing `slippage` on the swap"""
    return (1 - flash_loan_fee - slippage) * collateral.require("max_ltv")

def unencumbered_collateral(debt_shares: float, open_interest: float, total_debt_shares: float,
                            total_assets: float, params: InterestRateParams, dt: float,
                            collateral: Collateral, corrected_max_ltv: float) -> float:
    """Collateral value not backing debt at the corrected LTV. Negative when over-leveraged."""
    debt = debt_shares_to_assets(
        debt_shares, open_interest, total_debt_shares, total_assets, params, dt
    )
    return total_collateral_value([collateral]) - debt / corrected_max_ltv

def leverage_max_slippage(collateral_value: float, leverage: float, slippage: float) -> float:
    """Value lost to slippage when swapping into the extra collateral"""
    if not 0 <= slippage < 1:
        raise InvalidDomainError(f"Slippage must be in [0, 1), got {slippage}")

    new_collateral_value = collateral_value * (leverage - 1)
    return new_collateral_value * (slippage / (1 - slippage))

def swap_loss(flash_loan_amount: float, quote_received: float, collateral_price: float,
              market_asset_price: float) -> float:
    """Flash loaned amount minus what the swapped collateral is worth in market asset"""
    return flash_loan_amount - quote_received * collateral_price / market_asset_price

def flash_loan_values(new_collateral_value: float, swap_loss: float) -> FlashLoanValues:
    flash_loan_value = new_collateral_value + swap_loss
    return FlashLoanValues(
        flash_loan_value=flash_loan_value,
        slippage=swap_loss / flash_loan_value,
    )

def leveraged_collateral(collateral: Collateral, leverage: float) -> float:
    if leverage < 1:
        raise InvalidDomainError("Invalid leverage value")
    return collateral.amount * collateral.price * leverage

def leveraged_debt(borrow_capacity: float, leverage: float) -> float:
    if leverage < 1:
        raise InvalidDomainError("Invalid leverage value")
    return borrow_capacity * leverage
