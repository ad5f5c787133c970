"""Flat import surface for every formula and value type"""
from .errors import (
    ProtocolError,
    MissingParameterError,
    InvalidDomainError,
    InsufficientDataError,
    ArithmeticOverflowError,
)
from .constants import SECONDS_PER_YEAR
from .state import (
    Collateral,
    RiskCollateral,
    FlashLoanValues,
    InterestRateParams,
    SafetyModuleParams,
    Epoch,
    Snapshot,
)
from .calculations.rates import (
    utilization_rate,
    kinked_rate,
    compound_per_second,
    annualized_rate,
    borrow_apy,
    lp_apy,
)
from .calculations.interest import growth_factor, due_amount, accrued_interest
from .calculations.fixed_point import (
    checked_mul,
    checked_add,
    mul_fixed,
    div_fixed,
    to_fixed,
    from_fixed,
    taylor_exp,
    rate_time_product,
    compounded_interest_factor,
    total_interest,
    fixed_utilization_rate,
    fixed_annualized_rate,
    fixed_accrued_interest,
)
from .calculations.shares import (
    assets_to_lp_shares,
    lp_shares_to_assets,
    debt_assets_to_shares,
    debt_shares_to_assets,
    total_earning,
)
from .calculations.account import (
    total_collateral_value,
    secured_value,
    borrow_capacity,
    account_ltv,
    account_max_ltv,
    account_liq_ltv,
    account_health,
    is_liquidatable,
    drop_to_liquidation,
    liquidation_point,
    max_withdraw_amount,
    protocol_available_to_borrow,
    user_available_to_borrow,
    max_repay_amount,
)
from .calculations.liquidation import (
    liquidation_denominator,
    repay_to_restore,
    liquidator_max_repay,
    collateral_to_transfer,
)
from .calculations.leverage import (
    absolute_max_leverage,
    account_max_leverage,
    corrected_max_ltv,
    unencumbered_collateral,
    leverage_max_slippage,
    swap_loss,
    flash_loan_values,
    leveraged_collateral,
    leveraged_debt,
)
from .calculations.rewards import (
    earned_rewards,
    total_lp_rewards,
    realized_apr,
    user_reward_apr,
    estimated_rewards,
)
from .calculations.daily_caps import refill_bucket, can_consume
from .calculations.safety_module import (
    staking_rate,
    annualized_staker_rate,
    stakers_apy,
    corrected_lp_apy,
)
