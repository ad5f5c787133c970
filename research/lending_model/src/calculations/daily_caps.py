"""Token bucket throttle for daily-capped actions (withdrawals, borrows)"""
from ..constants import DEFAULT_RESET_WINDOW

def refill_bucket(cap_factor: float, current_value: float, total_liquidity: float,
                  elapsed_seconds: float, reset_window: float = DEFAULT_RESET_WINDOW) -> float:
    """Bucket value now, refilled linearly and capped at total_liquidity * cap_factor"""
    max_bucket = total_liquidity * cap_factor
    if elapsed_seconds > reset_window:
        refill = max_bucket
    else:
        refill = max_bucket * elapsed_seconds / reset_window
    return min(max_bucket, current_value + refill)

def can_consume(amount: float, cap_factor: float, current_value: float, total_liquidity: float,
                elapsed_seconds: float, reset_window: float = DEFAULT_RESET_WINDOW) -> bool:
    """Whether the refilled bucket covers `amount`"""
    available = refill_bucket(cap_factor, current_value, total_liquidity, elapsed_seconds,
                              reset_window)
    return amount <= available
