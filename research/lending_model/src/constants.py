# Time constants
SECONDS_PER_YEAR = 365 * 24 * 60 * 60  # 31536000, no leap-year adjustment

# Buffers applied to forward-looking estimates
REPAY_BUFFER_SECONDS = 10 * 60  # repay tx must still cover debt when it confirms
WITHDRAW_FUTURE_WINDOW_SECONDS = 10 * 60  # interest + price buffer for withdrawals

# Fixed point scale factors
FIXED_POINT_SCALE = 1_000_000_000_000  # 1e12, 12 decimals
U128_MAX = 2**128 - 1

# Adaptive caps
DEFAULT_RESET_WINDOW = 24 * 60 * 60  # buckets fully refill in one day

# Default market parameters (ratios, not percentages)
DEFAULT_UR_KINK = 0.8
DEFAULT_BASE_IR = 0.02
DEFAULT_SLOPE1 = 0.1
DEFAULT_SLOPE2 = 0.2
DEFAULT_RESERVE_PERCENTAGE = 0.1
DEFAULT_CAP_FACTOR = 0.05  # 5% of liquidity per reset window
