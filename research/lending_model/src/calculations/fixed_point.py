"""Reproducible interest computation on scaled integers.

Float exponentiation can differ across platforms. This path mirrors what an
on-chain implementation computes: every value is an integer scaled by
FIXED_POINT_SCALE, products and quotients round half up, and e^x is taken
from a 6-term Taylor series. Results are bit-exact everywhere.
"""
import logging
from decimal import Decimal, ROUND_HALF_UP
from ..constants import FIXED_POINT_SCALE, SECONDS_PER_YEAR, U128_MAX
from ..errors import ArithmeticOverflowError, InvalidDomainError
from ..state.market_params import InterestRateParams

logger = logging.getLogger(__name__)

def checked_mul(a: int, b: int) -> int:
    """Multiply with overflow checking"""
    result = a * b
    if result > U128_MAX:
        raise ArithmeticOverflowError("Arithmetic overflow in multiplication")
    return result

def checked_add(a: int, b: int) -> int:
    """Add with overflow checking"""
    result = a + b
    if result > U128_MAX:
        raise ArithmeticOverflowError("Arithmetic overflow in addition")
    return result

def mul_fixed(x: int, y: int, scale: int = FIXED_POINT_SCALE) -> int:
    """x * y for scaled values, rounded half up"""
    return (checked_mul(x, y) + scale // 2) // scale

def div_fixed(x: int, y: int, scale: int = FIXED_POINT_SCALE) -> int:
    """x / y for scaled values, rounded half up"""
    if y == 0:
        raise InvalidDomainError("Division by zero")
    return (checked_mul(x, scale) + y // 2) // y

def to_fixed(value: float, scale: int = FIXED_POINT_SCALE) -> int:
    """Scale a float to an integer, going through its shortest decimal repr"""
    # float() first: numpy scalars repr as np.float64(...)
    scaled = Decimal(repr(float(value))) * scale
    return int(scaled.quantize(Decimal(1), rounding=ROUND_HALF_UP))

def from_fixed(value: int, scale: int = FIXED_POINT_SCALE) -> float:
    return value / scale

def taylor_exp(x: int, scale: int = FIXED_POINT_SCALE) -> int:
    """e^x using the Taylor series of order 6

    All values scaled by `scale`
    """
    x2 = mul_fixed(x, x, scale)
    x3 = mul_fixed(x, x2, scale)
    x4 = mul_fixed(x, x3, scale)
    x5 = mul_fixed(x, x4, scale)
    x6 = mul_fixed(x, x5, scale)

    # 1 + x
    result = checked_add(scale, x)
    # x^2/2! ... x^6/6!
    result = checked_add(result, div_fixed(x2, 2 * scale, scale))
    result = checked_add(result, div_fixed(x3, 6 * scale, scale))
    result = checked_add(result, div_fixed(x4, 24 * scale, scale))
    result = checked_add(result, div_fixed(x5, 120 * scale, scale))
    result = checked_add(result, div_fixed(x6, 720 * scale, scale))
    return result

def rate_time_product(rate: int, elapsed_seconds: int) -> int:
    """rate * t / year, the exponent of the continuous growth factor"""
    return (checked_mul(rate, elapsed_seconds) + SECONDS_PER_YEAR // 2) // SECONDS_PER_YEAR

def compounded_interest_factor(rate: int, elapsed_seconds: int,
                               scale: int = FIXED_POINT_SCALE) -> int:
    """e^(rate * t / year) - 1, floored at zero"""
    exp_term = taylor_exp(rate_time_product(rate, elapsed_seconds), scale)
    if exp_term <= scale:
        return 0
    return exp_term - scale

def total_interest(principal: int, rate: int, elapsed_seconds: int,
                   scale: int = FIXED_POINT_SCALE) -> int:
    """Interest owed on a scaled principal"""
    return mul_fixed(principal, compounded_interest_factor(rate, elapsed_seconds, scale), scale)

def fixed_utilization_rate(open_interest: int, total_assets: int,
                           scale: int = FIXED_POINT_SCALE) -> int:
    if total_assets == 0:
        return 0
    return div_fixed(open_interest, total_assets, scale)

def fixed_annualized_rate(ur: int, params: InterestRateParams,
                          scale: int = FIXED_POINT_SCALE) -> int:
    """Kinked curve evaluated on scaled integers"""
    kink = to_fixed(params.ur_kink, scale)
    base = to_fixed(params.base_ir, scale)
    slope1 = to_fixed(params.slope1, scale)
    slope2 = to_fixed(params.slope2, scale)
    if ur < kink:
        return mul_fixed(slope1, ur, scale) + base
    return mul_fixed(slope2, ur - kink, scale) + mul_fixed(slope1, kink, scale) + base

def fixed_accrued_interest(principal: float, open_interest: float, total_assets: float,
                           elapsed_seconds: int, params: InterestRateParams) -> float:
    """Bit-exact counterpart of interest.accrued_interest.

    Compounds continuously, e^(rt), through the Taylor series. Over ordinary
    accrual windows this matches the per-second float path to about the
    resolution of the 12 decimal scale.
    """
    if elapsed_seconds < 0:
        raise InvalidDomainError("Elapsed time cannot be negative")

    ur = fixed_utilization_rate(to_fixed(open_interest), to_fixed(total_assets))
    rate = fixed_annualized_rate(ur, params)
    logger.debug("fixed point accrual: ur=%d rate=%d elapsed=%d", ur, rate, elapsed_seconds)

    interest = total_interest(to_fixed(principal), rate, int(elapsed_seconds))
    return from_fixed(interest)
