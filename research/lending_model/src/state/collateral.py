"""Collateral position state"""
from dataclasses import dataclass
from typing import Optional
from ..errors import MissingParameterError

@dataclass(frozen=True)
class Collateral:
    """A deposited collateral asset. Risk ratios are None when not configured."""
    amount: float
    price: float
    max_ltv: Optional[float] = None
    liquidation_ltv: Optional[float] = None
    liquidation_premium: Optional[float] = None
    cap: Optional[float] = None
    name: Optional[str] = None

    @property
    def value(self) -> float:
        """Market value of the position"""
        return self.amount * self.price

    def require(self, parameter: str) -> float:
        """Return a risk ratio, raising if it was never set"""
        value = getattr(self, parameter)
        if value is None:
            raise MissingParameterError(parameter, self)
        return value

@dataclass(frozen=True)
class RiskCollateral(Collateral):
    """Collateral whose max LTV, liquidation LTV and premium are guaranteed set"""

    def __post_init__(self):
        # all three ratios are mandatory here
        for parameter in ("max_ltv", "liquidation_ltv", "liquidation_premium"):
            self.require(parameter)
