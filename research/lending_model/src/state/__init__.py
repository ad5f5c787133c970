"""Plain value types shared by every calculation"""
from .collateral import Collateral, RiskCollateral
from .leverage import FlashLoanValues
from .market_params import InterestRateParams, SafetyModuleParams
from .rewards import Epoch, Snapshot

__all__ = [
    "Collateral",
    "RiskCollateral",
    "FlashLoanValues",
    "InterestRateParams",
    "SafetyModuleParams",
    "Epoch",
    "Snapshot",
]
