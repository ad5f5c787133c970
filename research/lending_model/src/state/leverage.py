"""Leveraged position bookkeeping"""
from dataclasses import dataclass

@dataclass(frozen=True)
class FlashLoanValues:
    """Flash loan size needed to open a leveraged position, and its implied slippage"""
    flash_loan_value: float
    slippage: float
