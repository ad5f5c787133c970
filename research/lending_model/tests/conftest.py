"""Shared fixtures: rate curves and collateral sets used across the suites"""
import pytest

from lending_model.src.state import Collateral, InterestRateParams


@pytest.fixture()
def steep_params() -> InterestRateParams:
    """Aggressive curve, kink at 70%"""
    return InterestRateParams(ur_kink=0.7, base_ir=0.5, slope1=0.75, slope2=1.5)


@pytest.fixture()
def flat_params() -> InterestRateParams:
    """Constant 15% APR regardless of utilization"""
    return InterestRateParams(ur_kink=0.8, base_ir=0.15, slope1=0, slope2=0)


@pytest.fixture()
def zero_params() -> InterestRateParams:
    """No interest at all, so debt in assets equals open interest"""
    return InterestRateParams(ur_kink=0.8, base_ir=0, slope1=0, slope2=0)


@pytest.fixture()
def three_assets() -> list[Collateral]:
    """Secured value: 800 + 466.875 + 150 = 1416.875"""
    return [
        Collateral(name="A", amount=10, price=100, max_ltv=0.7,
                   liquidation_ltv=0.8, liquidation_premium=0.05),
        Collateral(name="B", amount=249, price=2.5, max_ltv=0.65,
                   liquidation_ltv=0.75, liquidation_premium=0.05),
        Collateral(name="C", amount=5, price=50, max_ltv=0.5,
                   liquidation_ltv=0.6, liquidation_premium=0.1),
    ]
