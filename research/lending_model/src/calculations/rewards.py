"""LP reward accrual over epochs"""
from typing import Sequence
from ..constants import SECONDS_PER_YEAR
from ..errors import InsufficientDataError, InvalidDomainError
from ..state.rewards import Epoch, Snapshot

def _epoch_duration(epoch: Epoch) -> int:
    duration = epoch.duration
    if duration == 0:
        raise InvalidDomainError("Invalid epoch duration")
    return duration

def earned_rewards(epoch: Epoch, snapshots: Sequence[Snapshot]) -> float:
    """Rewards earned by one LP over an epoch.

    Each interval between consecutive snapshots pays out its slice of the
    epoch's rewards at the share ratio of the *later* snapshot.
    """
    if len(snapshots) < 2:
        raise InsufficientDataError("Insufficient data to compute rewards")
    duration = _epoch_duration(epoch)

    total = 0
    for prev, snapshot in zip(snapshots, snapshots[1:]):
        percent_of_epoch = (snapshot.timestamp - prev.timestamp) / duration
        total += percent_of_epoch * snapshot.share_ratio * epoch.total_rewards
    return total

def total_lp_rewards(epoch: Epoch) -> float:
    """Rewards owed to all LPs for an epoch at its target APR on the deposit cap"""
    duration = _epoch_duration(epoch)
    return epoch.target_apr * (duration / SECONDS_PER_YEAR) * epoch.cap

def realized_apr(rewards: float, deposit: float, duration_seconds: float) -> float:
    """APR implied by `rewards` earned on `deposit` over `duration_seconds`"""
    if deposit <= 0:
        raise InvalidDomainError("Deposit amount must be positive")
    if duration_seconds <= 0:
        raise InvalidDomainError("Time period must be positive")
    return (rewards / deposit) * (SECONDS_PER_YEAR / duration_seconds)

def user_reward_apr(epoch: Epoch, user_lp_shares: float, total_lp_shares: float) -> float:
    """APR of holding `user_lp_shares` for a whole epoch"""
    if user_lp_shares <= 0:
        raise InvalidDomainError("User LP shares must be positive")
    if total_lp_shares <= 0:
        raise InvalidDomainError("Total LP shares must be positive")
    duration = _epoch_duration(epoch)

    user_rewards = epoch.total_rewards * user_lp_shares / total_lp_shares
    return realized_apr(user_rewards, user_lp_shares, duration)

def estimated_rewards(deposit: float, apr: float, duration_seconds: float) -> float:
    """Rewards a deposit should earn at `apr` over `duration_seconds`"""
    if deposit <= 0:
        raise InvalidDomainError("Deposit amount must be positive")
    if apr < 0:
        raise InvalidDomainError("APR cannot be negative")
    if duration_seconds <= 0:
        raise InvalidDomainError("Duration must be positive")
    return deposit * apr * (duration_seconds / SECONDS_PER_YEAR)
