"""Reward epoch and LP snapshot state"""
from dataclasses import dataclass

@dataclass(frozen=True)
class Epoch:
    """A fixed reward distribution window"""
    start_timestamp: int
    end_timestamp: int
    total_rewards: float
    target_apr: float = 0.0
    cap: float = 0.0

    @property
    def duration(self) -> int:
        return self.end_timestamp - self.start_timestamp

@dataclass(frozen=True)
class Snapshot:
    """A participant's LP share of the pool at a point in time"""
    timestamp: int
    user_lp_shares: float
    total_lp_shares: float

    @property
    def share_ratio(self) -> float:
        return self.user_lp_shares / self.total_lp_shares
