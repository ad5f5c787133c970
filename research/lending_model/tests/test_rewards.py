"""Tests for LP reward accrual"""
import pytest

from lending_model.src.calculations.rewards import (
    earned_rewards,
    estimated_rewards,
    realized_apr,
    total_lp_rewards,
    user_reward_apr,
)
from lending_model.src.constants import SECONDS_PER_YEAR
from lending_model.src.errors import InsufficientDataError, InvalidDomainError
from lending_model.src.state import Epoch, Snapshot


@pytest.fixture()
def epoch() -> Epoch:
    return Epoch(start_timestamp=0, end_timestamp=100, total_rewards=1000)


class TestEarnedRewards:
    def test_half_epoch(self, epoch):
        snapshots = [Snapshot(0, 10, 100), Snapshot(50, 10, 100)]
        assert earned_rewards(epoch, snapshots) == pytest.approx(50)

    def test_whole_epoch_at_later_ratio(self):
        epoch = Epoch(start_timestamp=0, end_timestamp=1000, total_rewards=100)
        snapshots = [Snapshot(0, 100, 1000), Snapshot(1000, 500, 1000)]
        assert earned_rewards(epoch, snapshots) == pytest.approx(50)

    def test_changing_share(self, epoch):
        snapshots = [Snapshot(0, 10, 100), Snapshot(50, 20, 100), Snapshot(100, 25, 100)]
        assert earned_rewards(epoch, snapshots) == pytest.approx(225)

    def test_interval_uses_later_snapshot(self):
        epoch = Epoch(start_timestamp=0, end_timestamp=100, total_rewards=100)
        snapshots = [Snapshot(0, 0, 100), Snapshot(10, 100, 100)]
        assert earned_rewards(epoch, snapshots) == pytest.approx(10)

    def test_single_snapshot(self, epoch):
        with pytest.raises(InsufficientDataError):
            earned_rewards(epoch, [Snapshot(0, 10, 100)])

    def test_no_snapshots(self, epoch):
        with pytest.raises(InsufficientDataError):
            earned_rewards(epoch, [])

    def test_zero_duration(self):
        epoch = Epoch(start_timestamp=100, end_timestamp=100, total_rewards=1000)
        with pytest.raises(InvalidDomainError, match="Invalid epoch duration"):
            earned_rewards(epoch, [Snapshot(100, 1, 10), Snapshot(100, 1, 10)])


class TestTotalLpRewards:
    def test_full_year(self):
        epoch = Epoch(0, SECONDS_PER_YEAR, 0, target_apr=0.1, cap=1_000_000)
        assert total_lp_rewards(epoch) == pytest.approx(100_000)

    def test_half_year(self):
        epoch = Epoch(0, SECONDS_PER_YEAR // 2, 0, target_apr=0.1, cap=1_000_000)
        assert total_lp_rewards(epoch) == pytest.approx(50_000)

    def test_zero_duration(self):
        with pytest.raises(InvalidDomainError):
            total_lp_rewards(Epoch(5, 5, 0, target_apr=0.1, cap=1000))


class TestApr:
    def test_realized_apr(self):
        assert realized_apr(10, 1000, SECONDS_PER_YEAR) == pytest.approx(0.01)
        assert realized_apr(10, 1000, SECONDS_PER_YEAR / 2) == pytest.approx(0.02)

    @pytest.mark.parametrize("deposit, duration", [(0, 100), (-1, 100), (1000, 0)])
    def test_realized_apr_domain(self, deposit, duration):
        with pytest.raises(InvalidDomainError):
            realized_apr(10, deposit, duration)

    def test_user_reward_apr(self):
        epoch = Epoch(0, SECONDS_PER_YEAR, 1000)
        assert user_reward_apr(epoch, 100, 1000) == pytest.approx(1.0)

    def test_user_reward_apr_share_independent(self):
        epoch = Epoch(0, SECONDS_PER_YEAR, 1000)
        assert user_reward_apr(epoch, 10, 1000) == pytest.approx(user_reward_apr(epoch, 500, 1000))

    @pytest.mark.parametrize("user_shares, total_shares", [(0, 1000), (100, 0)])
    def test_user_reward_apr_domain(self, user_shares, total_shares):
        with pytest.raises(InvalidDomainError):
            user_reward_apr(Epoch(0, SECONDS_PER_YEAR, 1000), user_shares, total_shares)


class TestEstimatedRewards:
    def test_full_year(self):
        assert estimated_rewards(1000, 0.1, SECONDS_PER_YEAR) == pytest.approx(100)

    def test_round_trip_with_realized_apr(self):
        rewards = estimated_rewards(2500, 0.08, 86400 * 30)
        assert realized_apr(rewards, 2500, 86400 * 30) == pytest.approx(0.08)

    def test_negative_apr(self):
        with pytest.raises(InvalidDomainError, match="APR cannot be negative"):
            estimated_rewards(1000, -0.1, SECONDS_PER_YEAR)

    def test_zero_apr(self):
        assert estimated_rewards(1000, 0, SECONDS_PER_YEAR) == 0
