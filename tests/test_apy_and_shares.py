import pytest

from stargate_yield.apy import compute_apy, to_decimal_units
from stargate_yield.errors import UndefinedYieldError
from stargate_yield.models import RewardProjection
from stargate_yield.shares import compute_user_share, scale_rewards, user_staked_pct


def test_weekly_apy_example():
    apy = compute_apy(50_400, 100_000)
    assert apy.weekly == pytest.approx(50.4)
    assert apy.daily == pytest.approx(7.2)
    assert apy.monthly == pytest.approx(201.6)
    assert apy.yearly == pytest.approx(2_620.8)


@pytest.mark.parametrize(
    ("reward_per_week", "staked"),
    [(1.0, 1.0), (50_400, 100_000), (0.0, 5.0), (123.456, 0.001), (1e9, 3.3e12)],
)
def test_apy_horizons_are_multiples_of_weekly(reward_per_week, staked):
    apy = compute_apy(reward_per_week, staked)
    assert apy.yearly == pytest.approx(apy.weekly * 52, abs=1e-9)
    assert apy.monthly == pytest.approx(apy.weekly * 4, abs=1e-9)
    assert apy.daily == pytest.approx(apy.weekly / 7, abs=1e-9)


def test_apy_with_no_stake_is_undefined():
    with pytest.raises(UndefinedYieldError):
        compute_apy(100.0, 0)


def test_to_decimal_units_does_not_truncate():
    assert to_decimal_units(1_500_000, 6) == 1.5
    assert to_decimal_units(10**18, 18) == 1.0


def test_user_share_scales_every_window():
    pool = RewardProjection(per_block=1000, per_day=1000, per_week=1000, per_month=1000, per_year=1000)
    scaled = scale_rewards(pool, 25)
    assert scaled == RewardProjection(per_block=250, per_day=250, per_week=250, per_month=250, per_year=250)


def test_compute_user_share_example():
    pool = RewardProjection(per_block=1.0, per_day=7_200, per_week=50_400, per_month=201_600, per_year=2_419_200)
    share = compute_user_share(10_000, 100_000, pool)
    assert share.staked_pct == pytest.approx(10.0)
    assert share.rewards.per_week == pytest.approx(5_040)
    assert share.rewards.per_day == pytest.approx(720)
    assert share.rewards.per_year == pytest.approx(241_920)


def test_user_staked_pct_needs_pool_stake():
    assert user_staked_pct(1, 4) == 25.0
    with pytest.raises(UndefinedYieldError):
        user_staked_pct(1, 0)
