"""User share of a pool and user-level reward projections."""

from stargate_yield.errors import UndefinedYieldError
from stargate_yield.models import RewardProjection, UserShare


def user_staked_pct(user_staked: float, pool_total_staked: float) -> float:
    """User stake as a percentage of the pool's total stake (same units on both sides)."""
    if pool_total_staked == 0:
        raise UndefinedYieldError("pool has no staked supply")
    return user_staked * 100 / pool_total_staked


def scale_rewards(pool_rewards: RewardProjection, staked_pct: float) -> RewardProjection:
    """Scale every window of a pool projection by the user's stake percentage."""
    factor = staked_pct / 100
    return RewardProjection(
        per_block=pool_rewards.per_block * factor,
        per_day=pool_rewards.per_day * factor,
        per_week=pool_rewards.per_week * factor,
        per_month=pool_rewards.per_month * factor,
        per_year=pool_rewards.per_year * factor,
    )


def compute_user_share(user_staked: float, pool_total_staked: float, pool_rewards: RewardProjection) -> UserShare:
    """
    User share of a pool's projected rewards.

    Uses the instantaneous stake fraction for every window, i.e. assumes the user's share
    (and everyone else's stake) stays constant for the whole projection window.
    """
    pct = user_staked_pct(user_staked, pool_total_staked)
    return UserShare(staked_pct=pct, rewards=scale_rewards(pool_rewards, pct))
