"""Aggregation across the user's active pools."""

from collections.abc import Sequence

from stargate_yield.apy import to_decimal_units
from stargate_yield.constants import STG_DECIMALS
from stargate_yield.models import PoolMetrics, PositionTotals, RewardProjection


def zero_projection() -> RewardProjection:
    """A RewardProjection with every window at zero."""
    return RewardProjection(per_block=0.0, per_day=0.0, per_week=0.0, per_month=0.0, per_year=0.0)


def add_projections(a: RewardProjection, b: RewardProjection) -> RewardProjection:
    """Window-wise sum of two projections."""
    return RewardProjection(
        per_block=a.per_block + b.per_block,
        per_day=a.per_day + b.per_day,
        per_week=a.per_week + b.per_week,
        per_month=a.per_month + b.per_month,
        per_year=a.per_year + b.per_year,
    )


def compute_position_totals(pools: Sequence[PoolMetrics]) -> PositionTotals:
    """
    Sum pending rewards, reward projections and USD values across pools.

    Token totals cover pools with a user share; USD totals cover only pools with USD values
    (`pools_with_usd` tells how many).
    """
    pending_reward = 0.0
    user_rewards = zero_projection()
    pools_with_usd = 0
    pending_reward_value = 0.0
    user_staked_value = 0.0
    user_yield = zero_projection()

    for m in pools:
        pending_reward += to_decimal_units(m.position.pending_reward, STG_DECIMALS)
        if m.user_share is not None:
            user_rewards = add_projections(user_rewards, m.user_share.rewards)
        if m.usd is not None:
            pools_with_usd += 1
            pending_reward_value += m.usd.pending_reward_value
            user_staked_value += m.usd.user_staked_value
            user_yield = add_projections(user_yield, m.usd.user_yield)

    return PositionTotals(
        pools_total=len(pools),
        pools_with_usd=pools_with_usd,
        pending_reward=pending_reward,
        user_rewards=user_rewards,
        pending_reward_value=pending_reward_value,
        user_staked_value=user_staked_value,
        user_yield=user_yield,
    )
