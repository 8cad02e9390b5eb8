"""Distribution of the global emission rate across pools."""

from stargate_yield.errors import AllocationAccountingError
from stargate_yield.models import ChainSnapshot, RewardProjection


def pool_reward_per_block(snapshot: ChainSnapshot, allocation_points: int) -> float:
    """Pool share of the per-block emission, weighted by allocation points."""
    if snapshot.total_allocation_points == 0:
        raise AllocationAccountingError("totalAllocPoint is 0; cannot distribute rewards across pools")
    return snapshot.total_reward_per_block * (allocation_points / snapshot.total_allocation_points)


def project_rewards(snapshot: ChainSnapshot, allocation_points: int) -> RewardProjection:
    """
    Project a pool's per-block reward across the standard windows.

    Each window is the per-block reward times the window's block count (simple, not compounded).
    """
    per_block = pool_reward_per_block(snapshot, allocation_points)
    return RewardProjection(
        per_block=per_block,
        per_day=per_block * snapshot.blocks_per_day,
        per_week=per_block * snapshot.blocks_per_week,
        per_month=per_block * snapshot.blocks_per_month,
        per_year=per_block * snapshot.blocks_per_year,
    )
