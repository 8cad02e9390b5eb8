"""Consistency checks on raw LPStaking state."""

from collections.abc import Sequence

from stargate_yield.models import PoolInfo, UserPosition


def validate_allocations(infos: Sequence[PoolInfo], total_allocation_points: int, *, warn_only: bool = True) -> list[str]:
    """
    Check that per-pool allocation points add up to totalAllocPoint.

    Reward distribution assumes they do. Returns list of warnings; raises ValueError if warn_only=False.
    """
    issues: list[str] = []
    allocated = sum(info.allocation_points for info in infos if info.allocation_points > 0)
    if allocated != total_allocation_points:
        msg = (
            f"allocation mismatch: sum(poolInfo.allocPoint)={allocated} != totalAllocPoint={total_allocation_points} "
            f"({len(infos)} pools)"
        )
        issues.append(msg)
        if not warn_only:
            raise ValueError(msg)
    return issues


def validate_position(info: PoolInfo, position: UserPosition, *, warn_only: bool = True) -> list[str]:
    """
    Flag unclaimed rewards sitting in pools that are left out of the report.

    Returns list of warnings; raises ValueError if warn_only=False.
    """
    issues: list[str] = []
    if position.pending_reward <= 0:
        return issues

    if position.staked_amount == 0:
        msg = f"pool {info.pool_id}: pending rewards ({position.pending_reward} raw) but nothing staked"
    elif info.allocation_points == 0:
        msg = f"pool {info.pool_id}: pending rewards ({position.pending_reward} raw) in a pool with no allocation"
    else:
        return issues

    issues.append(msg)
    if not warn_only:
        raise ValueError(msg)
    return issues
