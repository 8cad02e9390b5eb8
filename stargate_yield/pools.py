"""Active pool selection."""

from collections.abc import Sequence

from stargate_yield.models import PoolInfo, UserPosition


def is_active(info: PoolInfo, position: UserPosition) -> bool:
    """A pool is active when it earns rewards and the queried address has something staked."""
    return info.allocation_points > 0 and position.staked_amount > 0


def select_active_pools(
    entries: Sequence[tuple[PoolInfo, UserPosition]],
) -> list[tuple[PoolInfo, UserPosition]]:
    """Keep active pools, preserving pool-ordinal order."""
    return [(info, position) for info, position in entries if is_active(info, position)]
