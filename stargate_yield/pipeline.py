"""Yield report pipeline: chain reads -> active pools -> rewards, APY, user share, USD values."""

import sys
from collections.abc import Mapping, Sequence
from functools import partial
from typing import Protocol

from stargate_yield.apy import compute_apy, to_decimal_units
from stargate_yield.blockchain import sample_block_times
from stargate_yield.blocktime import build_chain_snapshot, estimate_block_time
from stargate_yield.constants import DEFAULT_MAX_WORKERS, STG_DECIMALS
from stargate_yield.errors import AllocationAccountingError, PriceUnavailableError, UndefinedYieldError
from stargate_yield.models import (
    BlockSample,
    ChainConfig,
    ChainSnapshot,
    PoolInfo,
    PoolMetrics,
    PoolRecord,
    PricedToken,
    UserPosition,
    YieldReport,
)
from stargate_yield.onchain import fetch_all
from stargate_yield.pools import select_active_pools
from stargate_yield.rewards import project_rewards
from stargate_yield.shares import compute_user_share
from stargate_yield.validation import validate_allocations, validate_position
from stargate_yield.valuation import PriceFeed, build_price_map, priced_addresses, value_pool


class ChainFacts(Protocol):
    """Read-only chain access consumed by the pipeline (see LpStakingReader)."""

    def block(self, identifier: int | str) -> BlockSample: ...

    def pool_count(self) -> int: ...

    def reward_per_block(self) -> int: ...

    def total_allocation_points(self) -> int: ...

    def reward_token(self) -> str: ...

    def pool_info(self, pool_id: int) -> PoolInfo: ...

    def user_position(self, pool_id: int, address: str) -> UserPosition: ...

    def pool_record(self, info: PoolInfo) -> PoolRecord: ...


def compute_pool_metrics(
    snapshot: ChainSnapshot,
    pool: PoolRecord,
    position: UserPosition,
    prices: Mapping[str, PricedToken],
    reward_token_address: str,
) -> PoolMetrics:
    """
    Derive all metrics for one active pool.

    Zero staked supply and missing prices degrade this pool only: the affected field groups
    are None and the reason lands in `unavailable`. Allocation errors propagate.
    """
    rewards = project_rewards(snapshot, pool.allocation_points)
    unavailable: list[str] = []

    # Note: staked supply comes from lpBalances, read separately from poolInfo/userInfo,
    # so it may belong to a slightly different block than the active-pool decision.
    staked_tokens = to_decimal_units(pool.total_staked, pool.decimals)
    try:
        apy = compute_apy(rewards.per_week, staked_tokens)
    except UndefinedYieldError as ex:
        apy = None
        unavailable.append(f"APY: {ex}")

    try:
        user_share = compute_user_share(to_decimal_units(position.staked_amount, pool.decimals), staked_tokens, rewards)
    except UndefinedYieldError as ex:
        user_share = None
        unavailable.append(f"user share: {ex}")

    usd = None
    if user_share is not None:
        try:
            usd = value_pool(pool, position, rewards, user_share, prices, reward_token_address)
        except PriceUnavailableError as ex:
            unavailable.append(f"USD values: {ex}")
    else:
        unavailable.append("USD values: user share unavailable")

    return PoolMetrics(
        pool=pool,
        position=position,
        rewards=rewards,
        apy=apy,
        user_share=user_share,
        usd=usd,
        unavailable=tuple(unavailable),
    )


def build_yield_report(
    chain: ChainConfig,
    address: str,
    snapshot: ChainSnapshot,
    reward_token_address: str,
    active: Sequence[tuple[PoolRecord, UserPosition]],
    prices: dict[str, PricedToken],
) -> YieldReport:
    """Compute metrics for every active pool, keeping pool-ordinal order."""
    if active and snapshot.total_allocation_points == 0:
        raise AllocationAccountingError(
            f"totalAllocPoint is 0 but {len(active)} pool(s) are active; chain state is inconsistent"
        )
    pools = tuple(
        compute_pool_metrics(snapshot, pool, position, prices, reward_token_address) for pool, position in active
    )
    return YieldReport(
        chain=chain,
        address=address,
        snapshot=snapshot,
        reward_token_address=reward_token_address,
        pools=pools,
        prices=prices,
    )


def collect_yield_report(
    chain: ChainConfig,
    address: str,
    reader: ChainFacts,
    feed: PriceFeed,
    *,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> YieldReport:
    """
    Read everything needed from the chain and the price feed, then compute the report.

    Any failed read aborts the whole run (ExternalReadError propagates).
    """
    older, newer = sample_block_times(reader)
    avg_block_time = estimate_block_time(older, newer)

    reward_raw, total_alloc, reward_token, pool_count = fetch_all(
        [reader.reward_per_block, reader.total_allocation_points, reader.reward_token, reader.pool_count],
        max_workers=max_workers,
    )
    snapshot = build_chain_snapshot(avg_block_time, reward_raw, STG_DECIMALS, total_alloc)

    infos = fetch_all(
        [partial(reader.pool_info, pid) for pid in range(pool_count)],
        max_workers=max_workers,
        desc="🏊 Fetching pools",
    )
    positions = fetch_all(
        [partial(reader.user_position, pid, address) for pid in range(pool_count)],
        max_workers=max_workers,
        desc="👤 Fetching user positions",
    )
    for issue in validate_allocations(infos, total_alloc):
        print(f"⚠️  {issue}", file=sys.stderr)

    active = select_active_pools(list(zip(infos, positions, strict=True)))
    for info, position in zip(infos, positions, strict=True):
        for issue in validate_position(info, position):
            print(f"⚠️  {issue}", file=sys.stderr)

    records = fetch_all(
        [partial(reader.pool_record, info) for info, _ in active],
        max_workers=max_workers,
        desc="📦 Loading active pools",
    )
    prices = build_price_map(feed, chain, priced_addresses(records), reward_token)

    return build_yield_report(
        chain,
        address,
        snapshot,
        reward_token,
        [(record, position) for record, (_, position) in zip(records, active, strict=True)],
        prices,
    )
