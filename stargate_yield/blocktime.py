"""Average block time and block-window derivation."""

from stargate_yield.constants import (
    BLOCK_TIME_SAMPLE_SPAN,
    DAYS_PER_WEEK,
    HOURS_PER_DAY,
    MONTHS_PER_YEAR,
    SECONDS_PER_HOUR,
    WEEKS_PER_MONTH,
)
from stargate_yield.errors import BlockSampleError, BlockTimeDivisionByZeroError
from stargate_yield.models import BlockSample, ChainSnapshot


def estimate_block_time(older: BlockSample, newer: BlockSample) -> int:
    """
    Average seconds per block between two samples exactly BLOCK_TIME_SAMPLE_SPAN blocks apart.

    Truncated to whole seconds: the estimate is coarse and sub-second precision is not meaningful.
    """
    if newer.number - older.number != BLOCK_TIME_SAMPLE_SPAN:
        raise BlockSampleError(
            f"block samples must be {BLOCK_TIME_SAMPLE_SPAN} blocks apart, got {older.number} -> {newer.number}"
        )
    return (newer.timestamp - older.timestamp) // BLOCK_TIME_SAMPLE_SPAN


def build_chain_snapshot(
    avg_block_time_seconds: int,
    reward_per_block_raw: int,
    reward_decimals: int,
    total_allocation_points: int,
) -> ChainSnapshot:
    """Derive block windows from the average block time and attach the global emission rate."""
    if avg_block_time_seconds <= 0:
        raise BlockTimeDivisionByZeroError(
            f"average block time is {avg_block_time_seconds}s; sub-second chains are not supported"
        )

    blocks_per_hour = SECONDS_PER_HOUR // avg_block_time_seconds
    blocks_per_day = blocks_per_hour * HOURS_PER_DAY
    blocks_per_week = blocks_per_day * DAYS_PER_WEEK
    blocks_per_month = blocks_per_week * WEEKS_PER_MONTH
    blocks_per_year = blocks_per_month * MONTHS_PER_YEAR

    return ChainSnapshot(
        avg_block_time_seconds=avg_block_time_seconds,
        blocks_per_hour=blocks_per_hour,
        blocks_per_day=blocks_per_day,
        blocks_per_week=blocks_per_week,
        blocks_per_month=blocks_per_month,
        blocks_per_year=blocks_per_year,
        total_reward_per_block=reward_per_block_raw / 10**reward_decimals,
        total_allocation_points=total_allocation_points,
    )
