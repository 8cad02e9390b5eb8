"""Yield percentages from the weekly reward projection."""

from stargate_yield.constants import DAYS_PER_WEEK, WEEKS_PER_MONTH, WEEKS_PER_YEAR
from stargate_yield.errors import UndefinedYieldError
from stargate_yield.models import YieldRates


def to_decimal_units(raw: int, decimals: int) -> float:
    """Convert raw integer token units to token units."""
    return raw / 10**decimals


def compute_apy(reward_per_week: float, staked_tokens: float) -> YieldRates:
    """
    Linear (non-compounding) yield from a weekly base rate.

    weekly = reward_per_week * 100 / staked_tokens; the other horizons are scalar multiples of it.
    Both arguments are in token units.
    """
    if staked_tokens == 0:
        raise UndefinedYieldError("pool has no staked supply")
    weekly = reward_per_week * 100 / staked_tokens
    return YieldRates(
        daily=weekly / DAYS_PER_WEEK,
        weekly=weekly,
        monthly=weekly * WEEKS_PER_MONTH,
        yearly=weekly * WEEKS_PER_YEAR,
    )
