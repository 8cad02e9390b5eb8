"""Console output formatting."""

from stargate_yield.constants import STG_DECIMALS, STG_TICKER
from stargate_yield.formatters import (
    format_pct,
    format_token,
    format_unavailable,
    format_units,
    format_usd,
)
from stargate_yield.models import PoolMetrics, PositionTotals, RewardProjection, YieldReport
from stargate_yield.reports import compute_position_totals


def _unavailable_reason(m: PoolMetrics, prefix: str) -> str:
    for reason in m.unavailable:
        if reason.startswith(prefix):
            return reason[len(prefix) + 2 :]
    return ""


def print_report_header(report: YieldReport) -> None:
    """Print chain, contract and run-wide chain facts."""
    snap = report.snapshot
    print("=" * 70)
    print("🌉 STARGATE LP STAKING YIELD REPORT")
    print(f"   ⛓️  Chain: {report.chain.name}  •  LPStaking: {report.chain.lp_staking_address}")
    print(f"   👤 Address: {report.address}")
    print("=" * 70)
    print(f"   ⏱️  Average Block Time: {snap.avg_block_time_seconds}s")
    print(
        f"   🧱 Blocks: {snap.blocks_per_day:,}/day  •  {snap.blocks_per_week:,}/week  •  "
        f"{snap.blocks_per_month:,}/month  •  {snap.blocks_per_year:,}/year"
    )
    print(f"   🎁 {STG_TICKER} Per Block: {format_token(snap.total_reward_per_block, STG_TICKER)}")
    print(f"   ⚖️  Total Allocation Points: {snap.total_allocation_points}")


def print_price_table(report: YieldReport) -> None:
    """Print the resolved token prices."""
    print("\n💵 Token Prices:")
    if not report.prices:
        print("   (none)")
    for token, priced in report.prices.items():
        ticker = priced.ticker or "?"
        print(f"   • {token} ({ticker}): {format_usd(priced.usd_price)}")


def _print_projection(label: str, projection: RewardProjection, *, usd: bool = False) -> None:
    windows = (
        ("Daily", projection.per_day),
        ("Weekly", projection.per_week),
        ("Monthly", projection.per_month),
        ("Yearly", projection.per_year),
    )
    for window, value in windows:
        text = format_usd(value) if usd else format_token(value, STG_TICKER)
        print(f"      • {label} {window}: {text}")


def print_pool(index: int, m: PoolMetrics, *, verbose: bool = False) -> None:
    """Print one active pool."""
    pool = m.pool
    print(f"\n🏊 Pool {index} (pid {pool.pool_id}): {pool.lp_asset_name}")
    print("   " + "─" * 50)
    print(f"   LP Asset: {pool.lp_asset_name}")
    print(f"   Underlying Asset: {pool.underlying_asset_name}")
    print(f"   LP Token Address: {pool.lp_token_address}")
    print(f"   Token Address: {pool.underlying_token_address}")
    if verbose:
        print(f"   Staked: {format_units(pool.total_staked, pool.decimals)} {pool.lp_asset_name}")
    print(f"   User Staked: {format_units(m.position.staked_amount, pool.decimals)} {pool.lp_asset_name}")
    print(f"   Pending {STG_TICKER}: {format_units(m.position.pending_reward, STG_DECIMALS)} {STG_TICKER}")

    if verbose:
        print("   🎁 Pool rewards:")
        print(f"      • Per Block: {format_token(m.rewards.per_block, STG_TICKER)}")
        _print_projection("Reward", m.rewards)
        print("   📈 APY:")
        if m.apy is not None:
            print(f"      • Daily APY: {format_pct(m.apy.daily)}")
            print(f"      • Weekly APY: {format_pct(m.apy.weekly)}")
            print(f"      • Monthly APY: {format_pct(m.apy.monthly)}")
            print(f"      • Yearly APY: {format_pct(m.apy.yearly)}")
        else:
            print(f"      • {format_unavailable(_unavailable_reason(m, 'APY'))}")

    print("   👤 User rewards:")
    if m.user_share is not None:
        if verbose:
            print(f"      • User Staked Percentage: {format_pct(m.user_share.staked_pct)}")
        _print_projection("User", m.user_share.rewards)
    else:
        print(f"      • {format_unavailable(_unavailable_reason(m, 'user share'))}")

    print("   💰 USD values:")
    if m.usd is not None:
        print(f"      • Pending {STG_TICKER} Value: {format_usd(m.usd.pending_reward_value)}")
        print(f"      • User Staked Value: {format_usd(m.usd.user_staked_value)}")
        if verbose:
            print(f"      • LP Value: {format_usd(m.usd.pool_staked_value)}")
            _print_projection("Pool Yield", m.usd.pool_yield, usd=True)
        _print_projection("User Yield", m.usd.user_yield, usd=True)
    else:
        print(f"      • {format_unavailable(_unavailable_reason(m, 'USD values'))}")


def print_position_totals(totals: PositionTotals) -> None:
    """Print totals across all active pools."""
    print("\n" + "=" * 70)
    print("🧾 POSITION TOTALS")
    print("=" * 70)
    print(f"   Active pools: {totals.pools_total}")
    print(f"   Pending {STG_TICKER}: {format_token(totals.pending_reward, STG_TICKER)}")
    _print_projection("User", totals.user_rewards)
    if totals.pools_with_usd < totals.pools_total:
        print(f"   ⚠️  USD totals cover {totals.pools_with_usd} of {totals.pools_total} pools (missing prices)")
    print(f"   Pending {STG_TICKER} Value: {format_usd(totals.pending_reward_value)}")
    print(f"   User Staked Value: {format_usd(totals.user_staked_value)}")
    _print_projection("User Yield", totals.user_yield, usd=True)


def print_yield_report(report: YieldReport, *, verbose: bool = False) -> None:
    """Print the full report: header, prices, each active pool and the totals."""
    print_report_header(report)
    print_price_table(report)
    print(f"\n📊 Number of Active Pools: {len(report.pools)}")
    if not report.pools:
        print("ℹ️ The address has no stake in any pool with a reward allocation.")
        return
    for i, m in enumerate(report.pools):
        print_pool(i, m, verbose=verbose)
    print_position_totals(compute_position_totals(report.pools))
