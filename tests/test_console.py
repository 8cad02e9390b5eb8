from dataclasses import replace

from stargate_yield.console import print_yield_report
from stargate_yield.formatters import as_int, format_pct, format_token, format_units, format_usd
from stargate_yield.pipeline import collect_yield_report
from stargate_yield.reports import compute_position_totals

from conftest import STG, USER, WETH, FakeChain, FakeFeed, make_pool


def _report(mainnet, pools, feed=None):
    return collect_yield_report(mainnet, USER, FakeChain(pools=pools), feed or FakeFeed())


def test_print_yield_report_basic(mainnet, capsys):
    report = _report(mainnet, [make_pool(0, alloc=1_000, pending=2 * STG)])
    print_yield_report(report)
    out = capsys.readouterr().out
    assert "STARGATE LP STAKING YIELD REPORT" in out
    assert "Average Block Time: 12s" in out
    assert "STG Per Block: 10.0000 STG" in out
    assert "Number of Active Pools: 1" in out
    assert "Pending STG: 2 STG" in out
    assert "User Weekly: 50,400.0000 STG" in out
    assert "Weekly APY" not in out
    assert "POSITION TOTALS" in out


def test_print_yield_report_verbose(mainnet, capsys):
    report = _report(mainnet, [make_pool(0, alloc=1_000)])
    print_yield_report(report, verbose=True)
    out = capsys.readouterr().out
    assert "Weekly APY: 504.0000%" in out
    assert "User Staked Percentage: 10.0000%" in out
    assert "LP Value: $100,000.00" in out


def test_print_yield_report_marks_unavailable(mainnet, capsys):
    pools = [make_pool(0, alloc=1_000, underlying=WETH, symbol="WETH")]
    report = _report(mainnet, pools, FakeFeed(by_address={}))
    print_yield_report(report)
    out = capsys.readouterr().out
    assert "n/a (no USD price for underlying token" in out
    assert "USD totals cover 0 of 1 pools" in out


def test_print_yield_report_without_pools(mainnet, capsys):
    report = _report(mainnet, [make_pool(0, user_staked=0)])
    print_yield_report(report)
    out = capsys.readouterr().out
    assert "Number of Active Pools: 0" in out
    assert "POSITION TOTALS" not in out


def test_position_totals_sum_pools(mainnet):
    pools = [make_pool(0, alloc=500, pending=STG), make_pool(1, alloc=500, pending=3 * STG)]
    report = _report(mainnet, pools)
    totals = compute_position_totals(report.pools)
    assert totals.pools_total == 2
    assert totals.pools_with_usd == 2
    assert totals.pending_reward == 4.0
    assert totals.pending_reward_value == 2.0
    assert totals.user_rewards.per_week == report.pools[0].user_share.rewards.per_week * 2
    assert totals.user_staked_value == 20_000


def test_position_totals_skip_pools_without_share(mainnet):
    report = _report(mainnet, [make_pool(0, alloc=1_000)])
    degraded = replace(report.pools[0], user_share=None, usd=None)
    totals = compute_position_totals([degraded])
    assert totals.user_rewards.per_week == 0.0
    assert totals.pools_with_usd == 0


def test_formatters():
    assert format_units(1_500_000, 6) == "1.5"
    assert format_units(10**18, 18) == "1"
    assert format_units(0, 18) == "0"
    assert format_token(1234.5, "STG") == "1,234.5000 STG"
    assert format_pct(7.2) == "7.2000%"
    assert format_usd(1234.5) == "$1,234.50"
    assert format_usd(-3) == "-$3.00"
    assert as_int("0x10") == 16
    assert as_int(None) == 0
