import pytest

from stargate_yield.constants import NATIVE_TOKEN_ADDRESS
from stargate_yield.errors import PriceUnavailableError
from stargate_yield.models import RewardProjection, UserShare
from stargate_yield.valuation import build_price_map, lookup_price, priced_addresses, value_pool

from conftest import REWARD_TOKEN, STG, WETH, FakeFeed, make_pool


def test_stablecoins_priced_at_one_even_when_feed_omits_them(mainnet):
    feed = FakeFeed(by_address={})
    prices = build_price_map(
        feed, mainnet, {mainnet.usdc_address: "USDC", mainnet.usdt_address: "USDT"}, REWARD_TOKEN
    )
    assert prices[mainnet.usdc_address.lower()].usd_price == 1.0
    assert prices[mainnet.usdt_address.lower()].usd_price == 1.0
    assert prices[mainnet.usdc_address.lower()].ticker == "USDC"
    # Stablecoins alone never hit the address endpoint.
    assert feed.address_queries == []


def test_stablecoins_excluded_from_batch_and_override_feed(mainnet):
    feed = FakeFeed(by_address={WETH.lower(): 3000.0, mainnet.usdc_address.lower(): 0.97})
    prices = build_price_map(feed, mainnet, {WETH: "WETH", mainnet.usdc_address: "USDC"}, REWARD_TOKEN)
    assert feed.address_queries == [[WETH.lower()]]
    assert prices[WETH.lower()].usd_price == 3000.0
    assert prices[WETH.lower()].ticker == "WETH"
    assert prices[mainnet.usdc_address.lower()].usd_price == 1.0


def test_reward_and_native_rekeyed_from_identifiers(mainnet):
    feed = FakeFeed(by_identifier={"stargate-finance": 0.42, "ethereum": 2500.0})
    prices = build_price_map(feed, mainnet, {}, REWARD_TOKEN)
    assert feed.identifier_queries == [["stargate-finance", "ethereum"]]
    assert prices[REWARD_TOKEN.lower()].usd_price == 0.42
    assert prices[REWARD_TOKEN.lower()].ticker == "STG"
    assert prices[NATIVE_TOKEN_ADDRESS].usd_price == 2500.0
    assert prices[NATIVE_TOKEN_ADDRESS].ticker == "ETH"


def test_missing_prices_are_left_out(mainnet):
    feed = FakeFeed(by_address={}, by_identifier={})
    prices = build_price_map(feed, mainnet, {WETH: "WETH"}, REWARD_TOKEN)
    assert WETH.lower() not in prices
    assert REWARD_TOKEN.lower() not in prices
    with pytest.raises(PriceUnavailableError) as exc:
        lookup_price(prices, WETH, role="underlying")
    assert exc.value.token == WETH


def _pool_usd(mainnet, prices, **pool_kwargs):
    _, position, record = make_pool(0, **pool_kwargs)
    rewards = RewardProjection(per_block=1.0, per_day=7_200, per_week=50_400, per_month=201_600, per_year=2_419_200)
    share = UserShare(
        staked_pct=10.0,
        rewards=RewardProjection(per_block=0.1, per_day=720, per_week=5_040, per_month=20_160, per_year=241_920),
    )
    return value_pool(record, position, rewards, share, prices, REWARD_TOKEN)


def test_value_pool(mainnet):
    prices = build_price_map(FakeFeed(), mainnet, {mainnet.usdc_address: "USDC"}, REWARD_TOKEN)
    usd = _pool_usd(mainnet, prices, pending=2 * STG)
    assert usd.underlying_price == 1.0
    assert usd.reward_price == 0.5
    assert usd.pool_staked_value == pytest.approx(100_000)
    assert usd.user_staked_value == pytest.approx(10_000)
    assert usd.pending_reward_value == pytest.approx(1.0)
    assert usd.pool_yield.per_week == pytest.approx(25_200)
    assert usd.user_yield.per_day == pytest.approx(360)
    assert usd.user_yield.per_year == pytest.approx(120_960)


def test_value_pool_missing_underlying_price(mainnet):
    prices = build_price_map(FakeFeed(), mainnet, {WETH: "WETH"}, REWARD_TOKEN)
    with pytest.raises(PriceUnavailableError) as exc:
        _pool_usd(mainnet, prices, underlying=WETH, decimals=18)
    assert exc.value.role == "underlying"


def test_priced_addresses():
    _, _, a = make_pool(0, underlying=WETH, symbol="WETH")
    _, _, b = make_pool(1, symbol="")
    out = priced_addresses([a, b])
    assert out[WETH] == "WETH"
    assert out[b.underlying_token_address] is None
