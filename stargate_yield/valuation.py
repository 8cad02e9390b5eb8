"""USD pricing of pool stakes and rewards."""

from collections.abc import Iterable, Mapping
from typing import Protocol

from stargate_yield.apy import to_decimal_units
from stargate_yield.constants import NATIVE_TOKEN_ADDRESS, STG_DECIMALS, STG_PRICE_ID, STG_TICKER
from stargate_yield.errors import PriceUnavailableError
from stargate_yield.models import (
    ChainConfig,
    PoolRecord,
    PricedToken,
    RewardProjection,
    UsdValuation,
    UserPosition,
    UserShare,
)


class PriceFeed(Protocol):
    """Spot USD price source."""

    def prices_by_address(self, addresses: list[str]) -> dict[str, float]: ...

    def prices_by_identifier(self, identifiers: list[str]) -> dict[str, float]: ...


def price_key(address: str) -> str:
    """Price map key for a token address."""
    return address.lower()


def build_price_map(
    feed: PriceFeed,
    chain: ChainConfig,
    underlying: Mapping[str, str | None],
    reward_token_address: str,
) -> dict[str, PricedToken]:
    """
    Resolve USD prices for the pools' underlying tokens, the reward token and the native asset.

    `underlying` maps token address -> ticker. Stablecoins are never sent to the feed and are
    always priced at 1.0. The reward token and the native asset are priced by feed identifier
    and re-keyed under the reward token address and the zero address. Tokens the feed does not
    price are left out of the map.
    """
    stable_keys = {price_key(addr): ticker for addr, ticker in chain.stablecoins.items()}

    query: list[str] = []
    for addr in underlying:
        key = price_key(addr)
        if key not in stable_keys and key not in query:
            query.append(key)

    prices: dict[str, PricedToken] = {}
    if query:
        by_address = {price_key(k): v for k, v in feed.prices_by_address(query).items()}
        tickers = {price_key(k): v for k, v in underlying.items()}
        for key in query:
            usd = by_address.get(key)
            if usd is not None:
                prices[key] = PricedToken(token=key, usd_price=float(usd), ticker=tickers.get(key))

    for key, ticker in stable_keys.items():
        prices[key] = PricedToken(token=key, usd_price=1.0, ticker=ticker)

    by_id = feed.prices_by_identifier([STG_PRICE_ID, chain.native_price_id])
    if by_id.get(STG_PRICE_ID) is not None:
        key = price_key(reward_token_address)
        prices[key] = PricedToken(token=key, usd_price=float(by_id[STG_PRICE_ID]), ticker=STG_TICKER)
    if by_id.get(chain.native_price_id) is not None:
        prices[NATIVE_TOKEN_ADDRESS] = PricedToken(
            token=NATIVE_TOKEN_ADDRESS,
            usd_price=float(by_id[chain.native_price_id]),
            ticker=chain.native_ticker,
        )
    return prices


def lookup_price(prices: Mapping[str, PricedToken], address: str, *, role: str) -> float:
    """Price of a token or PriceUnavailableError."""
    priced = prices.get(price_key(address))
    if priced is None:
        raise PriceUnavailableError(address, role)
    return priced.usd_price


def _usd(projection: RewardProjection, price: float) -> RewardProjection:
    return RewardProjection(
        per_block=projection.per_block * price,
        per_day=projection.per_day * price,
        per_week=projection.per_week * price,
        per_month=projection.per_month * price,
        per_year=projection.per_year * price,
    )


def value_pool(
    pool: PoolRecord,
    position: UserPosition,
    rewards: RewardProjection,
    user_share: UserShare,
    prices: Mapping[str, PricedToken],
    reward_token_address: str,
) -> UsdValuation:
    """USD values for one pool. Raises PriceUnavailableError if either price is missing."""
    underlying_price = lookup_price(prices, pool.underlying_token_address, role="underlying")
    reward_price = lookup_price(prices, reward_token_address, role="reward")

    # LP tokens are valued 1:1 against the underlying token.
    return UsdValuation(
        underlying_price=underlying_price,
        reward_price=reward_price,
        pool_staked_value=to_decimal_units(pool.total_staked, pool.decimals) * underlying_price,
        user_staked_value=to_decimal_units(position.staked_amount, pool.decimals) * underlying_price,
        pending_reward_value=to_decimal_units(position.pending_reward, STG_DECIMALS) * reward_price,
        pool_yield=_usd(rewards, reward_price),
        user_yield=_usd(user_share.rewards, reward_price),
    )


def priced_addresses(pools: Iterable[PoolRecord]) -> dict[str, str | None]:
    """Underlying token address -> ticker for a set of pools."""
    return {p.underlying_token_address: p.underlying_symbol or None for p in pools}
