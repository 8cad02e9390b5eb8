"""Data models for Stargate LPStaking yield analysis."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChainConfig:
    """Static per-chain configuration (contract addresses, price identifiers, RPC defaults)."""

    name: str
    lp_staking_address: str
    usdc_address: str
    usdt_address: str
    # CoinGecko `simple/price` id of the chain's native asset.
    native_price_id: str
    native_ticker: str
    # CoinGecko asset platform used by `simple/token_price/{platform}`.
    coingecko_platform: str
    default_rpc_urls: tuple[str, ...]

    @property
    def stablecoins(self) -> dict[str, str]:
        """Stablecoin address -> ticker."""
        return {self.usdc_address: "USDC", self.usdt_address: "USDT"}


@dataclass(frozen=True)
class BlockSample:
    """A block number and its timestamp (unix seconds)."""

    number: int
    timestamp: int


@dataclass(frozen=True)
class ChainSnapshot:
    """Run-wide chain facts derived once: block windows and the global emission rate."""

    avg_block_time_seconds: int
    blocks_per_hour: int
    blocks_per_day: int
    blocks_per_week: int
    blocks_per_month: int
    blocks_per_year: int
    # Reward per block in token units (already divided by 10**decimals).
    total_reward_per_block: float
    total_allocation_points: int


@dataclass(frozen=True)
class PoolInfo:
    """Raw `poolInfo(pid)` read, available for every pool ordinal."""

    pool_id: int
    lp_token_address: str
    allocation_points: int


@dataclass(frozen=True)
class PoolRecord:
    """Fully-loaded pool state, read only for active pools."""

    pool_id: int
    allocation_points: int
    # Raw LP units held by LPStaking for this pool (`lpBalances(pid)`).
    total_staked: int
    decimals: int
    lp_asset_name: str
    underlying_asset_name: str
    underlying_symbol: str
    lp_token_address: str
    underlying_token_address: str


@dataclass(frozen=True)
class UserPosition:
    """The queried address's position in one pool (raw units)."""

    pool_id: int
    staked_amount: int
    pending_reward: int


@dataclass(frozen=True)
class PricedToken:
    """USD spot price of a token, keyed in the price map by address."""

    token: str
    usd_price: float
    ticker: str | None


@dataclass(frozen=True)
class RewardProjection:
    """Token amounts over the standard time windows. Simple projection, no compounding."""

    per_block: float
    per_day: float
    per_week: float
    per_month: float
    per_year: float


@dataclass(frozen=True)
class YieldRates:
    """Periodic yield percentages, all scalar multiples of the weekly rate."""

    daily: float
    weekly: float
    monthly: float
    yearly: float


@dataclass(frozen=True)
class UserShare:
    """User fraction of a pool and the pool rewards scaled by it."""

    staked_pct: float
    rewards: RewardProjection


@dataclass(frozen=True)
class UsdValuation:
    """USD-denominated values for one pool."""

    underlying_price: float
    reward_price: float
    pool_staked_value: float
    user_staked_value: float
    pending_reward_value: float
    pool_yield: RewardProjection
    user_yield: RewardProjection


@dataclass(frozen=True)
class PoolMetrics:
    """Everything derived for one active pool.

    `None` marks a group of fields that could not be computed; `unavailable` carries the reasons.
    """

    pool: PoolRecord
    position: UserPosition
    rewards: RewardProjection
    apy: YieldRates | None
    user_share: UserShare | None
    usd: UsdValuation | None
    unavailable: tuple[str, ...] = ()


@dataclass(frozen=True)
class YieldReport:
    """Presentation-ready result of one run."""

    chain: ChainConfig
    address: str
    snapshot: ChainSnapshot
    reward_token_address: str
    pools: tuple[PoolMetrics, ...]
    # Lower-cased token address -> price.
    prices: dict[str, PricedToken]


@dataclass(frozen=True)
class PositionTotals:
    """Aggregated figures across the user's active pools."""

    pools_total: int
    pools_with_usd: int
    pending_reward: float
    user_rewards: RewardProjection
    pending_reward_value: float
    user_staked_value: float
    user_yield: RewardProjection
