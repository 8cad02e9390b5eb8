import pytest

from stargate_yield.constants import CHAINS
from stargate_yield.errors import ExternalReadError
from stargate_yield.models import BlockSample, PoolInfo, PoolRecord, UserPosition

STG = 10**18
REWARD_TOKEN = "0xAf5191B0De278C7286d6C7CC6ab6BB8A73bA2Cd6"
WETH = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
USER = "0x00000000000000000000000000000000000000aA"


class FakeChain:
    """In-memory ChainFacts."""

    def __init__(
        self,
        *,
        latest: int = 1_000,
        block_time: int = 12,
        reward_per_block: int = 10 * STG,
        total_alloc: int = 1_000,
        pools: list[tuple[PoolInfo, UserPosition, PoolRecord | None]] | None = None,
        fail_on: str | None = None,
    ) -> None:
        self.latest = latest
        self.block_time = block_time
        self._reward_per_block = reward_per_block
        self.total_alloc = total_alloc
        self.pools = pools or []
        self.fail_on = fail_on
        self.record_reads: list[int] = []

    def _check(self, op: str) -> None:
        if self.fail_on == op:
            raise ExternalReadError(op, RuntimeError("rpc down"))

    def block(self, identifier):
        self._check("block")
        number = self.latest if identifier == "latest" else int(identifier)
        return BlockSample(number=number, timestamp=1_700_000_000 + number * self.block_time)

    def pool_count(self):
        self._check("pool_count")
        return len(self.pools)

    def reward_per_block(self):
        return self._reward_per_block

    def total_allocation_points(self):
        return self.total_alloc

    def reward_token(self):
        return REWARD_TOKEN

    def pool_info(self, pool_id):
        self._check("pool_info")
        return self.pools[pool_id][0]

    def user_position(self, pool_id, address):
        self._check("user_position")
        return self.pools[pool_id][1]

    def pool_record(self, info):
        self._check("pool_record")
        self.record_reads.append(info.pool_id)
        return self.pools[info.pool_id][2]


class FakeFeed:
    """In-memory PriceFeed that records what it was asked for."""

    def __init__(self, by_address=None, by_identifier=None) -> None:
        self.by_address = by_address or {}
        self.by_identifier = by_identifier if by_identifier is not None else {"stargate-finance": 0.5, "ethereum": 3000.0}
        self.address_queries: list[list[str]] = []
        self.identifier_queries: list[list[str]] = []

    def prices_by_address(self, addresses):
        self.address_queries.append(list(addresses))
        return {a: p for a, p in self.by_address.items() if a in addresses}

    def prices_by_identifier(self, identifiers):
        self.identifier_queries.append(list(identifiers))
        return {i: p for i, p in self.by_identifier.items() if i in identifiers}


def make_pool(
    pool_id: int,
    *,
    alloc: int = 100,
    total_staked: int = 100_000 * 10**6,
    user_staked: int = 10_000 * 10**6,
    pending: int = 0,
    decimals: int = 6,
    underlying: str | None = None,
    symbol: str = "USDC",
) -> tuple[PoolInfo, UserPosition, PoolRecord]:
    lp = f"0x{pool_id + 1:040x}"
    token = underlying or CHAINS["mainnet"].usdc_address
    info = PoolInfo(pool_id=pool_id, lp_token_address=lp, allocation_points=alloc)
    position = UserPosition(pool_id=pool_id, staked_amount=user_staked, pending_reward=pending)
    record = PoolRecord(
        pool_id=pool_id,
        allocation_points=alloc,
        total_staked=total_staked,
        decimals=decimals,
        lp_asset_name=f"S*{symbol}",
        underlying_asset_name=f"{symbol} Token",
        underlying_symbol=symbol,
        lp_token_address=lp,
        underlying_token_address=token,
    )
    return info, position, record


@pytest.fixture
def mainnet():
    return CHAINS["mainnet"]
