"""On-chain reads from Stargate LPStaking, fanned out over a thread pool."""

import sys
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import TYPE_CHECKING, Any, TypeVar

from tqdm import tqdm

from stargate_yield.blockchain import get_block
from stargate_yield.constants import DEFAULT_MAX_WORKERS
from stargate_yield.contracts import erc20_contract, lp_pool_contract, lp_staking_contract
from stargate_yield.errors import ExternalReadError
from stargate_yield.formatters import as_int
from stargate_yield.models import BlockSample, PoolInfo, PoolRecord, UserPosition

if TYPE_CHECKING:
    from web3 import Web3  # pragma: no cover

T = TypeVar("T")


def fetch_all(
    tasks: Sequence[Callable[[], T]],
    *,
    max_workers: int = DEFAULT_MAX_WORKERS,
    desc: str | None = None,
) -> list[T]:
    """
    Run independent read tasks concurrently and return their results in task order.

    All-or-nothing: the first failure cancels whatever has not started yet and is re-raised.
    """
    if not tasks:
        return []
    with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(tasks)))) as pool:
        futures = [pool.submit(task) for task in tasks]
        try:
            with tqdm(total=len(futures), desc=desc, unit="call", file=sys.stderr, disable=desc is None) as pbar:
                for future in as_completed(futures):
                    future.result()
                    pbar.update(1)
        except BaseException:
            for future in futures:
                future.cancel()
            raise
        return [future.result() for future in futures]


def _call(operation: str, fn: Any, *args: Any) -> Any:
    """Execute a contract view call, turning any failure into ExternalReadError."""
    try:
        return fn(*args).call()
    except Exception as ex:  # pylint: disable=broad-exception-caught
        raise ExternalReadError(operation, ex) from ex


class LpStakingReader:
    """Read-only view of one LPStaking deployment."""

    def __init__(self, w3: "Web3", lp_staking_address: str) -> None:
        self.w3 = w3
        self.address = w3.to_checksum_address(lp_staking_address)
        self.contract = lp_staking_contract(w3, self.address)

    def block(self, identifier: int | str) -> BlockSample:
        return get_block(self.w3, identifier)

    def pool_count(self) -> int:
        return as_int(_call("poolLength()", self.contract.functions.poolLength))

    def reward_per_block(self) -> int:
        """Raw STG emitted per block across all pools."""
        return as_int(_call("stargatePerBlock()", self.contract.functions.stargatePerBlock))

    def total_allocation_points(self) -> int:
        return as_int(_call("totalAllocPoint()", self.contract.functions.totalAllocPoint))

    def reward_token(self) -> str:
        return str(_call("stargate()", self.contract.functions.stargate))

    def total_staked(self, pool_id: int) -> int:
        return as_int(_call(f"lpBalances({pool_id})", self.contract.functions.lpBalances, pool_id))

    def pool_info(self, pool_id: int) -> PoolInfo:
        lp_token, alloc_point, _last_reward_block, _acc_per_share = _call(
            f"poolInfo({pool_id})", self.contract.functions.poolInfo, pool_id
        )
        return PoolInfo(pool_id=pool_id, lp_token_address=str(lp_token), allocation_points=as_int(alloc_point))

    def user_position(self, pool_id: int, address: str) -> UserPosition:
        user = self.w3.to_checksum_address(address)
        amount, _reward_debt = _call(f"userInfo({pool_id}, {user})", self.contract.functions.userInfo, pool_id, user)
        pending = _call(
            f"pendingStargate({pool_id}, {user})", self.contract.functions.pendingStargate, pool_id, user
        )
        return UserPosition(pool_id=pool_id, staked_amount=as_int(amount), pending_reward=as_int(pending))

    def pool_record(self, info: PoolInfo) -> PoolRecord:
        """Load names, decimals, underlying token and staked supply for a pool."""
        lp_pool = lp_pool_contract(self.w3, info.lp_token_address)
        lp_name = _call(f"name() on LP {info.lp_token_address}", lp_pool.functions.name)
        underlying = str(_call(f"token() on LP {info.lp_token_address}", lp_pool.functions.token))
        decimals = as_int(_call(f"decimals() on LP {info.lp_token_address}", lp_pool.functions.decimals))

        token = erc20_contract(self.w3, underlying)
        underlying_name = _call(f"name() on token {underlying}", token.functions.name)
        underlying_symbol = _call(f"symbol() on token {underlying}", token.functions.symbol)

        return PoolRecord(
            pool_id=info.pool_id,
            allocation_points=info.allocation_points,
            total_staked=self.total_staked(info.pool_id),
            decimals=decimals,
            lp_asset_name=str(lp_name),
            underlying_asset_name=str(underlying_name),
            underlying_symbol=str(underlying_symbol),
            lp_token_address=info.lp_token_address,
            underlying_token_address=underlying,
        )
