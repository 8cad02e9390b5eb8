"""Contract bindings for LPStaking, LP pools and ERC20 tokens."""

from typing import TYPE_CHECKING, Any

from stargate_yield.constants import ERC20_MIN_ABI, LP_POOL_MIN_ABI, LP_STAKING_MIN_ABI

if TYPE_CHECKING:
    from web3 import Web3  # pragma: no cover


def lp_staking_contract(w3: "Web3", address: str) -> Any:
    """LPStaking (MasterChef-style rewards distributor) bound to `address`."""
    return w3.eth.contract(address=w3.to_checksum_address(address), abi=LP_STAKING_MIN_ABI)


def lp_pool_contract(w3: "Web3", address: str) -> Any:
    """Stargate LP pool token bound to `address`."""
    return w3.eth.contract(address=w3.to_checksum_address(address), abi=LP_POOL_MIN_ABI)


def erc20_contract(w3: "Web3", address: str) -> Any:
    """ERC20 metadata views bound to `address`."""
    return w3.eth.contract(address=w3.to_checksum_address(address), abi=ERC20_MIN_ABI)
