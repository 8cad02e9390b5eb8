"""Block reads and block-time sampling."""

from typing import TYPE_CHECKING, Protocol

from stargate_yield.constants import BLOCK_TIME_SAMPLE_SPAN
from stargate_yield.errors import ExternalReadError, InsufficientChainHistoryError
from stargate_yield.formatters import as_int
from stargate_yield.models import BlockSample

if TYPE_CHECKING:
    from web3 import Web3  # pragma: no cover


class BlockSource(Protocol):
    def block(self, identifier: int | str) -> BlockSample: ...


def get_block(w3: "Web3", block_identifier: int | str) -> BlockSample:
    """Read a block's number and timestamp."""
    try:
        block = w3.eth.get_block(block_identifier)
    except Exception as ex:  # pylint: disable=broad-exception-caught
        raise ExternalReadError(f"getBlock({block_identifier})", ex) from ex
    return BlockSample(number=as_int(block["number"]), timestamp=as_int(block["timestamp"]))


def sample_block_times(source: BlockSource) -> tuple[BlockSample, BlockSample]:
    """
    Read `latest` and the block BLOCK_TIME_SAMPLE_SPAN before it.

    Returns (older, newer).
    """
    newer = source.block("latest")
    if newer.number < BLOCK_TIME_SAMPLE_SPAN:
        raise InsufficientChainHistoryError(
            f"chain has {newer.number} blocks; at least {BLOCK_TIME_SAMPLE_SPAN} are needed to estimate block time"
        )
    older = source.block(newer.number - BLOCK_TIME_SAMPLE_SPAN)
    return older, newer
