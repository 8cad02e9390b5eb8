"""CLI and main logic."""

import argparse
import os
import sys

from stargate_yield.console import print_yield_report
from stargate_yield.constants import CHAINS, DEFAULT_CHAIN, DEFAULT_MAX_WORKERS, DEFAULT_TIMEOUT
from stargate_yield.errors import StargateYieldError, UnsupportedChainError
from stargate_yield.models import ChainConfig


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse command-line arguments."""
    p = argparse.ArgumentParser(description="Stargate LPStaking yield report for a wallet address.")
    p.add_argument("-a", "--address", required=True, help="Wallet address to query.")
    p.add_argument(
        "-c",
        "--chain",
        default=DEFAULT_CHAIN,
        help=f"Chain to connect to ({', '.join(CHAINS)}). Default: {DEFAULT_CHAIN}.",
    )
    p.add_argument(
        "--rpc-url",
        default=None,
        help="RPC URL. Defaults to <CHAIN>_RPC_URL (e.g. MAINNET_RPC_URL), then a public endpoint.",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Show pool totals, reward projections and APYs.")
    return p.parse_args(argv)


def get_chain(name: str) -> ChainConfig:
    """Look up a chain in the chain table, failing fast on unknown names."""
    try:
        return CHAINS[name.strip().lower()]
    except KeyError:
        raise UnsupportedChainError(name, CHAINS.keys()) from None


def resolve_rpc_url(chain: ChainConfig, explicit: str | None) -> str:
    """--rpc-url, then <CHAIN>_RPC_URL, then the chain's first public endpoint."""
    return explicit or os.getenv(f"{chain.name.upper()}_RPC_URL") or chain.default_rpc_urls[0]


def main(argv: list[str]) -> int:
    """Main entry point."""
    args = parse_args(argv)

    from web3 import Web3

    from stargate_yield.onchain import LpStakingReader
    from stargate_yield.pipeline import collect_yield_report
    from stargate_yield.prices import CoinGeckoPriceFeed

    try:
        chain = get_chain(args.chain)
    except UnsupportedChainError as ex:
        print(f"Error: {ex}", file=sys.stderr)
        return 2

    if not Web3.is_address(args.address):
        print(f"Error: invalid address: {args.address}", file=sys.stderr)
        return 2
    address = Web3.to_checksum_address(args.address)

    rpc_url = resolve_rpc_url(chain, args.rpc_url)
    w3 = Web3(Web3.HTTPProvider(rpc_url, request_kwargs={"timeout": DEFAULT_TIMEOUT}))
    if not w3.is_connected():
        print(f"Error: failed to connect to RPC at {rpc_url}", file=sys.stderr)
        return 2
    print(f"ℹ️ Connected to chain: {chain.name}", file=sys.stderr)
    print(f"ℹ️ Stargate LPStaking contract: {chain.lp_staking_address}", file=sys.stderr)

    feed = CoinGeckoPriceFeed(chain.coingecko_platform, api_key=os.getenv("COINGECKO_API_KEY"))
    try:
        feed.ping()
        reader = LpStakingReader(w3, chain.lp_staking_address)
        report = collect_yield_report(chain, address, reader, feed, max_workers=DEFAULT_MAX_WORKERS)
    except StargateYieldError as ex:
        print(f"Error: {ex}", file=sys.stderr)
        return 1

    print_yield_report(report, verbose=args.verbose)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
