"""Stargate LPStaking yield analysis package."""

from typing import NoReturn

__version__ = "0.1.0"


def _entry_point() -> NoReturn:
    """Entry point for the stargate-yield script."""
    import sys

    from stargate_yield.cli import main

    raise SystemExit(main(sys.argv[1:]))
