"""Error types raised while building a yield report."""

from collections.abc import Iterable


class StargateYieldError(Exception):
    """Base class for all errors raised by stargate_yield."""


class UnsupportedChainError(StargateYieldError, KeyError):
    """Requested chain has no entry in the chain table."""

    def __init__(self, chain: str, supported: Iterable[str]) -> None:
        self.chain = chain
        super().__init__(f"Unsupported chain {chain!r} (supported: {', '.join(sorted(supported))})")

    def __str__(self) -> str:
        return str(self.args[0])


class InsufficientChainHistoryError(StargateYieldError):
    """Chain is too young to sample an average block time."""


class BlockSampleError(StargateYieldError):
    """Block samples do not span the expected number of blocks."""


class BlockTimeDivisionByZeroError(StargateYieldError, ZeroDivisionError):
    """Average block time truncated to zero seconds (sub-second chain)."""


class AllocationAccountingError(StargateYieldError):
    """totalAllocPoint is zero while pools are active."""


class UndefinedYieldError(StargateYieldError, ZeroDivisionError):
    """Yield denominator (staked supply) is zero. Recovered per pool."""


class PriceUnavailableError(StargateYieldError, LookupError):
    """A token price could not be resolved. Recovered per pool."""

    def __init__(self, token: str, role: str) -> None:
        self.token = token
        self.role = role
        super().__init__(f"no USD price for {role} token {token}")


class ExternalReadError(StargateYieldError):
    """A chain or price-feed read failed; aborts the run."""

    def __init__(self, operation: str, cause: BaseException | None = None) -> None:
        self.operation = operation
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"{operation} failed{detail}")
