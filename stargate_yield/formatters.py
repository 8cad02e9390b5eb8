"""Formatting and conversion utilities."""

from decimal import Decimal, localcontext


def as_int(value, *, default: int = 0) -> int:
    """Convert value to int, handling various types."""
    if value is None:
        return default
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        v = value.strip()
        if v.startswith("0x"):
            return int(v, 16)
        return int(v)
    return int(value)


def format_units(raw: int, decimals: int) -> str:
    """Exact decimal rendering of a raw token amount (trailing zeros stripped)."""
    with localcontext() as ctx:
        ctx.prec = 80
        s = f"{Decimal(raw).scaleb(-decimals):f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def format_token(value: float, ticker: str, *, decimals: int = 4) -> str:
    """Format a token amount."""
    return f"{value:,.{decimals}f} {ticker}"


def format_pct(value: float, *, decimals: int = 4) -> str:
    """Format a percentage."""
    return f"{value:,.{decimals}f}%"


def format_usd(value: float) -> str:
    """Format a USD amount as currency, e.g. $1,234.50 or -$3.00."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_unavailable(reason: str | None = None) -> str:
    """Placeholder for a field that could not be computed."""
    return f"n/a ({reason})" if reason else "n/a"

