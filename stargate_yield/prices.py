"""CoinGecko spot price feed."""

from typing import Any

import requests

from stargate_yield.constants import COINGECKO_API_BASE, COINGECKO_API_KEY_HEADER, DEFAULT_PRICE_TIMEOUT
from stargate_yield.errors import ExternalReadError


def _usd_prices(payload: Any) -> dict[str, float]:
    """Extract {key: usd} from a CoinGecko `simple/*` response, skipping entries without a USD quote."""
    if not isinstance(payload, dict):
        raise ValueError(f"unexpected response shape: {type(payload).__name__}")
    out: dict[str, float] = {}
    for key, quote in payload.items():
        if isinstance(quote, dict) and quote.get("usd") is not None:
            out[str(key).lower()] = float(quote["usd"])
    return out


class CoinGeckoPriceFeed:
    """USD spot prices from the CoinGecko public (or demo-key) API."""

    def __init__(
        self,
        platform: str,
        *,
        api_key: str | None = None,
        timeout_s: float = DEFAULT_PRICE_TIMEOUT,
        base_url: str = COINGECKO_API_BASE,
        session: requests.Session | None = None,
    ) -> None:
        self.platform = platform
        self.timeout_s = timeout_s
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        if api_key:
            self.session.headers[COINGECKO_API_KEY_HEADER] = api_key

    def _get(self, operation: str, path: str, params: dict[str, str]) -> dict[str, float]:
        try:
            resp = self.session.get(f"{self.base_url}{path}", params=params, timeout=self.timeout_s)
            resp.raise_for_status()
            return _usd_prices(resp.json())
        except (requests.RequestException, ValueError) as ex:
            raise ExternalReadError(operation, ex) from ex

    def ping(self) -> None:
        """Fail fast if the API is unreachable."""
        try:
            resp = self.session.get(f"{self.base_url}/ping", timeout=self.timeout_s)
            resp.raise_for_status()
        except requests.RequestException as ex:
            raise ExternalReadError("CoinGecko ping", ex) from ex

    def prices_by_address(self, addresses: list[str]) -> dict[str, float]:
        """Lower-cased token address -> USD, for tokens on this feed's platform."""
        if not addresses:
            return {}
        return self._get(
            f"CoinGecko token price ({len(addresses)} tokens on {self.platform})",
            f"/simple/token_price/{self.platform}",
            {"contract_addresses": ",".join(a.lower() for a in addresses), "vs_currencies": "usd"},
        )

    def prices_by_identifier(self, identifiers: list[str]) -> dict[str, float]:
        """CoinGecko coin id -> USD."""
        if not identifiers:
            return {}
        return self._get(
            f"CoinGecko price ({', '.join(identifiers)})",
            "/simple/price",
            {"ids": ",".join(identifiers), "vs_currencies": "usd"},
        )
