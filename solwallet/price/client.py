"""
Fiat price lookup against a CoinGecko-style simple price endpoint.

GET <url>?ids=<asset>&vs_currencies=<currency> answers
{"<asset>": {"<currency>": <number>}}; the number is the fiat value of one
native unit.
"""

from __future__ import annotations

from typing import Any

import httpx

from solwallet.config.env import (
    DEFAULT_PRICE_API_URL,
    DEFAULT_PRICE_ASSET_ID,
    DEFAULT_PRICE_CURRENCY,
)
from solwallet.core.exceptions import PriceSourceError
from solwallet.wallet_logging import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT_SEC = 30.0


class PriceClient:
    """Fetch the current fiat price of a single asset."""

    def __init__(
        self,
        url: str = DEFAULT_PRICE_API_URL,
        *,
        asset: str = DEFAULT_PRICE_ASSET_ID,
        currency: str = DEFAULT_PRICE_CURRENCY,
        api_key: str | None = None,
        timeout: float = DEFAULT_TIMEOUT_SEC,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self.asset = asset.lower()
        self.currency = currency.lower()
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["x-cg-demo-api-key"] = self.api_key
        return headers

    def _extract_price(self, body: Any) -> float:
        try:
            value = body[self.asset][self.currency]
        except (KeyError, TypeError) as e:
            raise PriceSourceError(
                f"price response missing {self.asset}.{self.currency}: {body!r}"
            ) from e
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise PriceSourceError(f"price for {self.asset}.{self.currency} is not a number: {value!r}")
        return float(value)

    async def fetch_price(self) -> float:
        """Return the current price; raise PriceSourceError on a malformed body."""
        params = {"ids": self.asset, "vs_currencies": self.currency}
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            transport=self._transport,
        ) as client:
            resp = await client.get(self.url, params=params, headers=self._headers())
        resp.raise_for_status()
        price = self._extract_price(resp.json())
        logger.info("price_fetched", asset=self.asset, currency=self.currency, price=price)
        return price
