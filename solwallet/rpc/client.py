"""
Solana JSON-RPC client — balance and transaction history lookups.

Responsibilities:
- getBalance for an address (integer lamports).
- getSignaturesForAddress + getTransaction (jsonParsed) for recent history.
- Raise on transport errors (httpx) and on JSON-RPC error objects.

Calls are issued one at a time; there is no retry or backoff here, a failed
request aborts whatever operation chain issued it.
"""

from __future__ import annotations

import itertools
from typing import Any

import httpx

from solwallet.core.exceptions import SolanaRpcError
from solwallet.wallet_logging import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT_SEC = 30.0
DEFAULT_SIGNATURES_LIMIT = 10

# JSON-RPC request id counter
_request_ids = itertools.count(1)


def _build_rpc_body(method: str, params: list[Any]) -> dict[str, Any]:
    return {
        "jsonrpc": "2.0",
        "id": next(_request_ids),
        "method": method,
        "params": params,
    }


class SolanaRpcClient:
    """
    Thin async client over a Solana JSON-RPC HTTP endpoint.

    A new httpx.AsyncClient is opened per call, so instances are cheap and
    safe to keep on every account. Pass transport= to route requests through
    an httpx.MockTransport in tests.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT_SEC,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not url or not url.strip():
            raise ValueError("url must be non-empty")
        self.url = url.strip()
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            transport=self._transport,
        )

    async def call(self, method: str, params: list[Any] | None = None) -> Any:
        """Perform one JSON-RPC call and return its result; raise on HTTP or RPC error."""
        body = _build_rpc_body(method, params or [])
        async with self._client() as client:
            resp = await client.post(self.url, json=body)
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, dict):
            raise SolanaRpcError(None, f"{method} returned a non-object response")
        error = data.get("error")
        if error:
            if isinstance(error, dict):
                raise SolanaRpcError(error.get("code"), error.get("message"))
            raise SolanaRpcError(None, str(error))
        if "result" not in data:
            raise SolanaRpcError(None, f"{method} returned no result")
        return data["result"]

    async def get_balance(self, address: str) -> int:
        """Return the balance of address in lamports."""
        result = await self.call("getBalance", [address, {"commitment": "confirmed"}])
        value = result.get("value") if isinstance(result, dict) else result
        if value is None:
            raise SolanaRpcError(None, "getBalance returned no value")
        return int(value)

    async def get_signatures_for_address(
        self,
        address: str,
        limit: int = DEFAULT_SIGNATURES_LIMIT,
    ) -> list[dict[str, Any]]:
        """Return signature infos for address, newest first."""
        if not (1 <= limit <= 1000):
            raise ValueError("limit must be between 1 and 1000")
        result = await self.call(
            "getSignaturesForAddress",
            [address, {"limit": limit, "commitment": "confirmed"}],
        )
        return result if isinstance(result, list) else []

    async def get_transaction(self, signature: str) -> dict[str, Any] | None:
        """Return a jsonParsed transaction envelope, or None when the node does not know it."""
        return await self.call(
            "getTransaction",
            [
                signature,
                {
                    "encoding": "jsonParsed",
                    "commitment": "confirmed",
                    "maxSupportedTransactionVersion": 0,
                },
            ],
        )

    async def get_transactions_list(
        self,
        address: str,
        limit: int = DEFAULT_SIGNATURES_LIMIT,
    ) -> list[dict[str, Any] | None]:
        """
        Fetch the most recent transactions touching address, newest first.

        One getTransaction round trip per signature, sequentially. Entries the
        node cannot return stay in the list as None so positions line up with
        the signature list.
        """
        signatures = await self.get_signatures_for_address(address, limit)
        transactions: list[dict[str, Any] | None] = []
        for item in signatures:
            sig = item.get("signature") if isinstance(item, dict) else None
            if not sig:
                transactions.append(None)
                continue
            transactions.append(await self.get_transaction(sig))
        logger.debug(
            "rpc_transactions_fetched",
            address=address,
            signature_count=len(signatures),
        )
        return transactions
