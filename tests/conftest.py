"""
Pytest fixtures for solwallet tests. Fake node and price clients stand in for
the network; settings are re-read from a temporary environment per test.
"""

from __future__ import annotations

from typing import Any

import pytest

from solwallet.config import reset_settings_cache

# Valid Solana pubkeys (base58, 32 bytes)
VALID_WALLET = "9QCfNuQuxct1Xk9ytFYgxc5fThmTzL4pHQnSjjrVUrka"
VALID_WALLET_2 = "7F1WzVNQ1Qpurqxxdyv3UrFQR3uoNepULVW9A4bAJ5nZ"
# BIP-39 test vector phrase
TEST_MNEMONIC = (
    "abandon abandon abandon abandon abandon abandon "
    "abandon abandon abandon abandon abandon about"
)
NODE_URL = "https://node.test"


def system_transfer(source: str, destination: str, lamports: int) -> dict[str, Any]:
    """jsonParsed getTransaction result holding a single System Program transfer."""
    return {
        "slot": 1,
        "blockTime": 1700000000,
        "transaction": {
            "signatures": ["sig"],
            "message": {
                "accountKeys": [
                    {"pubkey": source, "signer": True, "writable": True},
                    {"pubkey": destination, "signer": False, "writable": True},
                ],
                "instructions": [
                    {
                        "program": "system",
                        "programId": "11111111111111111111111111111111",
                        "parsed": {
                            "type": "transfer",
                            "info": {
                                "source": source,
                                "destination": destination,
                                "lamports": lamports,
                            },
                        },
                    }
                ],
            },
        },
    }


def token_transfer(source: str, destination: str) -> dict[str, Any]:
    """jsonParsed result whose first instruction belongs to the SPL token program."""
    return {
        "transaction": {
            "message": {
                "instructions": [
                    {
                        "program": "spl-token",
                        "programId": "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA",
                        "parsed": {
                            "type": "transfer",
                            "info": {"source": source, "destination": destination, "amount": "5"},
                        },
                    }
                ],
            },
        },
    }


class FakeRpcClient:
    """Records calls and answers from in-memory balances and histories."""

    def __init__(
        self,
        balances: dict[str, int] | None = None,
        transactions: dict[str, list[Any]] | None = None,
        default_balance: int = 0,
    ) -> None:
        self.balances = balances or {}
        self.transactions = transactions or {}
        self.default_balance = default_balance
        self.calls: list[tuple[Any, ...]] = []

    async def get_balance(self, address: str) -> int:
        self.calls.append(("getBalance", address))
        return self.balances.get(address, self.default_balance)

    async def get_transactions_list(self, address: str, limit: int = 10) -> list[Any]:
        self.calls.append(("getTransactionsList", address, limit))
        return list(self.transactions.get(address, []))


class FakePriceClient:
    def __init__(self, price: float = 20.0) -> None:
        self.price = price
        self.calls = 0

    async def fetch_price(self) -> float:
        self.calls += 1
        return self.price


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point state storage at a temp dir and drop cached settings around each test."""
    for name in (
        "SOLANA_RPC_URL",
        "HELIUS_API_KEY",
        "SOLANA_NETWORK",
        "SOLANA_CLUSTER",
        "PRICE_API_URL",
        "PRICE_ASSET_ID",
        "PRICE_CURRENCY",
        "COINGECKO_API_KEY",
        "RPC_TIMEOUT_SEC",
        "TRANSACTIONS_LIMIT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("WALLET_STATE_PATH", str(tmp_path / "state.json"))
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def rpc():
    return FakeRpcClient()


@pytest.fixture
def price_client():
    return FakePriceClient(20.0)
