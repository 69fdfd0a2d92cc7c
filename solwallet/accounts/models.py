"""
Account model — owned wallets and watched addresses.

Both variants share one operation set (refresh_balance, load_transactions,
to_json) and are told apart by their account_type tag. Account is the
closed union of the two; nothing else is expected to subclass BaseAccount.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Union

from solders.keypair import Keypair

from solwallet.accounts.keys import derive_keypair, generate_mnemonic, is_valid_mnemonic, normalize_mnemonic
from solwallet.config import get_settings
from solwallet.core.exceptions import InvalidAddressError, InvalidMnemonicError
from solwallet.rpc import SolanaRpcClient
from solwallet.transactions import Transaction, lamports_to_sol, parse_transactions
from solwallet.utils.wallet_utils import is_valid_wallet
from solwallet.wallet_logging import bind_account, get_logger

logger = get_logger(__name__)


class AccountType(str, Enum):
    """Persisted variant tag; values match the stored accountType strings."""

    WALLET = "AccountType.Wallet"
    CLIENT = "AccountType.Client"

    @classmethod
    def from_value(cls, value: Any) -> AccountType:
        """Client only on an exact match; anything else restores as a wallet."""
        if value == cls.CLIENT.value:
            return cls.CLIENT
        return cls.WALLET


@dataclass(eq=False)
class BaseAccount:
    """
    Shared state and refresh operations.

    balance is in SOL; fiat_balance is balance * fiat_price and is rewritten
    whenever the balance or price changes. transactions is most-recent-first
    and may hold None for transaction shapes the parser does not support.
    """

    account_type: ClassVar[AccountType]

    name: str
    url: str
    address: str = ""
    balance: float = 0.0
    fiat_price: float = 0.0
    fiat_balance: float = 0.0
    transactions: list[Transaction | None] = field(default_factory=list)
    client: SolanaRpcClient | None = field(default=None, repr=False)

    @property
    def rpc(self) -> SolanaRpcClient:
        """RPC client bound to this account's node URL, created on first use."""
        if self.client is None:
            self.client = SolanaRpcClient(self.url, timeout=get_settings().rpc_timeout_sec)
        return self.client

    async def resolve_address(self) -> str:
        if not self.address:
            raise ValueError(f"account {self.name!r} has no address")
        return self.address

    def set_fiat_price(self, price: float) -> None:
        self.fiat_price = price
        self.fiat_balance = self.balance * price

    def set_balance(self, balance: float) -> None:
        """Write the balance directly and keep fiat_balance in sync."""
        self.balance = balance
        self.fiat_balance = balance * self.fiat_price

    async def refresh_balance(self) -> None:
        """Query the node for the address balance and rewrite balance and fiat value."""
        address = await self.resolve_address()
        lamports = await self.rpc.get_balance(address)
        self.set_balance(lamports_to_sol(lamports))
        bind_account(self.name, address).debug(
            "account_balance_refreshed",
            balance=self.balance,
            fiat_balance=self.fiat_balance,
        )

    async def load_transactions(self, limit: int | None = None) -> None:
        """Replace transactions with the parsed recent history of the address."""
        address = await self.resolve_address()
        if limit is None:
            limit = get_settings().transactions_limit
        raw = await self.rpc.get_transactions_list(address, limit)
        self.transactions = parse_transactions(list(raw), address)
        bind_account(self.name, address).debug(
            "account_transactions_loaded",
            count=len(self.transactions),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "address": self.address,
            "balance": self.balance,
            "url": self.url,
            "accountType": self.account_type.value,
        }


@dataclass(eq=False, kw_only=True)
class WalletAccount(BaseAccount):
    """Account backed by a seed phrase; holds the derived signing key pair once loaded."""

    account_type: ClassVar[AccountType] = AccountType.WALLET

    mnemonic: str = field(repr=False)
    keypair: Keypair | None = field(default=None, repr=False)

    async def load_keypair(self) -> Keypair:
        """
        Derive the key pair from the mnemonic in a worker thread and adopt its address.

        Derivation is CPU-bound, so it runs in the default executor to keep the
        event loop responsive.
        """
        loop = asyncio.get_running_loop()
        keypair = await loop.run_in_executor(None, derive_keypair, self.mnemonic)
        self.keypair = keypair
        self.address = str(keypair.pubkey())
        bind_account(self.name, self.address).info("wallet_keypair_loaded")
        return keypair

    async def ensure_keypair(self) -> Keypair:
        """Return the key pair, deriving it first if this account was restored from storage."""
        if self.keypair is None:
            return await self.load_keypair()
        return self.keypair

    async def resolve_address(self) -> str:
        if not self.address:
            await self.load_keypair()
        return self.address

    @classmethod
    async def generate(
        cls,
        name: str,
        url: str,
        *,
        client: SolanaRpcClient | None = None,
    ) -> WalletAccount:
        """Create a zero-balance wallet with a random mnemonic, derive keys, fetch balance."""
        account = cls(name=name, url=url, mnemonic=generate_mnemonic(), client=client)
        await account.load_keypair()
        await account.refresh_balance()
        logger.info("wallet_generated", account_name=name, address=account.address)
        return account

    @classmethod
    async def from_mnemonic(
        cls,
        name: str,
        url: str,
        mnemonic: str,
        *,
        client: SolanaRpcClient | None = None,
    ) -> WalletAccount:
        """Import an existing seed phrase; the address comes from the derived keys."""
        phrase = normalize_mnemonic(mnemonic)
        if not is_valid_mnemonic(phrase):
            raise InvalidMnemonicError("mnemonic failed BIP-39 validation")
        account = cls(name=name, url=url, mnemonic=phrase, client=client)
        await account.load_keypair()
        return account

    def to_json(self) -> dict[str, Any]:
        record = super().to_json()
        record["mnemonic"] = self.mnemonic
        return record


@dataclass(eq=False)
class WatcherAccount(BaseAccount):
    """Read-only account watching a third-party address; holds no key material."""

    account_type: ClassVar[AccountType] = AccountType.CLIENT

    @classmethod
    def watch(
        cls,
        name: str,
        url: str,
        address: str,
        *,
        client: SolanaRpcClient | None = None,
    ) -> WatcherAccount:
        if not is_valid_wallet(address):
            raise InvalidAddressError(f"Invalid Solana address: {address!r}")
        return cls(name=name, url=url, address=address.strip(), client=client)


Account = Union[WalletAccount, WatcherAccount]


def _require_str(record: dict[str, Any], key: str) -> str:
    value = record[key]
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    return value


def _require_number(record: dict[str, Any], key: str) -> float:
    value = record[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key} must be a number, got {type(value).__name__}")
    return float(value)


def account_from_json(name: str, record: dict[str, Any]) -> Account:
    """
    Rebuild an account from its persisted record; raise on any malformed field.

    The directory key is the account name. Wallets come back on the restore
    path: address known, key pair derived later on demand. Addresses and
    mnemonics are validated here since nothing re-checks them before first use.
    """
    if not isinstance(record, dict):
        raise TypeError(f"account record for {name!r} must be an object")
    address = _require_str(record, "address")
    balance = _require_number(record, "balance")
    url = _require_str(record, "url")
    if AccountType.from_value(record.get("accountType")) is AccountType.CLIENT:
        if not is_valid_wallet(address):
            raise InvalidAddressError(f"watcher {name!r} has invalid address {address!r}")
        return WatcherAccount(name=name, url=url, address=address.strip(), balance=balance)
    mnemonic = _require_str(record, "mnemonic")
    if not is_valid_mnemonic(mnemonic):
        raise InvalidMnemonicError(f"wallet {name!r} has an invalid mnemonic")
    if address and not is_valid_wallet(address):
        raise InvalidAddressError(f"wallet {name!r} has invalid address {address!r}")
    return WalletAccount(name=name, url=url, address=address, balance=balance, mnemonic=mnemonic)
