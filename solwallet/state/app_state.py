"""
AppState — the account directory plus the shared fiat price.

Display names are the only identity key. After any price refresh every
account carries the same fiat_price as the state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from solwallet.accounts import Account, account_from_json
from solwallet.price import PriceClient
from solwallet.wallet_logging import get_logger

logger = get_logger(__name__)

ACCOUNT_NAME_PREFIX = "Account"


@dataclass
class AppState:
    accounts: dict[str, Account] = field(default_factory=dict)
    sol_value: float = 0.0

    def add_account(self, account: Account) -> None:
        """Insert or overwrite by display name, stamping the current fiat price."""
        account.set_fiat_price(self.sol_value)
        self.accounts[account.name] = account

    def remove_account(self, name: str) -> Account | None:
        return self.accounts.pop(name, None)

    def generate_account_name(self) -> str:
        """Return the lowest-numbered "Account N" not already in the directory."""
        n = 0
        while f"{ACCOUNT_NAME_PREFIX} {n}" in self.accounts:
            n += 1
        return f"{ACCOUNT_NAME_PREFIX} {n}"

    async def load_sol_value(self, price_client: PriceClient) -> float:
        """
        Fetch the current fiat price, store it, then refresh every account's
        balance one after another with the new price applied.
        """
        self.sol_value = await price_client.fetch_price()
        for account in list(self.accounts.values()):
            account.set_fiat_price(self.sol_value)
            await account.refresh_balance()
        logger.info(
            "state_sol_value_loaded",
            sol_value=self.sol_value,
            account_count=len(self.accounts),
        )
        return self.sol_value

    def to_json(self) -> dict[str, Any]:
        return {
            "accounts": {name: account.to_json() for name, account in self.accounts.items()},
        }

    @classmethod
    def from_json(cls, data: Any) -> AppState:
        """
        Rebuild state from its persisted form. Never raises: any malformed
        payload (None, wrong types, bad account record) yields an empty state.
        """
        if data is None:
            return cls()
        try:
            raw_accounts = data["accounts"]
            if not isinstance(raw_accounts, dict):
                raise TypeError("accounts must be an object")
            accounts: dict[str, Account] = {}
            for name, record in raw_accounts.items():
                if not isinstance(name, str):
                    raise TypeError("account names must be strings")
                accounts[name] = account_from_json(name, record)
            return cls(accounts=accounts)
        except Exception as e:
            logger.warning("state_restore_failed_reset", error=str(e))
            return cls()
