"""
Wallet and watcher accounts plus seed phrase key derivation.
"""

from solwallet.accounts.models import (
    Account,
    AccountType,
    BaseAccount,
    WalletAccount,
    WatcherAccount,
    account_from_json,
)

__all__ = [
    "Account",
    "AccountType",
    "BaseAccount",
    "WalletAccount",
    "WatcherAccount",
    "account_from_json",
]
