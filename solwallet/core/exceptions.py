"""
Application-level exceptions.

Network and RPC failures are raised and left to propagate to the caller;
persisted-state problems never surface here (they degrade to an empty state).
"""

from __future__ import annotations


class SolwalletError(Exception):
    """Base exception for solwallet problems."""


class SolanaRpcError(SolwalletError):
    """Raised when a Solana JSON-RPC response carries an error object."""

    def __init__(self, code: int | None, message: str | None):
        super().__init__(f"Solana RPC error {code}: {message}")
        self.code = code
        self.message = message


class PriceSourceError(SolwalletError):
    """Raised when the fiat price endpoint answers with an unexpected body."""


class InvalidMnemonicError(SolwalletError, ValueError):
    """Raised when an imported seed phrase fails BIP-39 validation."""


class InvalidAddressError(SolwalletError, ValueError):
    """Raised when a watched address is not a valid Solana public key."""
