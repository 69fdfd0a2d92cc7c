"""Wallet address validation utilities."""

from solders.pubkey import Pubkey


def is_valid_wallet(w: str) -> bool:
    """Return True if w is a valid Solana wallet (Pubkey) address."""
    if not isinstance(w, str) or not w.strip():
        return False
    try:
        Pubkey.from_string(w.strip())
        return True
    except Exception:
        return False
