"""
solwallet — client-side state layer for a Solana mobile wallet.

Tracks owned wallet accounts and watched addresses, refreshes balances and
transaction history from a Solana JSON-RPC node, converts balances to a fiat
reference price, and persists the account directory between runs.
"""

__version__ = "0.1.0"
