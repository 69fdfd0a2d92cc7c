"""
Solana node access: async JSON-RPC client used by every account for
balance and transaction history lookups.
"""

from solwallet.rpc.client import SolanaRpcClient

__all__ = ["SolanaRpcClient"]
