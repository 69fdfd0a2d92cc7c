"""
Transaction history decoding.

Turns jsonParsed getTransaction payloads into flat Transaction records,
keeping unsupported shapes as None placeholders.
"""

from solwallet.transactions.models import LAMPORTS_PER_SOL, Transaction, lamports_to_sol
from solwallet.transactions.parser import parse_transactions, parse_transfer

__all__ = [
    "LAMPORTS_PER_SOL",
    "Transaction",
    "lamports_to_sol",
    "parse_transactions",
    "parse_transfer",
]
