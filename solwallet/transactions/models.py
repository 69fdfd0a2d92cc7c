"""
Data models for parsed account history.
"""

from __future__ import annotations

from dataclasses import dataclass

LAMPORTS_PER_SOL = 1_000_000_000


def lamports_to_sol(lamports: int | float) -> float:
    """Convert the indivisible smallest unit to SOL (lamports / 10^9)."""
    return lamports / LAMPORTS_PER_SOL


@dataclass(frozen=True)
class Transaction:
    """
    Flattened view of a native SOL transfer as seen by one account.

    received is True when the owning account is the destination.
    """

    origin: str
    destination: str
    amount: float
    """Transfer amount in SOL."""
    received: bool
