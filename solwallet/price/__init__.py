"""Fiat reference price source for converting SOL balances."""

from solwallet.price.client import PriceClient

__all__ = ["PriceClient"]
