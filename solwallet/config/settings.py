"""
Application settings.

Collects every env-derived value into one frozen dataclass so the store,
accounts and price source read a single source of truth.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from solwallet.config import env


@dataclass(frozen=True)
class Settings:
    rpc_url: str
    network: str
    price_api_url: str
    price_asset_id: str
    price_currency: str
    coingecko_api_key: str | None
    state_path: Path
    rpc_timeout_sec: float
    transactions_limit: int


def load_settings() -> Settings:
    """Build Settings from the current environment (no caching)."""
    return Settings(
        rpc_url=env.get_solana_rpc_url(),
        network=env.get_solana_network(),
        price_api_url=env.get_price_api_url(),
        price_asset_id=env.get_price_asset_id(),
        price_currency=env.get_price_currency(),
        coingecko_api_key=env.get_coingecko_api_key(),
        state_path=env.get_state_path(),
        rpc_timeout_sec=env.get_rpc_timeout_sec(),
        transactions_limit=env.get_transactions_limit(),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loaded on first use."""
    return load_settings()


def reset_settings_cache() -> None:
    """Drop cached settings so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
