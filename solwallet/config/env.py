"""
Environment variable loading for solwallet.

- SOLANA_NETWORK: devnet | mainnet (default: devnet)
- SOLANA_RPC_URL: node endpoint used for new accounts and watchers
- HELIUS_API_KEY: Helius API key (fallback for the RPC URL)
- PRICE_API_URL, PRICE_ASSET_ID, PRICE_CURRENCY, COINGECKO_API_KEY: fiat price source
- WALLET_STATE_PATH: JSON file holding the persisted account directory
- RPC_TIMEOUT_SEC, TRANSACTIONS_LIMIT: HTTP timeout and history depth
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is solwallet/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEVNET_RPC_URL = "https://api.devnet.solana.com"
MAINNET_RPC_URL = "https://api.mainnet-beta.solana.com"
HELIUS_MAINNET_URL_TEMPLATE = "https://mainnet.helius-rpc.com/?api-key={key}"
HELIUS_DEVNET_URL_TEMPLATE = "https://devnet.helius-rpc.com/?api-key={key}"

DEFAULT_PRICE_API_URL = "https://api.coingecko.com/api/v3/simple/price"
DEFAULT_PRICE_ASSET_ID = "solana"
DEFAULT_PRICE_CURRENCY = "usd"
DEFAULT_STATE_PATH = Path.home() / ".solwallet" / "state.json"
DEFAULT_RPC_TIMEOUT_SEC = 30.0
DEFAULT_TRANSACTIONS_LIMIT = 10


def load_wallet_env() -> None:
    """Load .env from project root. Safe to call multiple times; existing env wins."""
    load_dotenv(_ENV_PATH, override=False)


def get_solana_network() -> str:
    """
    Return SOLANA_NETWORK from env: devnet | mainnet.
    Default: devnet.
    """
    load_wallet_env()
    raw = (os.getenv("SOLANA_NETWORK") or os.getenv("SOLANA_CLUSTER") or "devnet").strip().lower()
    if raw in ("mainnet", "mainnet-beta"):
        return "mainnet"
    return "devnet"


def get_solana_rpc_url() -> str:
    """
    Resolve Solana RPC URL from env.
    Order: SOLANA_RPC_URL > HELIUS_API_KEY (network-specific) > devnet/mainnet default.
    """
    load_wallet_env()
    url = (os.getenv("SOLANA_RPC_URL") or "").strip()
    if url:
        return url
    key = (os.getenv("HELIUS_API_KEY") or "").strip()
    network = get_solana_network()
    if key:
        if network == "devnet":
            return HELIUS_DEVNET_URL_TEMPLATE.format(key=key)
        return HELIUS_MAINNET_URL_TEMPLATE.format(key=key)
    return DEVNET_RPC_URL if network == "devnet" else MAINNET_RPC_URL


def get_price_api_url() -> str:
    load_wallet_env()
    return (os.getenv("PRICE_API_URL") or "").strip() or DEFAULT_PRICE_API_URL


def get_price_asset_id() -> str:
    load_wallet_env()
    return (os.getenv("PRICE_ASSET_ID") or "").strip().lower() or DEFAULT_PRICE_ASSET_ID


def get_price_currency() -> str:
    load_wallet_env()
    return (os.getenv("PRICE_CURRENCY") or "").strip().lower() or DEFAULT_PRICE_CURRENCY


def get_coingecko_api_key() -> str | None:
    load_wallet_env()
    return (os.getenv("COINGECKO_API_KEY") or "").strip() or None


def get_state_path() -> Path:
    """Return WALLET_STATE_PATH (user home expanded) or ~/.solwallet/state.json."""
    load_wallet_env()
    raw = (os.getenv("WALLET_STATE_PATH") or "").strip()
    if raw:
        return Path(raw).expanduser()
    return DEFAULT_STATE_PATH


def _get_float(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def get_rpc_timeout_sec() -> float:
    load_wallet_env()
    return max(1.0, _get_float("RPC_TIMEOUT_SEC", DEFAULT_RPC_TIMEOUT_SEC))


def get_transactions_limit() -> int:
    """Number of recent signatures fetched per account (1-1000, RPC limit)."""
    load_wallet_env()
    return min(1000, max(1, _get_int("TRANSACTIONS_LIMIT", DEFAULT_TRANSACTIONS_LIMIT)))
