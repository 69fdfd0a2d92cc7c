"""
Application state: account directory, transitions, persistence and the
store that coordinates refresh chains.
"""

from solwallet.state.actions import Action, StateAction, reduce
from solwallet.state.app_state import AppState
from solwallet.state.persistence import JsonFilePersistor
from solwallet.state.store import WalletStore, create_store

__all__ = [
    "Action",
    "AppState",
    "JsonFilePersistor",
    "StateAction",
    "WalletStore",
    "create_store",
    "reduce",
]
