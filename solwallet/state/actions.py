"""
State transitions.

Each StateAction maps to one small function over AppState; reduce() is the
single entry point the store uses. SOL_VALUE_REFRESHED changes nothing and
only exists so subscribers learn that a refresh chain finished.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from solwallet.accounts import Account
from solwallet.state.app_state import AppState
from solwallet.wallet_logging import get_logger

logger = get_logger(__name__)


class StateAction(str, Enum):
    SET_BALANCE = "set_balance"
    ADD_ACCOUNT = "add_account"
    REMOVE_ACCOUNT = "remove_account"
    SOL_VALUE_REFRESHED = "sol_value_refreshed"


@dataclass(frozen=True)
class Action:
    type: StateAction
    name: str | None = None
    balance: float | None = None
    account: Account | None = None

    @classmethod
    def set_balance(cls, name: str, balance: float) -> Action:
        return cls(StateAction.SET_BALANCE, name=name, balance=balance)

    @classmethod
    def add_account(cls, account: Account) -> Action:
        return cls(StateAction.ADD_ACCOUNT, account=account)

    @classmethod
    def remove_account(cls, name: str) -> Action:
        return cls(StateAction.REMOVE_ACCOUNT, name=name)

    @classmethod
    def sol_value_refreshed(cls) -> Action:
        return cls(StateAction.SOL_VALUE_REFRESHED)


def apply_set_balance(state: AppState, name: str, balance: float) -> AppState:
    # Unknown names are ignored
    account = state.accounts.get(name)
    if account is not None:
        account.set_balance(balance)
    return state


def apply_add_account(state: AppState, account: Account) -> AppState:
    state.add_account(account)
    return state


def apply_remove_account(state: AppState, name: str) -> AppState:
    state.remove_account(name)
    return state


def reduce(state: AppState, action: Action) -> AppState:
    """Apply action to state in place and return it."""
    if action.type is StateAction.SET_BALANCE:
        if action.name is None or action.balance is None:
            raise ValueError("SET_BALANCE requires name and balance")
        return apply_set_balance(state, action.name, action.balance)
    if action.type is StateAction.ADD_ACCOUNT:
        if action.account is None:
            raise ValueError("ADD_ACCOUNT requires account")
        return apply_add_account(state, action.account)
    if action.type is StateAction.REMOVE_ACCOUNT:
        if action.name is None:
            raise ValueError("REMOVE_ACCOUNT requires name")
        return apply_remove_account(state, action.name)
    if action.type is StateAction.SOL_VALUE_REFRESHED:
        return state
    raise ValueError(f"unknown action type: {action.type!r}")
